"""
Removal of useless symbols: the ones that cannot be reached from the start
symbol, and the ones that never derive a string of terminals.
"""
import logging
from collections import deque
from typing import FrozenSet

from .grammar import Grammar
from .symbols import EPSILON, NonTerminal

log = logging.getLogger(__name__)


def _names(symbols):
    return ", ".join(sorted(str(s) for s in symbols))


def find_accessible(grammar: Grammar) -> FrozenSet:
    accessible = {grammar.start}
    queue = deque([grammar.start])

    while queue:
        current = queue.popleft()
        for p in grammar.productions_for(current):
            for symbol in p.right:
                if symbol is EPSILON or symbol in accessible:
                    continue
                accessible.add(symbol)
                if isinstance(symbol, NonTerminal):
                    queue.append(symbol)

    return frozenset(accessible)


def eliminate_inaccessible(grammar: Grammar) -> Grammar:
    accessible = find_accessible(grammar)
    log.debug("accessible: {%s}", _names(accessible))

    productions = [
        p for p in grammar.productions
        if p.left in accessible and all(s is EPSILON or s in accessible for s in p.right)
    ]
    return grammar.replace(
        non_terminals=[n for n in grammar.non_terminals if n in accessible],
        terminals=[t for t in grammar.terminals if t in accessible],
        productions=productions,
    )


def find_productive(grammar: Grammar) -> FrozenSet:
    """Terminals plus every non-terminal that derives some terminal string."""
    productive = set(grammar.terminals)

    changed = True
    while changed:
        changed = False
        for p in grammar.productions:
            if p.left in productive:
                continue
            if p.is_epsilon or all(s in productive for s in p.right):
                productive.add(p.left)
                changed = True

    return frozenset(productive)


def eliminate_nonproductive(grammar: Grammar) -> Grammar:
    productive = find_productive(grammar)
    log.debug("productive: {%s}", _names(n for n in productive if isinstance(n, NonTerminal)))
    if grammar.start not in productive:
        log.debug("start symbol %s is not productive, the language is empty", grammar.start)

    productions = [
        p for p in grammar.productions
        if p.left in productive and (p.is_epsilon or all(s in productive for s in p.right))
    ]
    # the start symbol stays in VN even when it generates nothing
    pruned = grammar.replace(
        non_terminals=[n for n in grammar.non_terminals if n in productive or n == grammar.start],
        productions=productions,
    )
    # dropping rules can orphan symbols that were reachable only through them
    return eliminate_inaccessible(pruned)
