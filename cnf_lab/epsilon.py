import logging
from typing import FrozenSet

from .grammar import Grammar
from .symbols import EPSILON, NonTerminal, Production

log = logging.getLogger(__name__)


def find_nullable(grammar: Grammar) -> FrozenSet[NonTerminal]:
    """Non-terminals that derive ε, directly or through other nullable symbols."""
    nullable = {p.left for p in grammar.productions if p.is_epsilon}

    changed = True
    while changed:
        changed = False
        for p in grammar.productions:
            if p.left in nullable or p.is_epsilon:
                continue
            if all(symbol in nullable for symbol in p.right):
                nullable.add(p.left)
                changed = True

    return frozenset(nullable)


def _drop_positions(right, positions):
    # each subset of nullable positions gives one candidate, the original included
    for mask in range(1 << len(positions)):
        dropped = {pos for bit, pos in enumerate(positions) if (mask >> bit) & 1}
        yield [symbol for i, symbol in enumerate(right) if i not in dropped]


def eliminate_epsilon(grammar: Grammar) -> Grammar:
    nullable = find_nullable(grammar)
    log.debug("nullable: {%s}", ", ".join(str(n) for n in nullable))

    productions = list(grammar.productions)
    seen = set(productions)
    for p in grammar.productions:
        if p.is_epsilon:
            continue

        positions = [i for i, symbol in enumerate(p.right) if symbol in nullable]
        if not positions:
            continue

        for right in _drop_positions(p.right, positions):
            if not right:
                if p.left != grammar.start:
                    continue
                right = [EPSILON]
            candidate = Production(p.left, right)
            if candidate not in seen:
                seen.add(candidate)
                productions.append(candidate)

    productions = [p for p in productions if not (p.is_epsilon and p.left != grammar.start)]
    return grammar.replace(productions=productions)
