import logging
from typing import Dict, FrozenSet

from .closure import transitive_closure
from .grammar import Grammar, dedupe
from .symbols import NonTerminal, Production

log = logging.getLogger(__name__)


def unit_pairs(grammar: Grammar) -> Dict[NonTerminal, FrozenSet[NonTerminal]]:
    """For each A, every B with A ⇒* B through unit productions only (A itself included)."""
    relation = {n: {n} for n in grammar.non_terminals}
    for p in grammar.productions:
        if p.is_unit:
            relation[p.left].add(p.right[0])
    return transitive_closure(relation, grammar.non_terminals)


def eliminate_unit_productions(grammar: Grammar) -> Grammar:
    pairs = unit_pairs(grammar)

    copied = []
    for a in grammar.non_terminals:
        reached = [b for b in grammar.non_terminals if b != a and b in pairs[a]]
        if reached:
            log.debug("unit pairs of %s: %s", a, ", ".join(str(b) for b in reached))
        for b in reached:
            for p in grammar.productions_for(b):
                # only the start symbol may keep → ε
                if p.is_unit or p.is_epsilon:
                    continue
                copied.append(Production(a, p.right))

    productions = [p for p in grammar.productions if not p.is_unit]
    return grammar.replace(productions=dedupe(productions + copied))
