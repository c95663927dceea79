import copy
from typing import Iterable, List, Tuple

import nltk
from nltk.grammar import is_nonterminal

from .config import EPSILON_MARK
from .errors import MalformedGrammarError
from .symbols import EPSILON, NonTerminal, Production, Terminal


def _ordered(items):
    # de-duplicate, keep first occurrence
    return tuple(dict.fromkeys(items))


class Grammar:
    """
    G = (VN, VT, P, S) as a value.

    Stages never change a grammar in place, they build a new one. Symbol
    containers are tuples in insertion order so that printing and fresh
    symbol numbering are the same on every run.
    """

    def __init__(self, non_terminals, terminals, productions, start):
        self.non_terminals: Tuple[NonTerminal, ...] = _ordered(
            n if isinstance(n, NonTerminal) else NonTerminal(n) for n in non_terminals
        )
        self.terminals: Tuple[Terminal, ...] = _ordered(
            t if isinstance(t, Terminal) else Terminal(t) for t in terminals
        )
        self.productions: Tuple[Production, ...] = tuple(
            p if isinstance(p, Production) else Production(*p) for p in productions
        )
        self.start: NonTerminal = start if isinstance(start, NonTerminal) else NonTerminal(start)
        self._validate()

    def _validate(self):
        nts = set(self.non_terminals)
        ts = set(self.terminals)

        clash = {n.name for n in nts} & {t.name for t in ts}
        if clash:
            raise MalformedGrammarError(f"names used as both terminal and non-terminal: {', '.join(sorted(clash))}")
        if self.start not in nts:
            raise MalformedGrammarError(f"start symbol {self.start} is not in VN")

        for number, p in enumerate(self.productions, start=1):
            if p.left not in nts:
                raise MalformedGrammarError(f"rule {number} ({p}): left side {p.left} is not in VN")
            if p.is_epsilon:
                continue
            for symbol in p.right:
                if symbol not in nts and symbol not in ts:
                    raise MalformedGrammarError(f"rule {number} ({p}): symbol {symbol} is in neither VN nor VT")

    @classmethod
    def from_rules(cls, non_terminals, terminals, rules, start):
        """
        Build a grammar from plain names.

        ``rules`` is a sequence of ``(left, right)`` pairs where ``right`` is a
        list of symbol names; each name is looked up in ``non_terminals`` and
        ``terminals``. ``"ε"`` stands for the empty string.
        """
        nts = {name: NonTerminal(name) for name in non_terminals}
        ts = {name: Terminal(name) for name in terminals}

        def resolve(name):
            if name == EPSILON_MARK:
                return EPSILON
            if name in nts:
                return nts[name]
            if name in ts:
                return ts[name]
            raise MalformedGrammarError(f"unknown symbol {name!r}")

        productions = []
        for left, right in rules:
            if left not in nts:
                raise MalformedGrammarError(f"left side {left!r} is not in VN")
            productions.append(Production(nts[left], [resolve(name) for name in right]))
        return cls(nts.values(), ts.values(), productions, start)

    @classmethod
    def from_nltk(cls, cfg: nltk.CFG):
        """Convert an in-memory ``nltk.CFG``; an empty right side becomes ε."""

        def convert(item):
            if is_nonterminal(item):
                return NonTerminal(item.symbol())
            return Terminal(str(item))

        start = convert(cfg.start())
        non_terminals = [start]
        terminals = []
        productions = []
        for p in cfg.productions():
            left = convert(p.lhs())
            right = [convert(item) for item in p.rhs()]
            non_terminals.append(left)
            for symbol in right:
                if isinstance(symbol, NonTerminal):
                    non_terminals.append(symbol)
                else:
                    terminals.append(symbol)
            productions.append(Production(left, right or [EPSILON]))
        return cls(non_terminals, terminals, productions, start)

    def to_nltk(self) -> nltk.CFG:
        """Terminals become plain strings and ``[ε]`` becomes an empty right side."""
        if not self.productions:
            raise MalformedGrammarError("a grammar without productions has no nltk equivalent")

        def convert(symbol):
            if isinstance(symbol, Terminal):
                return symbol.name
            return nltk.Nonterminal(symbol.name)

        productions = [
            nltk.Production(convert(p.left), [] if p.is_epsilon else [convert(s) for s in p.right])
            for p in self.productions
        ]
        return nltk.CFG(convert(self.start), productions)

    def productions_for(self, non_terminal) -> List[Production]:
        return [p for p in self.productions if p.left == non_terminal]

    def symbol_names(self):
        return {s.name for s in self.non_terminals} | {t.name for t in self.terminals}

    def replace(self, **changes):
        fields = {
            "non_terminals": self.non_terminals,
            "terminals": self.terminals,
            "productions": self.productions,
            "start": self.start,
        }
        fields.update(changes)
        return Grammar(**fields)

    def copy(self):
        return copy.deepcopy(self)

    def is_cnf(self) -> bool:
        for p in self.productions:
            if p.is_epsilon:
                if p.left != self.start:
                    return False
            elif len(p.right) == 2:
                if not all(isinstance(s, NonTerminal) for s in p.right):
                    return False
            elif not p.is_terminal_rule:
                return False
        return True

    def render(self) -> str:
        lines = [
            "G = (VN, VT, P, S)",
            "VN = {" + ", ".join(str(n) for n in self.non_terminals) + "}",
            "VT = {" + ", ".join(str(t) for t in self.terminals) + "}",
            f"S = {self.start}",
            "P = {",
        ]
        for number, p in enumerate(self.productions, start=1):
            lines.append(f"    {number}. {p}")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def __str__(self):
        return self.render()

    def __repr__(self):
        return (f"Grammar(start={self.start}, non_terminals={len(self.non_terminals)}, "
                f"terminals={len(self.terminals)}, productions={len(self.productions)})")

    def __eq__(self, other):
        if not isinstance(other, Grammar):
            return NotImplemented
        return (self.start == other.start
                and set(self.non_terminals) == set(other.non_terminals)
                and set(self.terminals) == set(other.terminals)
                and self.productions == other.productions)

    __hash__ = None


def dedupe(productions: Iterable[Production]) -> List[Production]:
    return list(_ordered(productions))
