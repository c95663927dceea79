"""
Grammar symbols and productions.

Non-terminals and productions extend the nltk classes, so a production built
here is also a valid ``nltk.grammar.Production`` and can be handed to
``nltk.CFG`` as-is. Terminals and the epsilon marker are our own: nltk uses
bare strings for terminals and an empty right side for epsilon, and both of
those are too easy to mix up with symbol names.
"""
from functools import total_ordering

from nltk.grammar import Nonterminal
from nltk.grammar import Production as NltkProduction

from .config import ARROW, EPSILON_MARK
from .errors import MalformedGrammarError


class NonTerminal(Nonterminal):
    def __init__(self, name):
        if not isinstance(name, str) or not name:
            raise MalformedGrammarError(f"non-terminal name must be a non-empty string, got {name!r}")
        super().__init__(name)

    @property
    def name(self):
        return self.symbol()


@total_ordering
class Terminal:
    def __init__(self, name):
        if not isinstance(name, str) or not name:
            raise MalformedGrammarError(f"terminal name must be a non-empty string, got {name!r}")
        self._name = name

    @property
    def name(self):
        return self._name

    def __eq__(self, other):
        return type(self) == type(other) and self._name == other._name

    def __lt__(self, other):
        if not isinstance(other, Terminal):
            return NotImplemented
        return self._name < other._name

    def __hash__(self):
        return hash(("Terminal", self._name))

    def __repr__(self):
        return f"Terminal({self._name!r})"

    def __str__(self):
        return self._name


class Epsilon:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Epsilon, ())

    def __repr__(self):
        return "EPSILON"

    def __str__(self):
        return EPSILON_MARK


EPSILON = Epsilon()


def is_symbol(item):
    return isinstance(item, (NonTerminal, Terminal, Epsilon))


class Production(NltkProduction):
    """
    A rule ``left → right``.

    ``right`` is a non-empty tuple of symbols. It is either exactly
    ``(EPSILON,)`` or it holds no epsilon at all.
    """

    def __init__(self, left, right):
        if not isinstance(left, NonTerminal):
            raise MalformedGrammarError(f"left side must be a NonTerminal, got {left!r}")
        if isinstance(right, str):
            raise MalformedGrammarError(f"right side of {left} must be a sequence of symbols, got {right!r}")
        right = tuple(right)
        if not right:
            raise MalformedGrammarError(f"{left} has an empty right side; use EPSILON for the empty string")
        for symbol in right:
            if not is_symbol(symbol):
                raise MalformedGrammarError(f"{left} has a non-symbol {symbol!r} on its right side")
        if EPSILON in right and len(right) > 1:
            raise MalformedGrammarError(f"{left} mixes ε with other symbols on its right side")
        super().__init__(left, right)

    @property
    def left(self):
        return self.lhs()

    @property
    def right(self):
        return self.rhs()

    @property
    def is_epsilon(self):
        return self.rhs() == (EPSILON,)

    @property
    def is_unit(self):
        rhs = self.rhs()
        return len(rhs) == 1 and isinstance(rhs[0], NonTerminal)

    @property
    def is_terminal_rule(self):
        rhs = self.rhs()
        return len(rhs) == 1 and isinstance(rhs[0], Terminal)

    def __repr__(self):
        return f"Production({self.lhs()!r}, {self.rhs()!r})"

    def __str__(self):
        return f"{self.lhs()} {ARROW} {''.join(str(s) for s in self.rhs())}"
