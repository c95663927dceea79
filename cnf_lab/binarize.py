import itertools
import logging

from .config import PROXY_PREFIX, SYNTHETIC_PREFIX
from .grammar import Grammar, dedupe
from .symbols import NonTerminal, Production, Terminal

log = logging.getLogger(__name__)


class _FreshNames:
    """Hands out names not used by the grammar nor by earlier calls."""

    def __init__(self, used):
        self.used = set(used)
        self.counter = itertools.count()

    def _take(self, name):
        self.used.add(name)
        return NonTerminal(name)

    def proxy(self, terminal: Terminal) -> NonTerminal:
        name = PROXY_PREFIX + terminal.name
        suffix = itertools.count(1)
        while name in self.used:
            name = f"{PROXY_PREFIX}{terminal.name}{next(suffix)}"
        return self._take(name)

    def synthetic(self) -> NonTerminal:
        name = f"{SYNTHETIC_PREFIX}{next(self.counter)}"
        while name in self.used:
            name = f"{SYNTHETIC_PREFIX}{next(self.counter)}"
        return self._take(name)


def binarize(grammar: Grammar) -> Grammar:
    """
    Bring every rule to A → BC or A → a.

    First each terminal inside a right side longer than one symbol is swapped
    for a proxy non-terminal (T_a → a), one proxy per terminal. Then right
    sides longer than two are folded from the left: the first two symbols are
    replaced by a synthetic non-terminal standing for exactly that pair, and
    the same pair always gets the same synthetic symbol.
    """
    names = _FreshNames(grammar.symbol_names())
    created = []
    new_rules = []

    # Step 1: isolate terminals
    proxies = {}
    isolated = []
    for p in grammar.productions:
        if len(p.right) > 1 and any(isinstance(s, Terminal) for s in p.right):
            right = []
            for symbol in p.right:
                if isinstance(symbol, Terminal):
                    if symbol not in proxies:
                        proxies[symbol] = names.proxy(symbol)
                        created.append(proxies[symbol])
                        new_rules.append(Production(proxies[symbol], [symbol]))
                    symbol = proxies[symbol]
                right.append(symbol)
            p = Production(p.left, right)
        isolated.append(p)

    # Step 2: split long right sides pairwise
    pairs = {}
    binary = []
    for p in isolated:
        if len(p.right) > 2:
            right = list(p.right)
            while len(right) > 2:
                pair = (right[0], right[1])
                if pair not in pairs:
                    pairs[pair] = names.synthetic()
                    created.append(pairs[pair])
                    new_rules.append(Production(pairs[pair], pair))
                right[:2] = [pairs[pair]]
            p = Production(p.left, right)
        binary.append(p)

    log.debug("binarization added %d proxies and %d pair symbols", len(proxies), len(pairs))
    return grammar.replace(
        non_terminals=list(grammar.non_terminals) + created,
        productions=dedupe(binary + new_rules),
    )
