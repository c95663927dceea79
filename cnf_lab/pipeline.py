import logging
from typing import Callable, Optional

from .binarize import binarize
from .config import CHECKPOINT_TITLES
from .epsilon import eliminate_epsilon
from .grammar import Grammar
from .pruning import eliminate_inaccessible, eliminate_nonproductive
from .unit import eliminate_unit_productions

log = logging.getLogger(__name__)

Observer = Callable[[str, Grammar], None]

# applied strictly in this order, each one relies on the ones before it
STAGES = list(zip(CHECKPOINT_TITLES[1:], [
    eliminate_epsilon,
    eliminate_unit_productions,
    eliminate_inaccessible,
    eliminate_nonproductive,
    binarize,
]))


def print_observer(title: str, grammar: Grammar) -> None:
    print(title)
    print(grammar.render())


def convert_to_cnf(grammar: Grammar, observer: Optional[Observer] = None) -> Grammar:
    """
    Run the five normalization stages on a private copy of ``grammar``.

    ``observer`` is called with a title and the grammar at six checkpoints:
    the original and the result of every stage.
    """
    current = grammar.copy()
    if observer is not None:
        observer(CHECKPOINT_TITLES[0], current)

    for title, stage in STAGES:
        current = stage(current)
        log.debug("%s %d rules", stage.__name__, len(current.productions))
        if observer is not None:
            observer(title, current)

    log.info("CNF reached: %d rules became %d, %d non-terminals",
             len(grammar.productions), len(current.productions), len(current.non_terminals))
    return current
