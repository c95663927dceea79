from .binarize import binarize
from .closure import transitive_closure
from .epsilon import eliminate_epsilon, find_nullable
from .errors import MalformedGrammarError
from .grammar import Grammar
from .pipeline import STAGES, convert_to_cnf, print_observer
from .pruning import eliminate_inaccessible, eliminate_nonproductive, find_accessible, find_productive
from .symbols import EPSILON, Epsilon, NonTerminal, Production, Terminal
from .unit import eliminate_unit_productions, unit_pairs
