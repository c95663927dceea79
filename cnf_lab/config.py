EPSILON_MARK = "ε"
ARROW = "→"

# fresh symbols made by binarization
PROXY_PREFIX = "T_"
SYNTHETIC_PREFIX = "X"

CHECKPOINT_TITLES = [
    "Original Grammar:",
    "Grammar after eliminating ε-productions:",
    "Grammar after eliminating unit productions:",
    "Grammar after eliminating inaccessible symbols:",
    "Grammar after eliminating non-productive symbols:",
    "Grammar in Chomsky Normal Form:",
]
