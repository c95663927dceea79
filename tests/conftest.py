import pytest

from cnf_lab import Grammar


@pytest.fixture
def seed_grammar():
    return Grammar.from_rules(
        ["S", "A"],
        ["a"],
        [
            ("S", ["a", "A"]),
            ("A", ["ε"]),
            ("A", ["a", "A"]),
        ],
        "S",
    )


@pytest.fixture
def unit_grammar():
    return Grammar.from_rules(
        ["S", "A"],
        ["a", "b"],
        [
            ("S", ["A"]),
            ("A", ["a"]),
            ("A", ["b"]),
        ],
        "S",
    )


@pytest.fixture
def lab_grammar():
    return Grammar.from_rules(
        ["S", "A", "B", "C", "E"],
        ["a", "b"],
        [
            ("S", ["b", "A"]),
            ("S", ["B"]),
            ("A", ["a"]),
            ("A", ["a", "S"]),
            ("A", ["b", "A", "a", "A", "b"]),
            ("B", ["A", "C"]),
            ("B", ["b", "S"]),
            ("B", ["a", "A", "a"]),
            ("C", ["ε"]),
            ("C", ["A", "B"]),
            ("E", ["B", "A"]),
        ],
        "S",
    )


@pytest.fixture
def three_nullable_grammar():
    return Grammar.from_rules(
        ["S", "A", "B", "C"],
        ["a", "b", "c", "d"],
        [
            ("S", ["A", "d", "B", "C"]),
            ("A", ["a"]),
            ("A", ["ε"]),
            ("B", ["b"]),
            ("B", ["ε"]),
            ("C", ["c"]),
            ("C", ["ε"]),
        ],
        "S",
    )


@pytest.fixture
def balanced_grammar():
    # nullable start symbol that also occurs on right sides
    return Grammar.from_rules(
        ["S"],
        ["(", ")"],
        [
            ("S", ["S", "S"]),
            ("S", ["(", "S", ")"]),
            ("S", ["ε"]),
        ],
        "S",
    )


@pytest.fixture
def useless_grammar():
    return Grammar.from_rules(
        ["S", "A", "B", "D", "E"],
        ["a", "b", "d", "e"],
        [
            ("S", ["a", "A"]),
            ("S", ["B", "b"]),
            ("A", ["a"]),
            ("B", ["B", "D"]),
            ("D", ["d"]),
            ("E", ["e", "A"]),
        ],
        "S",
    )


@pytest.fixture
def unit_cycle_grammar():
    return Grammar.from_rules(
        ["S", "A", "B"],
        ["a", "b", "c"],
        [
            ("S", ["A"]),
            ("A", ["B"]),
            ("B", ["S"]),
            ("A", ["a", "B"]),
            ("B", ["b"]),
            ("S", ["c", "S", "c"]),
        ],
        "S",
    )


@pytest.fixture(params=[
    "seed_grammar",
    "unit_grammar",
    "lab_grammar",
    "three_nullable_grammar",
    "balanced_grammar",
    "useless_grammar",
    "unit_cycle_grammar",
])
def any_grammar(request):
    return request.getfixturevalue(request.param)
