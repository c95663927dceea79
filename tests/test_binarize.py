from cnf_lab import Grammar, NonTerminal, binarize

from language import rule_pairs


def _four_symbol_grammar():
    return Grammar.from_rules(
        ["A", "B", "C", "D"], ["a", "b", "c", "d"],
        [("A", ["a", "B", "C", "D"]), ("B", ["b"]), ("C", ["c"]), ("D", ["d"])],
        "A",
    )


def test_long_rule_is_split_pairwise():
    result = binarize(_four_symbol_grammar())
    assert [str(p) for p in result.productions] == [
        "A → X1D",
        "B → b",
        "C → c",
        "D → d",
        "T_a → a",
        "X0 → T_aB",
        "X1 → X0C",
    ]
    assert [str(n) for n in result.non_terminals] == ["A", "B", "C", "D", "T_a", "X0", "X1"]
    assert all(len(p.right) <= 2 for p in result.productions)
    assert result.is_cnf()


def test_binary_grammar_gets_no_new_rules():
    once = binarize(_four_symbol_grammar())
    twice = binarize(once)
    assert twice.productions == once.productions
    assert twice.non_terminals == once.non_terminals


def test_proxy_is_shared_between_rules():
    grammar = Grammar.from_rules(
        ["S", "A"], ["a"],
        [("S", ["a", "A"]), ("A", ["A", "a"]), ("A", ["a"])],
        "S",
    )
    result = binarize(grammar)
    assert rule_pairs(result) == {("S", "T_aA"), ("A", "AT_a"), ("A", "a"), ("T_a", "a")}


def test_same_pair_reuses_synthetic_symbol():
    grammar = Grammar.from_rules(
        ["S", "B", "C", "D", "E"], ["b", "c", "d", "e"],
        [
            ("S", ["B", "C", "D"]),
            ("S", ["B", "C", "E"]),
            ("B", ["b"]), ("C", ["c"]), ("D", ["d"]), ("E", ["e"]),
        ],
        "S",
    )
    result = binarize(grammar)
    synthetic = [p for p in result.productions if p.left.name.startswith("X")]
    assert [str(p) for p in synthetic] == ["X0 → BC"]
    assert {("S", "X0D"), ("S", "X0E")} <= rule_pairs(result)


def test_pairs_are_keyed_by_symbols_not_names():
    # "AB C" and "A BC" concatenate to the same text
    grammar = Grammar.from_rules(
        ["S", "AB", "C", "A", "BC", "D"], ["x"],
        [
            ("S", ["AB", "C", "D"]),
            ("S", ["A", "BC", "D"]),
            ("AB", ["x"]), ("C", ["x"]), ("A", ["x"]), ("BC", ["x"]), ("D", ["x"]),
        ],
        "S",
    )
    result = binarize(grammar)
    first, second = result.productions[0], result.productions[1]
    assert first.right[0] != second.right[0]
    pair_rules = {p.left: p.right for p in result.productions if p.left.name.startswith("X")}
    assert pair_rules[first.right[0]] == (NonTerminal("AB"), NonTerminal("C"))
    assert pair_rules[second.right[0]] == (NonTerminal("A"), NonTerminal("BC"))


def test_fresh_names_do_not_collide():
    grammar = Grammar.from_rules(
        ["S", "T_a", "X0"], ["a"],
        [("S", ["a", "T_a", "X0"]), ("T_a", ["a"]), ("X0", ["a"])],
        "S",
    )
    result = binarize(grammar)
    names = [str(n) for n in result.non_terminals]
    assert names == ["S", "T_a", "X0", "T_a1", "X1"]
    assert [str(p) for p in result.productions][0] == "S → X1X0"


def test_duplicates_are_removed():
    grammar = Grammar.from_rules(
        ["S", "A"], ["a"],
        [("S", ["A", "A"]), ("S", ["A", "A"]), ("A", ["a"])],
        "S",
    )
    assert [str(p) for p in binarize(grammar).productions] == ["S → AA", "A → a"]
