import logging

from .grammar import Grammar
from .pipeline import convert_to_cnf, print_observer


def demo_grammar():
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


def main():
    logging.basicConfig(level=logging.INFO)

    print("Starting the conversion to Chomsky Normal Form...")
    cnf = convert_to_cnf(demo_grammar(), observer=print_observer)

    print("Final Chomsky Normal Form grammar:")
    print(cnf.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
