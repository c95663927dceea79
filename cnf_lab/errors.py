class MalformedGrammarError(ValueError):
    """Raised when a grammar or production breaks the CFG invariants."""
