"""Exception hierarchy for fuzzytree."""


class FuzzyTreeError(Exception):
    """Base exception for all fuzzytree errors."""


class ValidationError(FuzzyTreeError, ValueError):
    """Raised when input validation fails (missing strings, out of range values)."""


class AlgorithmError(FuzzyTreeError, ValueError):
    """Raised when an unknown or unsupported algorithm or cost model is specified."""


class FuzzyIndexError(FuzzyTreeError):
    """Raised when index operations fail.

    Named to avoid shadowing Python's built-in IndexError.
    """


class EmptyIndexError(FuzzyIndexError):
    """Raised when an index is queried before anything was added to it.

    Radius and nearest-match queries both raise it.
    """


__all__ = [
    "FuzzyTreeError",
    "ValidationError",
    "AlgorithmError",
    "FuzzyIndexError",
    "EmptyIndexError",
]
