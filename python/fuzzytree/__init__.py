"""
fuzzytree - edit distances and BK-tree fuzzy search

A Python library for approximate string matching: distances between two
strings under a pluggable cost model, and a Burkhard-Keller tree that finds
every indexed string within a distance of a query (or the closest one)
without comparing against the whole corpus.

Example usage:
    >>> import fuzzytree as ft

    # Edit distances
    >>> ft.levenshtein("kitten", "sitting")
    3
    >>> ft.damerau_levenshtein("michael", "mickael")
    1
    >>> ft.weighted_levenshtein("Loto", "L0t0", costs="locale_tuned")
    2

    # Use a BK-tree for efficient fuzzy search
    >>> tree = ft.BKTree(ft.Levenshtein())
    >>> tree.add_all(["hello", "hallo", "hullo", "world"])
    >>> sorted(tree.query("helo", 1).items())
    [('hello', 1)]
    >>> tree.find_best_word_match("wrld")
    'world'
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzytree.expr  # noqa: F401
from fuzzytree.bktree import BKTree, ThreadSafeBKTree
from fuzzytree.costs import (
    CASE_INSENSITIVE,
    LOCALE_TUNED,
    UNIFORM,
    CaseInsensitiveCosts,
    LocaleTunedCosts,
    UniformCosts,
    get_cost_function,
)
from fuzzytree.enums import Algorithm, CostModel, NormalizationMode
from fuzzytree.exceptions import (
    AlgorithmError,
    EmptyIndexError,
    FuzzyIndexError,
    FuzzyTreeError,
    ValidationError,
)
from fuzzytree.index import FuzzyIndex
from fuzzytree.interfaces import CostFunction, EditDistance, StringDistance
from fuzzytree.jaro import (
    JaroWinkler,
    jaro_similarity,
    jaro_winkler_distance,
    jaro_winkler_similarity,
)
from fuzzytree.levenshtein import (
    DamerauLevenshtein,
    Levenshtein,
    WeightedLevenshtein,
    damerau_levenshtein,
    damerau_levenshtein_distance,
    get_workspace,
    levenshtein,
    levenshtein_distance,
    weighted_levenshtein,
    weighted_levenshtein_distance,
)
from fuzzytree.metrics import get_metric
from fuzzytree.normalize import ascii_fold, normalize_pair, normalize_string
from fuzzytree.results import SearchResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = _get_version("fuzzytree")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzyTreeError",
    "ValidationError",
    "AlgorithmError",
    "FuzzyIndexError",
    "EmptyIndexError",
    # Result types
    "SearchResult",
    # Enums
    "Algorithm",
    "CostModel",
    "NormalizationMode",
    # Interfaces
    "CostFunction",
    "EditDistance",
    "StringDistance",
    # Cost functions
    "UniformCosts",
    "CaseInsensitiveCosts",
    "LocaleTunedCosts",
    "UNIFORM",
    "CASE_INSENSITIVE",
    "LOCALE_TUNED",
    "get_cost_function",
    # Distance functions
    "levenshtein",
    "levenshtein_distance",
    "damerau_levenshtein",
    "damerau_levenshtein_distance",
    "get_workspace",
    "weighted_levenshtein",
    "weighted_levenshtein_distance",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "jaro_winkler_distance",
    # Metric objects
    "Levenshtein",
    "DamerauLevenshtein",
    "WeightedLevenshtein",
    "JaroWinkler",
    "get_metric",
    # Normalization
    "ascii_fold",
    "normalize_string",
    "normalize_pair",
    # Index classes
    "BKTree",
    "ThreadSafeBKTree",
    "FuzzyIndex",
]


# Convenience aliases
edit_distance = levenshtein
similarity = jaro_winkler_similarity
