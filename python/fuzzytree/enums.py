"""Enums for fuzzytree API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available string distance algorithms.

    This enum provides type-safe algorithm selection for metrics and indexes.
    String values are accepted anywhere an Algorithm is.

    Example:
        >>> from fuzzytree import Algorithm, BKTree, get_metric
        >>> tree = BKTree(get_metric(Algorithm.DAMERAU_LEVENSHTEIN))
    """

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Optimal string alignment: edit distance plus adjacent transpositions"""

    DAMERAU = "damerau"
    """Alias for DAMERAU_LEVENSHTEIN"""

    WEIGHTED_LEVENSHTEIN = "weighted_levenshtein"
    """Edit distance with per-character costs taken from a cost function"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting (not a metric)"""


class CostModel(str, Enum):
    """Cost functions available to weighted Levenshtein.

    Example:
        >>> from fuzzytree import CostModel, get_cost_function
        >>> costs = get_cost_function(CostModel.CASE_INSENSITIVE)
        >>> costs.subst_cost("A", "a")
        0
    """

    UNIFORM = "uniform"
    """Every insertion, deletion and substitution costs 1"""

    CASE_INSENSITIVE = "case_insensitive"
    """Like uniform, but a character and its opposite case substitute for free"""

    LOCALE_TUNED = "locale_tuned"
    """French orthography: cheap accents, look-alike digits, close consonants"""


class NormalizationMode(str, Enum):
    """String normalization modes.

    Used by normalization utilities to control how strings are preprocessed
    before comparison.

    Example:
        >>> from fuzzytree import normalize_string, NormalizationMode
        >>> normalize_string("  Bard-lès-Pesmes  ", NormalizationMode.STRICT)
        'bardlespesmes'
    """

    LOWERCASE = "lowercase"
    """Convert to lowercase only"""

    ASCII_FOLD = "ascii_fold"
    """Strip diacritics and drop characters with no ASCII equivalent"""

    REMOVE_PUNCTUATION = "remove_punctuation"
    """Remove punctuation characters"""

    REMOVE_WHITESPACE = "remove_whitespace"
    """Remove all whitespace"""

    COLLAPSE_WHITESPACE = "collapse_whitespace"
    """Trim and turn runs of whitespace into a single space"""

    STRICT = "strict"
    """Apply all normalizations: ascii fold + lowercase + remove punctuation + remove whitespace"""


__all__ = ["Algorithm", "CostModel", "NormalizationMode"]
