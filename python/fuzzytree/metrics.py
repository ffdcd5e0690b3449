"""Resolve algorithm names to metric objects."""

from typing import Optional, Union

from fuzzytree._utils import normalize_algorithm
from fuzzytree.enums import Algorithm, CostModel
from fuzzytree.exceptions import ValidationError
from fuzzytree.interfaces import CostFunction
from fuzzytree.jaro import JaroWinkler
from fuzzytree.levenshtein import DamerauLevenshtein, Levenshtein, WeightedLevenshtein

MetricLike = Union[str, Algorithm]


def get_metric(
    algorithm: MetricLike = Algorithm.LEVENSHTEIN,
    costs: Optional[Union[str, CostModel, CostFunction]] = None,
):
    """Build the metric object for an algorithm.

    Args:
        algorithm: Algorithm enum or name (``"levenshtein"``,
            ``"damerau_levenshtein"``/``"damerau"``, ``"weighted_levenshtein"``,
            ``"jaro_winkler"``).
        costs: Cost model for ``weighted_levenshtein`` (default uniform). Not
            accepted by the other algorithms.

    Raises:
        AlgorithmError: If the algorithm or cost model is unknown.
        ValidationError: If costs are given for an algorithm without costs.

    Example:
        >>> get_metric("weighted_levenshtein", costs="locale_tuned")
        WeightedLevenshtein(costs=LocaleTunedCosts())
    """
    name = normalize_algorithm(algorithm)
    if name == Algorithm.WEIGHTED_LEVENSHTEIN.value:
        return WeightedLevenshtein() if costs is None else WeightedLevenshtein(costs)
    if costs is not None:
        raise ValidationError(f"Algorithm '{name}' does not take a cost model")
    if name == Algorithm.LEVENSHTEIN.value:
        return Levenshtein()
    if name == Algorithm.DAMERAU_LEVENSHTEIN.value:
        return DamerauLevenshtein()
    return JaroWinkler()


__all__ = ["get_metric", "MetricLike"]
