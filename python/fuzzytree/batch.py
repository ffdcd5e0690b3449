"""Batch operations over lists of strings.

These helpers compare a query against every string of a list. They are the
linear scan a :class:`~fuzzytree.BKTree` avoids, and are the right tool for
small lists or one-off comparisons.

Example usage:
    >>> import fuzzytree.batch as batch

    # Edit distance of a query to every string
    >>> batch.distances(["hello", "hallo", "world"], "helo")
    [1, 2, 4]

    # Closest strings, best first
    >>> [(m.text, m.distance) for m in batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)]
    [('apple', 2), ('apply', 2)]

    # Normalized distance between aligned pairs
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"])
    [0.2, 0.2]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from fuzzytree._utils import require_non_negative, require_str
from fuzzytree.exceptions import ValidationError
from fuzzytree.levenshtein import DamerauLevenshtein, Levenshtein
from fuzzytree.metrics import get_metric
from fuzzytree.results import SearchResult

if TYPE_CHECKING:
    from fuzzytree.enums import Algorithm, CostModel
    from fuzzytree.interfaces import CostFunction

__all__ = [
    "distances",
    "best_matches",
    "pairwise",
    "distance_matrix",
]


def _bounded(metric, s: str, t: str, max_distance: Optional[int]) -> int:
    """Edit distance, capped at max_distance + 1 when the metric supports a limit."""
    if max_distance is not None and isinstance(metric, (Levenshtein, DamerauLevenshtein)):
        return metric.edit_distance(s, t, max_distance + 1)
    return metric.edit_distance(s, t)


def distances(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "levenshtein",
    costs: Union[str, CostModel, CostFunction, None] = None,
) -> list[int]:
    """Edit distance from the query to each string, in input order.

    Args:
        strings: Strings to compare against the query.
        query: The query string.
        algorithm: Algorithm name or enum, see :func:`~fuzzytree.get_metric`.
        costs: Cost model, for ``weighted_levenshtein`` only.
    """
    require_str(query, "query")
    metric = get_metric(algorithm, costs)
    return [metric.edit_distance(query, s) for s in strings]


def best_matches(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "levenshtein",
    limit: Optional[int] = 5,
    max_distance: Optional[int] = None,
    costs: Union[str, CostModel, CostFunction, None] = None,
) -> list[SearchResult]:
    """Find the strings closest to the query by comparing against all of them.

    Levenshtein and Damerau-Levenshtein use their bounded variants when
    ``max_distance`` is set, so hopeless candidates are abandoned early.

    Args:
        strings: Strings to search.
        query: The query string.
        algorithm: Algorithm name or enum, see :func:`~fuzzytree.get_metric`.
        limit: Maximum number of results (None for all).
        max_distance: Drop strings farther than this.
        costs: Cost model, for ``weighted_levenshtein`` only.

    Returns:
        SearchResult objects sorted by distance then text; ``id`` is the
        position in ``strings``.
    """
    require_str(query, "query")
    if max_distance is not None:
        require_non_negative(max_distance, "max_distance")
    metric = get_metric(algorithm, costs)

    results = []
    for i, s in enumerate(strings):
        d = _bounded(metric, query, s, max_distance)
        if max_distance is None or d <= max_distance:
            score = 1.0 - metric.distance(query, s)
            results.append(SearchResult(distance=d, text=s, id=i, score=score))
    results.sort()
    return results if limit is None else results[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    algorithm: str | Algorithm = "levenshtein",
    costs: Union[str, CostModel, CostFunction, None] = None,
) -> list[float]:
    """Normalized distance between each pair ``(left[i], right[i])``.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    metric = get_metric(algorithm, costs)
    return [metric.distance(a, b) for a, b in zip(left, right)]


def distance_matrix(
    queries: list[str],
    choices: list[str],
    algorithm: str | Algorithm = "levenshtein",
    costs: Union[str, CostModel, CostFunction, None] = None,
) -> list[list[float]]:
    """Normalized distance between every query and every choice.

    Returns:
        ``result[i][j]`` is the distance between ``queries[i]`` and ``choices[j]``.
    """
    metric = get_metric(algorithm, costs)
    return [[metric.distance(q, c) for c in choices] for q in queries]
