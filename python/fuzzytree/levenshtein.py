"""Edit distances: Levenshtein, restricted Damerau-Levenshtein, weighted Levenshtein.

All three are dynamic programs over the ``(len(s) + 1) x (len(t) + 1)`` cost
table. Plain and weighted Levenshtein only keep two rolling rows; the
Damerau-Levenshtein variant needs to look two rows back and uses a full,
flattened table that callers can preallocate with :func:`get_workspace`.

The bounded variants take a ``limit`` and return ``min(distance, limit)``.
They give up as soon as the distance is known to reach ``limit``, so a
returned value equal to ``limit`` means "at least ``limit``", not an exact
distance.

Example:
    >>> levenshtein("kitten", "sitting")
    3
    >>> damerau_levenshtein("michael", "mickael")
    1
    >>> damerau_levenshtein("h", "hello", limit=2)
    2
"""

from typing import List, MutableSequence, Optional, Union

from fuzzytree._utils import require_non_negative, require_str
from fuzzytree.costs import UNIFORM, get_cost_function
from fuzzytree.enums import CostModel
from fuzzytree.exceptions import ValidationError
from fuzzytree.interfaces import CostFunction, EditDistance, StringDistance

# Weighted distances are normalized by ten times the longest length.
WEIGHTED_NORMALIZATION_FACTOR = 10


def _length_bound(s: str, t: str, limit: Optional[int]) -> Optional[int]:
    """Answer a bounded call without running the table, when possible."""
    if limit is None:
        if not s:
            return len(t)
        if not t:
            return len(s)
        return None
    # The length difference is a lower bound on the distance
    if abs(len(s) - len(t)) >= limit:
        return limit
    if not s:
        return min(len(t), limit)
    if not t:
        return min(len(s), limit)
    return None


def levenshtein(s: str, t: str, limit: Optional[int] = None) -> int:
    """Levenshtein distance between two strings.

    Args:
        s: String to compare from.
        t: String to compare to.
        limit: Optional cutoff. When given, the result is
            ``min(levenshtein(s, t), limit)`` and the computation stops early
            once the distance is known to reach ``limit``.

    Returns:
        Number of single character insertions, deletions and substitutions
        needed to turn ``s`` into ``t``.

    Raises:
        ValidationError: If either string is None, or limit is negative.
    """
    require_str(s, "s")
    require_str(t, "t")
    if limit is not None:
        require_non_negative(limit, "limit")

    shortcut = _length_bound(s, t, limit)
    if shortcut is not None:
        return shortcut

    n = len(s)
    previous = list(range(n + 1))
    current = [0] * (n + 1)
    for j, tc in enumerate(t, 1):
        current[0] = row_min = j
        for i in range(1, n + 1):
            cost = 0 if s[i - 1] == tc else 1
            value = min(current[i - 1] + 1, previous[i] + 1, previous[i - 1] + cost)
            current[i] = value
            if value < row_min:
                row_min = value
        if limit is not None and row_min >= limit:
            return limit
        previous, current = current, previous

    if limit is not None:
        return min(previous[n], limit)
    return previous[n]


def get_workspace(len_s: int, len_t: int) -> List[int]:
    """Allocate a table big enough for any pair of strings up to these lengths.

    Passing the same workspace to repeated :func:`damerau_levenshtein` calls
    avoids one allocation per call. A workspace must not be shared between
    threads running concurrently.

    Example:
        >>> ws = get_workspace(7, 7)
        >>> [damerau_levenshtein("michael", w, workspace=ws) for w in ("mickael", "mikael")]
        [1, 2]
    """
    return [0] * ((len_s + 1) * (len_t + 1))


def damerau_levenshtein(
    s: str,
    t: str,
    limit: Optional[int] = None,
    workspace: Optional[MutableSequence[int]] = None,
) -> int:
    """Restricted Damerau-Levenshtein (optimal string alignment) distance.

    Levenshtein distance where swapping two adjacent characters also counts
    as a single edit.

    This is the *optimal string alignment* variant: a transposed pair cannot be
    edited again afterwards, so it can overestimate the unrestricted
    Damerau-Levenshtein distance (``"ca"`` -> ``"abc"`` is 3 here, not 2) and
    does not satisfy the triangle inequality on every input.

    Args:
        s: String to compare from.
        t: String to compare to.
        limit: Optional cutoff, same contract as in :func:`levenshtein`.
        workspace: Optional scratch table from :func:`get_workspace`, with at
            least ``(len(s) + 1) * (len(t) + 1)`` cells.

    Raises:
        ValidationError: If either string is None, limit is negative, or the
            workspace is too small.
    """
    require_str(s, "s")
    require_str(t, "t")
    if limit is not None:
        require_non_negative(limit, "limit")

    shortcut = _length_bound(s, t, limit)
    if shortcut is not None:
        return shortcut

    n, m = len(s), len(t)
    width = m + 1
    size = (n + 1) * width
    if workspace is None:
        table = get_workspace(n, m)
    elif len(workspace) < size:
        raise ValidationError(
            f"workspace has {len(workspace)} cells, {size} needed for "
            f"strings of length {n} and {m}"
        )
    else:
        table = workspace

    for j in range(width):
        table[j] = j

    for i in range(1, n + 1):
        row = i * width
        above = row - width
        sc = s[i - 1]
        table[row] = row_min = i
        for j in range(1, width):
            tc = t[j - 1]
            cost = 0 if sc == tc else 1
            value = min(
                table[above + j] + 1,  # deletion
                table[row + j - 1] + 1,  # insertion
                table[above + j - 1] + cost,  # substitution
            )
            if i > 1 and j > 1 and sc == t[j - 2] and s[i - 2] == tc:
                # transposition
                value = min(value, table[above - width + j - 2] + cost)
            table[row + j] = value
            if value < row_min:
                row_min = value
        if limit is not None and row_min >= limit:
            return limit

    result = table[size - 1]
    if limit is not None:
        return min(result, limit)
    return result


def weighted_levenshtein(
    s: str,
    t: str,
    costs: Union[str, CostModel, CostFunction] = UNIFORM,
) -> int:
    """Levenshtein distance with costs taken from a cost function.

    There is no bounded variant: with uneven costs the row minimum is not a
    cheap lower bound any more.

    Args:
        s: String to compare from.
        t: String to compare to.
        costs: CostFunction, or the name of a built-in cost model.

    Raises:
        ValidationError: If either string is None.
    """
    require_str(s, "s")
    require_str(t, "t")
    costs = get_cost_function(costs)

    previous = [0] * (len(t) + 1)
    for j, tc in enumerate(t, 1):
        previous[j] = previous[j - 1] + costs.ins_del_cost(tc)

    current = [0] * (len(t) + 1)
    for sc in s:
        delete = costs.ins_del_cost(sc)
        current[0] = previous[0] + delete
        for j, tc in enumerate(t, 1):
            current[j] = min(
                previous[j - 1] + costs.subst_cost(sc, tc),
                previous[j] + delete,
                current[j - 1] + costs.ins_del_cost(tc),
            )
        previous, current = current, previous
    return previous[len(t)]


def _normalize(edit_distance: int, s: str, t: str, factor: int = 1) -> float:
    longest = max(len(s), len(t))
    if longest == 0:
        return 0.0
    return edit_distance / (factor * longest)


def levenshtein_distance(s: str, t: str) -> float:
    """Levenshtein distance divided by the length of the longest string.

    Returns 0.0 for identical strings (including two empty strings) and 1.0
    when no character can be kept.
    """
    return _normalize(levenshtein(s, t), s, t)


def damerau_levenshtein_distance(s: str, t: str) -> float:
    """Damerau-Levenshtein distance divided by the length of the longest string."""
    return _normalize(damerau_levenshtein(s, t), s, t)


def weighted_levenshtein_distance(
    s: str,
    t: str,
    costs: Union[str, CostModel, CostFunction] = UNIFORM,
) -> float:
    """Weighted Levenshtein distance divided by ten times the longest length.

    Note:
        The factor of ten differs from the other normalized distances, which
        divide by the longest length only. With the uniform cost model the
        result is therefore at most 0.1, and with the locale tuned model at
        most 0.5. Compare weighted distances with each other, not with the
        other metrics.
    """
    return _normalize(
        weighted_levenshtein(s, t, costs), s, t, WEIGHTED_NORMALIZATION_FACTOR
    )


class Levenshtein(EditDistance, StringDistance):
    """Levenshtein distance as a metric object, for use with :class:`~fuzzytree.BKTree`."""

    def edit_distance(self, s: str, t: str, limit: Optional[int] = None) -> int:
        return levenshtein(s, t, limit)

    def distance(self, s: str, t: str) -> float:
        return levenshtein_distance(s, t)

    def __repr__(self) -> str:
        return "Levenshtein()"


class DamerauLevenshtein(EditDistance, StringDistance):
    """Restricted Damerau-Levenshtein distance as a metric object.

    Only an approximate metric: see :func:`damerau_levenshtein`.
    """

    def edit_distance(self, s: str, t: str, limit: Optional[int] = None) -> int:
        return damerau_levenshtein(s, t, limit)

    def distance(self, s: str, t: str) -> float:
        return damerau_levenshtein_distance(s, t)

    def __repr__(self) -> str:
        return "DamerauLevenshtein()"


class WeightedLevenshtein(EditDistance, StringDistance):
    """Weighted Levenshtein distance bound to one cost function.

    Example:
        >>> metric = WeightedLevenshtein("locale_tuned")
        >>> metric.edit_distance("Loto", "L0t0")
        2
    """

    def __init__(self, costs: Union[str, CostModel, CostFunction] = UNIFORM):
        self.costs = get_cost_function(costs)

    @property
    def is_metric(self) -> bool:
        return self.costs.is_metric

    def edit_distance(self, s: str, t: str) -> int:
        return weighted_levenshtein(s, t, self.costs)

    def distance(self, s: str, t: str) -> float:
        return weighted_levenshtein_distance(s, t, self.costs)

    def __repr__(self) -> str:
        return f"WeightedLevenshtein(costs={self.costs!r})"


__all__ = [
    "levenshtein",
    "damerau_levenshtein",
    "weighted_levenshtein",
    "levenshtein_distance",
    "damerau_levenshtein_distance",
    "weighted_levenshtein_distance",
    "get_workspace",
    "Levenshtein",
    "DamerauLevenshtein",
    "WeightedLevenshtein",
    "WEIGHTED_NORMALIZATION_FACTOR",
]
