"""Jaro and Jaro-Winkler similarity.

Jaro similarity counts the characters two strings have in common within a
sliding window and how many of them appear in a different order. The Winkler
extension rewards a shared prefix of up to six characters.

Neither is a metric: ``1 - jaro_winkler_similarity`` breaks the triangle
inequality, e.g. for ``"ab"``, ``"aa"``, ``"ba"``:

    >>> jaro_winkler_distance("ab", "ba")
    1.0
    >>> round(jaro_winkler_distance("ab", "aa") + jaro_winkler_distance("aa", "ba"), 2)
    0.63

so a BK-tree over it can miss matches.
"""

from typing import List

from fuzzytree._utils import require_non_negative, require_str
from fuzzytree.exceptions import ValidationError
from fuzzytree.interfaces import EditDistance, StringDistance

PREFIX_MAX_LENGTH = 6
"""Longest shared prefix rewarded by the Winkler extension"""

PREFIX_SCALE = 0.1
"""Weight of each shared prefix character"""


def _common_characters(s1: str, s2: str, window: int) -> List[str]:
    """Characters of s1 found in s2 at most ``window`` positions away, in s1 order."""
    consumed = [False] * len(s2)
    common = []
    for i, ch in enumerate(s1):
        for j in range(max(0, i - window), min(i + window + 1, len(s2))):
            if not consumed[j] and s2[j] == ch:
                consumed[j] = True
                common.append(ch)
                break
    return common


def _prefix_length(s1: str, s2: str) -> int:
    n = min(PREFIX_MAX_LENGTH, len(s1), len(s2))
    for i in range(n):
        if s1[i] != s2[i]:
            return i
    return n


def jaro_similarity(s1: str, s2: str) -> float:
    """Jaro similarity in ``[0.0, 1.0]``.

    Identical strings (including two empty strings) score 1.0. Strings with
    no common character in the match window score 0.0.

    Raises:
        ValidationError: If either string is None.
    """
    require_str(s1, "s1")
    require_str(s2, "s2")
    if s1 == s2:
        return 1.0

    window = max(0, max(len(s1), len(s2)) // 2 - 1)
    common1 = _common_characters(s1, s2, window)
    common2 = _common_characters(s2, s1, window)
    if not common1 or not common2 or len(common1) != len(common2):
        return 0.0

    matches = len(common1)
    # half the out-of-order pairs, rounded down
    transpositions = sum(a != b for a, b in zip(common1, common2)) // 2
    return (
        matches / len(s1)
        + matches / len(s2)
        + (matches - transpositions) / matches
    ) / 3


def jaro_winkler_similarity(
    s1: str,
    s2: str,
    prefix_weight: float = PREFIX_SCALE,
) -> float:
    """Jaro-Winkler similarity in ``[0.0, 1.0]``.

    Args:
        s1: First string.
        s2: Second string.
        prefix_weight: Boost per shared prefix character, at most
            ``1 / 6`` so the score cannot exceed 1.0.

    Raises:
        ValidationError: If either string is None or prefix_weight is out of range.

    Example:
        >>> round(jaro_winkler_similarity("MARTHA", "MARHTA"), 4)
        0.9611
    """
    if not 0.0 <= prefix_weight <= 1.0 / PREFIX_MAX_LENGTH:
        raise ValidationError(
            f"prefix_weight must be in range [0, {1.0 / PREFIX_MAX_LENGTH:.4f}], "
            f"got {prefix_weight}"
        )
    jaro = jaro_similarity(s1, s2)
    return jaro + _prefix_length(s1, s2) * prefix_weight * (1.0 - jaro)


def jaro_winkler_distance(s1: str, s2: str) -> float:
    """``1 - jaro_winkler_similarity(s1, s2)``, in ``[0.0, 1.0]``."""
    return 1.0 - jaro_winkler_similarity(s1, s2)


class JaroWinkler(EditDistance, StringDistance):
    """Jaro-Winkler distance as a metric object.

    ``edit_distance`` quantizes the distance to an integer in
    ``[0, resolution]`` so it can key a BK-tree. Jaro-Winkler is not a
    metric, so such a tree may miss matches: validate the triangle
    inequality on your data first.

    Args:
        resolution: Number of integer steps between identical (0) and
            unrelated (resolution) strings.
    """

    is_metric = False

    def __init__(self, resolution: int = 100):
        if require_non_negative(resolution, "resolution") == 0:
            raise ValidationError("resolution must be > 0")
        self.resolution = resolution

    def edit_distance(self, s: str, t: str) -> int:
        return round(jaro_winkler_distance(s, t) * self.resolution)

    def distance(self, s: str, t: str) -> float:
        return jaro_winkler_distance(s, t)

    def __repr__(self) -> str:
        return f"JaroWinkler(resolution={self.resolution})"


__all__ = [
    "jaro_similarity",
    "jaro_winkler_similarity",
    "jaro_winkler_distance",
    "JaroWinkler",
    "PREFIX_MAX_LENGTH",
    "PREFIX_SCALE",
]
