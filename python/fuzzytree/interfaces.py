"""Capability interfaces shared by cost functions, metrics and indexes.

A metric is any object implementing :class:`EditDistance` (integer edit
distance, usable as a BK-tree key) and/or :class:`StringDistance`
(normalized distance in ``[0, 1]``). Cost functions parameterize the
weighted Levenshtein metric.
"""

from abc import ABC, abstractmethod


class CostFunction(ABC):
    """Per-character costs of the edit operations.

    Implementations must be symmetric for substitution
    (``subst_cost(a, b) == subst_cost(b, a)``) and return 0 when a character
    is substituted for itself, otherwise the induced distance is not a metric.
    This is a contract on implementers; it is not checked at runtime.
    Insertion and deletion share one cost to keep the distance symmetric.
    """

    #: False when a substitution can cost more than a detour through a third
    #: character, which breaks the triangle inequality. BK-trees warn when
    #: built over such costs.
    is_metric = True

    @abstractmethod
    def ins_del_cost(self, c: str) -> int:
        """Cost of inserting or deleting ``c``."""

    @abstractmethod
    def subst_cost(self, c1: str, c2: str) -> int:
        """Cost of replacing ``c1`` with ``c2``."""

    @abstractmethod
    def max_cost(self) -> int:
        """Largest cost any single operation can have."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EditDistance(ABC):
    """Integer edit distance between two strings."""

    #: False for similarity-derived distances that may violate the triangle
    #: inequality. BK-trees warn when built over such a metric.
    is_metric = True

    @abstractmethod
    def edit_distance(self, s: str, t: str) -> int:
        """Cost of the cheapest edit script turning ``s`` into ``t``."""

    def __call__(self, s: str, t: str) -> int:
        return self.edit_distance(s, t)


class StringDistance(ABC):
    """Normalized distance between two strings.

    0.0 means ``s`` and ``t`` are identical under the distance's own notion
    of identity, 1.0 means they have nothing in common.
    """

    @abstractmethod
    def distance(self, s: str, t: str) -> float:
        """Normalized distance in ``[0.0, 1.0]``."""


__all__ = ["CostFunction", "EditDistance", "StringDistance"]
