"""Result types returned by indexes and batch helpers."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, order=True)
class SearchResult:
    """
    One match from an index search.

    Results order by distance first, then text, so ``sorted(results)`` lists
    the closest matches first.

    Attributes:
        distance: Edit distance between the query and ``text`` under the
            index's metric.
        text: The matched term.
        id: Position of the term in insertion order.
        score: Similarity ``1 - normalized distance`` when the metric provides
            a normalized distance, otherwise None.
    """

    distance: int
    text: str
    id: int
    score: Optional[float] = None


__all__ = ["SearchResult"]
