"""Burkhard-Keller tree for fuzzy string search.

A BK-tree indexes strings under an integer metric. Every node keeps its
children keyed by their exact distance to the node's own term, so for a query
at distance ``d`` from a node, the triangle inequality guarantees that a child
under key ``k`` can only hold terms within ``threshold`` of the query when
``d - threshold <= k <= d + threshold``. All other subtrees are skipped.

For a true metric (Levenshtein, or weighted Levenshtein with the uniform or
case insensitive costs) the search is exact: :meth:`BKTree.query` returns the
same terms as comparing the query against every indexed term. Jaro-Winkler,
weighted Levenshtein with the locale tuned costs and, on rare inputs,
restricted Damerau-Levenshtein are not metrics, and a tree built over them
may miss matches. The first two declare ``is_metric = False`` and the tree
warns when built over them.

Nodes are stored in flat lists indexed by insertion order (node 0 is the
root), and traversals use an explicit stack, so degenerate trees as deep as
the corpus do not hit the recursion limit.

Reference: W. A. Burkhard and R. M. Keller, "Some Approaches to Best-Match
File Searching", CACM 16(4), 1973.

Example:
    >>> tree = BKTree(Levenshtein())
    >>> tree.add_all(["book", "books", "boo", "cook", "cake"])
    >>> sorted(tree.query("book", 1).items())
    [('boo', 1), ('book', 0), ('books', 1), ('cook', 1)]
    >>> tree.find_best_word_match("cale")
    'cake'
"""

import heapq
import logging
import math
import threading
import warnings
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from fuzzytree._utils import require_non_negative, require_str
from fuzzytree.exceptions import EmptyIndexError, ValidationError
from fuzzytree.interfaces import EditDistance, StringDistance
from fuzzytree.levenshtein import Levenshtein
from fuzzytree.metrics import MetricLike, get_metric
from fuzzytree.results import SearchResult

logger = logging.getLogger(__name__)

Metric = Union[EditDistance, Callable[[str, str], int]]


class BKTree:
    """
    BK-tree (Burkhard-Keller tree) for efficient fuzzy string search.

    The metric is fixed for the lifetime of the tree: every edge stores a
    distance computed with it. The tree is append-only and its shape depends
    on insertion order.

    Note:
        This class is NOT thread-safe for writes. Queries keep no state on the
        tree and may run concurrently with each other, but not with ``add``.
        Use :class:`ThreadSafeBKTree` when threads add and query at once.

    Args:
        metric: An EditDistance, any callable ``(str, str) -> int``, or an
            algorithm name resolved with :func:`~fuzzytree.get_metric`.
            Defaults to Levenshtein.
        terms: Optional terms to add right away.

    Warns:
        UserWarning: If the metric declares ``is_metric = False``.
    """

    def __init__(
        self,
        metric: Union[Metric, MetricLike, None] = None,
        terms: Optional[Iterable[str]] = None,
    ):
        if metric is None:
            metric = Levenshtein()
        elif isinstance(metric, str):
            metric = get_metric(metric)
        if not callable(metric):
            raise ValidationError(
                f"metric must be an EditDistance or a callable, got {type(metric).__name__}"
            )
        if getattr(metric, "is_metric", True) is False:
            warnings.warn(
                f"{metric!r} does not satisfy the triangle inequality; "
                "BK-tree searches over it may miss matches.",
                UserWarning,
                stacklevel=2,
            )
        self._metric = metric
        self._terms: List[str] = []
        self._children: List[Dict[int, int]] = []
        if terms is not None:
            self.add_all(terms)

    @property
    def metric(self) -> Metric:
        """The metric the tree was built with."""
        return self._metric

    def _distance(self, s: str, t: str) -> int:
        return self._metric(s, t)

    def _require_populated(self) -> None:
        if not self._terms:
            raise EmptyIndexError("Cannot search an empty BK-tree; add terms first")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add(self, term: str) -> int:
        """Add a term to the tree.

        Duplicates are stored again, as a child at distance 0.

        Returns:
            The id of the new node (its position in insertion order).
        """
        require_str(term, "term")
        node_id = len(self._terms)
        if node_id:
            node = 0
            while True:
                d = self._distance(term, self._terms[node])
                child = self._children[node].get(d)
                if child is None:
                    self._children[node][d] = node_id
                    break
                node = child
        self._terms.append(term)
        self._children.append({})
        return node_id

    def add_all(self, terms: Iterable[str]) -> None:
        """Add multiple terms to the tree, in order."""
        before = len(self._terms)
        for term in terms:
            self.add(term)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Added %d terms to %r (size %d, depth %d)",
                len(self._terms) - before,
                self,
                len(self._terms),
                self.depth(),
            )

    # ------------------------------------------------------------------
    # Radius queries
    # ------------------------------------------------------------------

    def _collect(self, term: str, threshold: int) -> List[Tuple[int, int]]:
        """(node id, distance) of every node within threshold of term."""
        require_str(term, "term")
        require_non_negative(threshold, "threshold")
        self._require_populated()

        found = []
        stack = [0]
        visited = 0
        while stack:
            node = stack.pop()
            visited += 1
            d = self._distance(term, self._terms[node])
            if d <= threshold:
                found.append((node, d))
            low, high = d - threshold, d + threshold
            for key, child in self._children[node].items():
                if low <= key <= high:
                    stack.append(child)

        logger.debug(
            "Query %r within %d: %d matches, visited %d of %d nodes",
            term,
            threshold,
            len(found),
            visited,
            len(self._terms),
        )
        return found

    def query(self, term: str, threshold: int) -> Dict[str, int]:
        """Find every indexed term within ``threshold`` of ``term``.

        Args:
            term: Query string.
            threshold: Maximum distance, inclusive.

        Returns:
            Mapping of matching term to its distance from ``term``.

        Raises:
            EmptyIndexError: If nothing has been added yet.
            ValidationError: If threshold is negative.
        """
        return {self._terms[node]: d for node, d in self._collect(term, threshold)}

    def search(
        self,
        term: str,
        max_distance: int,
        limit: Optional[int] = None,
        distinct: bool = True,
    ) -> List[SearchResult]:
        """Like :meth:`query`, as SearchResult objects sorted by distance then text.

        Args:
            term: Query string.
            max_distance: Maximum distance, inclusive.
            limit: Maximum number of results to return.
            distinct: Report duplicated terms once, under their first id.
                When False every matching node is reported, ties ordered by id.
        """
        hits = self._collect(term, max_distance)
        if distinct:
            first: Dict[str, Tuple[int, int]] = {}
            for node, d in hits:
                text = self._terms[node]
                if text not in first or node < first[text][0]:
                    first[text] = (node, d)
            hits = list(first.values())
        results = sorted(self._result(term, self._terms[node], d, node) for node, d in hits)
        return results if limit is None else results[:limit]

    def _result(self, term: str, text: str, distance: int, node: int) -> SearchResult:
        score = None
        if isinstance(self._metric, StringDistance):
            score = 1.0 - self._metric.distance(term, text)
        return SearchResult(distance=distance, text=text, id=node, score=score)

    # ------------------------------------------------------------------
    # Nearest neighbour queries
    # ------------------------------------------------------------------

    def _find_best(self, term: str) -> Tuple[str, int]:
        """Depth-first search for the closest term.

        The running best is a local accumulator, never tree state, so
        concurrent searches do not interfere. Children are visited in
        ascending key order and a child is only entered when
        ``key < distance_at_parent + best_so_far``. Ties go to the first term
        found.
        """
        require_str(term, "term")
        self._require_populated()

        best_term = self._terms[0]
        best = math.inf
        # (node, distance from term to the parent, key of node under the parent)
        stack: List[Tuple[int, float, int]] = [(0, math.inf, 0)]
        while stack:
            node, parent_d, key = stack.pop()
            if not key < parent_d + best:
                continue
            d = self._distance(term, self._terms[node])
            if d < best:
                best, best_term = d, self._terms[node]
                if best == 0:
                    break
            for child_key in sorted(self._children[node], reverse=True):
                stack.append((self._children[node][child_key], d, child_key))

        return best_term, int(best)

    def find_best_match(self, term: str) -> int:
        """Distance from ``term`` to the closest indexed term.

        Raises:
            EmptyIndexError: If nothing has been added yet.
        """
        return self._find_best(term)[1]

    def find_best_word_match(self, term: str) -> str:
        """The indexed term closest to ``term``.

        Raises:
            EmptyIndexError: If nothing has been added yet.
        """
        return self._find_best(term)[0]

    def find_best_word_match_with_distance(self, term: str) -> Tuple[str, int]:
        """The indexed term closest to ``term``, and its distance."""
        return self._find_best(term)

    def find_nearest(self, term: str, limit: int) -> List[SearchResult]:
        """The ``limit`` indexed terms closest to ``term``.

        Same pruning as :meth:`query`, with the threshold shrinking to the
        distance of the current ``limit``-th best match. Every term tied at
        that distance is kept until the end, so ties at the cutoff go to the
        alphabetically first text whatever the tree's shape.

        Returns:
            SearchResult objects sorted by distance then text. Duplicated terms
            are reported once, under their first id.

        Raises:
            EmptyIndexError: If nothing has been added yet.
        """
        require_str(term, "term")
        require_non_negative(limit, "limit")
        self._require_populated()
        if limit == 0:
            return []

        # max-heap of the `limit` smallest distances seen
        bounds: List[int] = []
        found: Dict[str, Tuple[int, int]] = {}
        stack = [0]
        while stack:
            node = stack.pop()
            text = self._terms[node]
            d = self._distance(term, text)
            if text in found:
                if node < found[text][1]:
                    found[text] = (d, node)
            elif len(bounds) < limit:
                heapq.heappush(bounds, -d)
                found[text] = (d, node)
            elif d <= -bounds[0]:
                if d < -bounds[0]:
                    heapq.heapreplace(bounds, -d)
                found[text] = (d, node)
            bound = -bounds[0] if len(bounds) == limit else math.inf
            for key, child in self._children[node].items():
                if d - bound <= key <= d + bound:
                    stack.append(child)

        results = sorted(self._result(term, text, d, node) for text, (d, node) in found.items())
        return results[:limit]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def contains(self, term: str) -> bool:
        """Check if the tree holds ``term`` (distance 0 under its metric)."""
        if not self._terms:
            return False
        return term in self.query(term, 0)

    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if not self._terms:
            return 0
        deepest = 0
        stack = [(0, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in self._children[node].values())
        return deepest

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and self.contains(term)

    def __len__(self) -> int:
        return len(self._terms)

    def __bool__(self) -> bool:
        return bool(self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._terms))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(metric={self._metric!r}, size={len(self._terms)})"


class ThreadSafeBKTree(BKTree):
    """
    BK-tree safe to share between threads.

    Every operation holds a re-entrant lock, so inserts and queries from
    different threads are serialized.
    """

    def __init__(
        self,
        metric: Union[Metric, MetricLike, None] = None,
        terms: Optional[Iterable[str]] = None,
    ):
        self._lock = threading.RLock()
        super().__init__(metric, terms)

    def add(self, term: str) -> int:
        with self._lock:
            return super().add(term)

    def add_all(self, terms: Iterable[str]) -> None:
        with self._lock:
            super().add_all(terms)

    def _collect(self, term: str, threshold: int) -> List[Tuple[int, int]]:
        with self._lock:
            return super()._collect(term, threshold)

    def _find_best(self, term: str) -> Tuple[str, int]:
        with self._lock:
            return super()._find_best(term)

    def find_nearest(self, term: str, limit: int) -> List[SearchResult]:
        with self._lock:
            return super().find_nearest(term, limit)

    def depth(self) -> int:
        with self._lock:
            return super().depth()

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return super().__iter__()


__all__ = ["BKTree", "ThreadSafeBKTree", "Metric"]
