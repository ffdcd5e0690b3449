"""FuzzyIndex: a BK-tree over a Polars column.

This module provides a high-level interface for building reusable fuzzy
indices from Polars Series, DataFrames, delimited files, or Python lists,
enabling efficient repeated searches without rebuilding the index.

Warning:
    This class is NOT thread-safe. Create separate instances per thread
    for concurrent operations, or pass ``thread_safe=True``.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import polars as pl

from fuzzytree.bktree import BKTree, Metric, ThreadSafeBKTree
from fuzzytree.enums import Algorithm, CostModel, NormalizationMode
from fuzzytree.interfaces import CostFunction
from fuzzytree.metrics import get_metric
from fuzzytree.normalize import normalize_string, resolve_normalizer
from fuzzytree.results import SearchResult

logger = logging.getLogger(__name__)

NormalizeLike = Union[str, NormalizationMode, Iterable[Union[str, NormalizationMode]], None]


class FuzzyIndex:
    """
    A reusable fuzzy matching index for efficient batch operations.

    FuzzyIndex wraps a :class:`~fuzzytree.BKTree` and provides a convenient API
    for building it from Polars data and searching it with Polars Series.
    Items can be normalized before indexing (queries are normalized the same
    way); results always report the original, unnormalized items.

    Warning:
        This class is NOT thread-safe unless built with ``thread_safe=True``.
        Create separate instances for each thread when using in concurrent
        applications.

    Example:
        >>> import polars as pl
        >>> from fuzzytree import FuzzyIndex
        >>>
        >>> # Build index from a Series
        >>> towns = pl.Series(["Bard-lès-Pesmes", "Barre-les-Pesmes", "Besançon"])
        >>> index = FuzzyIndex.from_series(towns, normalize="strict")
        >>>
        >>> # Search for close strings
        >>> [r.text for r in index.search("BARD LES PESMES", max_distance=1)]
        ['Bard-lès-Pesmes']
    """

    def __init__(
        self,
        items: List[str],
        algorithm: Union[str, Algorithm] = Algorithm.LEVENSHTEIN,
        costs: Union[str, CostModel, CostFunction, None] = None,
        normalize: NormalizeLike = None,
        thread_safe: bool = False,
    ):
        """
        Create a FuzzyIndex from a list of strings.

        Args:
            items: List of strings to index
            algorithm: Distance used by the tree, see :func:`~fuzzytree.get_metric`
            costs: Cost model, for ``weighted_levenshtein`` only
            normalize: Normalization mode(s) applied to items and queries
            thread_safe: Build a :class:`~fuzzytree.ThreadSafeBKTree`
        """
        self._items = list(items)
        self._algorithm = algorithm
        self._normalize = resolve_normalizer(normalize)
        self._tree = self._build_index(get_metric(algorithm, costs), thread_safe)

    def _build_index(self, metric: Metric, thread_safe: bool) -> BKTree:
        """Build the underlying BK-tree."""
        tree = ThreadSafeBKTree(metric) if thread_safe else BKTree(metric)
        tree.add_all(self._key(item) for item in self._items)
        logger.debug("Built %r over %d items", tree, len(self._items))
        return tree

    def _key(self, s: str) -> str:
        if self._normalize is None:
            return s
        return normalize_string(s, self._normalize)

    @classmethod
    def from_series(cls, series: "pl.Series", **kwargs) -> "FuzzyIndex":
        """
        Create a FuzzyIndex from a Polars Series.

        Nulls are indexed as empty strings so ids stay aligned with rows.

        Args:
            series: Polars Series of strings to index
            **kwargs: Passed to :class:`FuzzyIndex`

        Returns:
            FuzzyIndex instance
        """
        items = [str(x) if x is not None else "" for x in series.to_list()]
        return cls(items, **kwargs)

    @classmethod
    def from_dataframe(cls, df: "pl.DataFrame", column: str, **kwargs) -> "FuzzyIndex":
        """
        Create a FuzzyIndex from a DataFrame column.

        Args:
            df: Polars DataFrame
            column: Column name to index
            **kwargs: Passed to :class:`FuzzyIndex`
        """
        return cls.from_series(df[column], **kwargs)

    @classmethod
    def from_csv(
        cls,
        path: Union[str, Path],
        column: str,
        separator: str = ",",
        **kwargs,
    ) -> "FuzzyIndex":
        """
        Create a FuzzyIndex from one column of a delimited text file.

        Only ``column`` is read. Use ``separator="\\t"`` for TSV or ``";"``
        for semicolon separated files.

        Args:
            path: File to read
            column: Column name to index
            separator: Field delimiter
            **kwargs: Passed to :class:`FuzzyIndex`
        """
        df = pl.read_csv(path, separator=separator, columns=[column], infer_schema=False)
        return cls.from_series(df[column], **kwargs)

    def search(
        self,
        query: str,
        max_distance: int,
        limit: Optional[int] = None,
    ) -> List[SearchResult]:
        """
        Search the index for items within ``max_distance`` of the query.

        Args:
            query: Query string to search for
            max_distance: Maximum distance under the index's metric
            limit: Maximum number of results to return

        Returns:
            List of SearchResult objects sorted by distance then item, with
            ``text`` set to the original item and ``id`` to its position in
            the input. Items that normalize to the same key are all reported.
        """
        hits = self._tree.search(self._key(query), max_distance, distinct=False)
        results = sorted(self._original(r) for r in hits)
        return results if limit is None else results[:limit]

    def best_match(self, query: str) -> SearchResult:
        """The single closest item."""
        return self._original(self._tree.find_nearest(self._key(query), 1)[0])

    def _original(self, result: SearchResult) -> SearchResult:
        return SearchResult(
            distance=result.distance,
            text=self._items[result.id],
            id=result.id,
            score=result.score,
        )

    def search_series(
        self,
        queries: "pl.Series",
        max_distance: int,
        limit: Optional[int] = 1,
        include_query: bool = True,
    ) -> "pl.DataFrame":
        """
        Search for each query in a Series, returning a DataFrame of results.

        Args:
            queries: Series of query strings
            max_distance: Maximum distance under the index's metric
            limit: Maximum matches per query (default: 1 for best match only)
            include_query: Include query column in results

        Returns:
            DataFrame with columns:
            - query_idx: Index of the query in the input Series
            - query: The query string (if include_query=True)
            - match: The matched string from the index
            - match_idx: Index of the match in the original indexed data
            - distance: Distance between query and match
        """
        rows = []
        for query_idx, query in enumerate(queries.to_list()):
            if query is None:
                continue
            for match in self.search(str(query), max_distance, limit=limit):
                row = {
                    "query_idx": query_idx,
                    "match": match.text,
                    "match_idx": match.id,
                    "distance": match.distance,
                }
                if include_query:
                    row["query"] = str(query)
                rows.append(row)

        schema = {
            "query_idx": pl.Int64,
            "match": pl.Utf8,
            "match_idx": pl.Int64,
            "distance": pl.Int64,
        }
        if include_query:
            schema["query"] = pl.Utf8
        if not rows:
            return pl.DataFrame(schema=schema)

        df = pl.DataFrame(rows, schema=schema)
        if include_query:
            return df.select(["query_idx", "query", "match", "match_idx", "distance"])
        return df.select(["query_idx", "match", "match_idx", "distance"])

    def batch_search(
        self,
        queries: List[str],
        max_distance: int,
        limit: Optional[int] = 1,
    ) -> List[List[SearchResult]]:
        """
        Search for multiple queries, returning results for each.

        Returns:
            List of lists, where each inner list contains SearchResult
            objects for the corresponding query
        """
        return [self.search(q, max_distance, limit=limit) for q in queries]

    def get_items(self) -> List[str]:
        """Return the list of indexed items."""
        return self._items.copy()

    def __len__(self) -> int:
        """Return the number of indexed items."""
        return len(self._items)

    def __repr__(self) -> str:
        algorithm = getattr(self._algorithm, "value", self._algorithm)
        return f"FuzzyIndex(algorithm={algorithm!r}, size={len(self._items)})"
