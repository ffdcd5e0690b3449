"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions,
enabling edit distances and BK-tree lookups directly in Polars
expression contexts.

Note:
    Every method runs Python code per row through map_elements. Compared
    against a literal, null values stay null; compared against another
    column, nulls count as empty strings.

Example:
    >>> import polars as pl
    >>> import fuzzytree  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["kitten", "sitting", "mitten"]})
    >>> df.with_columns(
    ...     dist=pl.col("name").fuzzy.distance("kitten")
    ... )
"""

from typing import Iterable, Optional, Union

import polars as pl

from fuzzytree.bktree import BKTree
from fuzzytree.enums import Algorithm, CostModel, NormalizationMode
from fuzzytree.exceptions import EmptyIndexError
from fuzzytree.interfaces import CostFunction
from fuzzytree.metrics import get_metric
from fuzzytree.normalize import normalize_string, resolve_normalizer

CostsLike = Union[str, CostModel, CostFunction, None]


def _text(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Provides chainable methods for fuzzy matching directly on columns.
    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, other: Union[str, pl.Expr], func, return_dtype) -> pl.Expr:
        if isinstance(other, str):
            # Compare against a literal string
            return self._expr.map_elements(
                lambda s: func(_text(s), other),
                return_dtype=return_dtype,
            )
        # Compare against another column
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_text(row["_left"]), _text(row["_right"])),
            return_dtype=return_dtype,
        )

    def distance(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[str, Algorithm] = Algorithm.LEVENSHTEIN,
        costs: CostsLike = None,
    ) -> pl.Expr:
        """
        Calculate edit distance between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            algorithm: Distance algorithm to use (string or Algorithm enum)
            costs: Cost model, for ``weighted_levenshtein`` only

        Returns:
            Expression producing integer distances

        Example:
            >>> df.with_columns(
            ...     dist=pl.col("name1").fuzzy.distance(pl.col("name2"), "damerau")
            ... )
        """
        metric = get_metric(algorithm, costs)
        return self._pairwise(other, metric.edit_distance, pl.Int64)

    def normalized_distance(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[str, Algorithm] = Algorithm.LEVENSHTEIN,
        costs: CostsLike = None,
    ) -> pl.Expr:
        """
        Calculate the normalized distance (0.0 to 1.0) to another value/column.

        Example:
            >>> df.with_columns(
            ...     d=pl.col("name").fuzzy.normalized_distance("John", "jaro_winkler")
            ... )
        """
        metric = get_metric(algorithm, costs)
        return self._pairwise(other, metric.distance, pl.Float64)

    def is_within(
        self,
        other: Union[str, pl.Expr],
        max_distance: int,
        algorithm: Union[str, Algorithm] = Algorithm.LEVENSHTEIN,
        costs: CostsLike = None,
    ) -> pl.Expr:
        """
        Check if values are within ``max_distance`` edits of another value/column.

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_within("John", 1))
        """
        return self.distance(other, algorithm=algorithm, costs=costs) <= max_distance

    def best_match(
        self,
        choices: Iterable[str],
        max_distance: Optional[int] = None,
        algorithm: Union[str, Algorithm] = Algorithm.LEVENSHTEIN,
        costs: CostsLike = None,
    ) -> pl.Expr:
        """
        Find the closest string from a list of choices.

        The choices are indexed once in a BK-tree shared by all rows.

        Args:
            choices: Strings to match against
            max_distance: Return null when the closest choice is farther than this
            algorithm: Distance algorithm to use (string or Algorithm enum)
            costs: Cost model, for ``weighted_levenshtein`` only

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").fuzzy.best_match(categories, max_distance=3)
            ... )
        """
        tree = BKTree(get_metric(algorithm, costs), terms=choices)

        def find_best(value):
            if value is None:
                return None
            try:
                match, distance = tree.find_best_word_match_with_distance(str(value))
            except EmptyIndexError:
                return None
            if max_distance is not None and distance > max_distance:
                return None
            return match

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)

    def normalize(
        self,
        mode: Union[str, NormalizationMode, Iterable[Union[str, NormalizationMode]]] = (
            NormalizationMode.STRICT
        ),
    ) -> pl.Expr:
        """
        Normalize strings for fuzzy matching.

        Args:
            mode: Normalization mode(s), see :func:`~fuzzytree.normalize_string`

        Returns:
            Normalized string expression

        Example:
            >>> df.with_columns(
            ...     normalized=pl.col("name").fuzzy.normalize("ascii_fold")
            ... )
        """
        modes = resolve_normalizer(mode)

        def normalize_value(value):
            if value is None:
                return None
            return normalize_string(str(value), modes)

        return self._expr.map_elements(normalize_value, return_dtype=pl.Utf8)
