"""Property-based tests for fuzzytree using Hypothesis.

These tests verify properties that should hold for all inputs:
- Identity: d(a, a) == 0
- Symmetry: d(a, b) == d(b, a)
- Triangle inequality: d(a,c) <= d(a,b) + d(b,c) for Levenshtein
- Bounded variants: d(a, b, limit) == min(d(a, b), limit)
- BK-tree searches agree with a linear scan under a true metric

Restricted Damerau-Levenshtein, locale-tuned weighted Levenshtein and Jaro-Winkler
break the triangle inequality;
their counterexamples are pinned down as plain tests instead.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import fuzzytree as ft

text_strategy = st.text(max_size=30, alphabet=st.characters(blacklist_categories=["Cs"]))
# Small alphabets make close strings, and therefore interesting distances, likely
small_text = st.text(alphabet="abcd", max_size=8)
french_text = st.text(alphabet="aàeéèiïo0uçcsßdtmnbp -'ABCDÉ", max_size=10)
cost_models = st.sampled_from([ft.UNIFORM, ft.CASE_INSENSITIVE, ft.LOCALE_TUNED])


class TestIdentity:
    """d(a, a) == 0."""

    @given(text_strategy)
    def test_levenshtein(self, a):
        assert ft.levenshtein(a, a) == 0

    @given(text_strategy)
    def test_damerau(self, a):
        assert ft.damerau_levenshtein(a, a) == 0

    @given(french_text, cost_models)
    def test_weighted(self, a, costs):
        assert ft.weighted_levenshtein(a, a, costs) == 0

    @given(text_strategy)
    def test_jaro_winkler(self, a):
        assert ft.jaro_winkler_similarity(a, a) == 1.0


class TestSymmetry:
    """d(a, b) == d(b, a)."""

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_levenshtein(self, a, b):
        assert ft.levenshtein(a, b) == ft.levenshtein(b, a)

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_damerau(self, a, b):
        assert ft.damerau_levenshtein(a, b) == ft.damerau_levenshtein(b, a)

    @given(french_text, french_text, cost_models)
    @settings(max_examples=100)
    def test_weighted(self, a, b, costs):
        assert ft.weighted_levenshtein(a, b, costs) == ft.weighted_levenshtein(b, a, costs)

    @given(text_strategy, text_strategy)
    @settings(max_examples=100)
    def test_jaro_winkler(self, a, b):
        assert ft.jaro_winkler_similarity(a, b) == ft.jaro_winkler_similarity(b, a)


class TestBounds:
    """Distances stay within their documented ranges."""

    @given(text_strategy, text_strategy)
    def test_levenshtein_length_bounds(self, a, b):
        d = ft.levenshtein(a, b)
        assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))

    @given(text_strategy, text_strategy)
    def test_damerau_at_most_levenshtein(self, a, b):
        assert ft.damerau_levenshtein(a, b) <= ft.levenshtein(a, b)

    @given(text_strategy, text_strategy)
    def test_normalized_in_unit_interval(self, a, b):
        assert 0.0 <= ft.levenshtein_distance(a, b) <= 1.0
        assert 0.0 <= ft.damerau_levenshtein_distance(a, b) <= 1.0
        assert 0.0 <= ft.jaro_winkler_distance(a, b) <= 1.0

    @given(french_text, french_text, cost_models)
    def test_weighted_normalized_in_unit_interval(self, a, b, costs):
        assert 0.0 <= ft.weighted_levenshtein_distance(a, b, costs) <= 1.0

    @given(french_text, french_text)
    def test_case_insensitive_at_most_uniform(self, a, b):
        assert ft.weighted_levenshtein(a, b, ft.CASE_INSENSITIVE) <= ft.weighted_levenshtein(a, b)


class TestTriangleInequality:
    """d(a, c) <= d(a, b) + d(b, c)."""

    @given(small_text, small_text, small_text)
    @settings(max_examples=200)
    def test_levenshtein(self, a, b, c):
        assert ft.levenshtein(a, c) <= ft.levenshtein(a, b) + ft.levenshtein(b, c)

    @given(small_text, small_text, small_text)
    @settings(max_examples=200)
    def test_weighted_uniform(self, a, b, c):
        d = ft.weighted_levenshtein
        assert d(a, c) <= d(a, b) + d(b, c)

    def test_damerau_counterexample(self):
        # optimal string alignment is not a metric
        d = ft.damerau_levenshtein
        assert d("ca", "abc") == 3
        assert d("ca", "ac") + d("ac", "abc") == 2

    def test_locale_tuned_counterexample(self):
        # c/s and s/z are close pairs, c/z is not
        def d(a, b):
            return ft.weighted_levenshtein(a, b, ft.LOCALE_TUNED)

        assert d("c", "s") == 2
        assert d("s", "z") == 2
        assert d("c", "z") == 5
        assert d("c", "z") > d("c", "s") + d("s", "z")

    def test_jaro_winkler_counterexample(self):
        d = ft.jaro_winkler_distance
        assert d("ab", "ba") == 1.0
        assert d("ab", "aa") + d("aa", "ba") == pytest.approx(0.3 + 1 / 3)


class TestBoundedVariants:
    """d(a, b, limit) == min(d(a, b), limit)."""

    @given(small_text, small_text, st.integers(min_value=0, max_value=10))
    @settings(max_examples=200)
    def test_levenshtein(self, a, b, limit):
        assert ft.levenshtein(a, b, limit) == min(ft.levenshtein(a, b), limit)

    @given(small_text, small_text, st.integers(min_value=0, max_value=10))
    @settings(max_examples=200)
    def test_damerau(self, a, b, limit):
        assert ft.damerau_levenshtein(a, b, limit) == min(ft.damerau_levenshtein(a, b), limit)

    @given(st.lists(st.tuples(small_text, small_text), max_size=10))
    def test_shared_workspace(self, pairs):
        ws = ft.get_workspace(8, 8)
        for a, b in pairs:
            assert ft.damerau_levenshtein(a, b, workspace=ws) == ft.damerau_levenshtein(a, b)

    @given(small_text, small_text)
    def test_weighted_uniform_is_levenshtein(self, a, b):
        assert ft.weighted_levenshtein(a, b, ft.UNIFORM) == ft.levenshtein(a, b)


class TestBKTreeMatchesLinearScan:
    """Under a true metric, tree searches are exact."""

    @given(
        st.lists(small_text, min_size=1, max_size=30),
        small_text,
        st.integers(min_value=0, max_value=4),
    )
    @settings(max_examples=100)
    def test_query_levenshtein(self, terms, query, threshold):
        tree = ft.BKTree(ft.Levenshtein(), terms)
        expected = {t: ft.levenshtein(query, t) for t in terms}
        expected = {t: d for t, d in expected.items() if d <= threshold}
        assert tree.query(query, threshold) == expected

    @given(
        st.lists(small_text, min_size=1, max_size=30),
        small_text,
        st.integers(min_value=0, max_value=4),
    )
    @settings(max_examples=50)
    def test_query_weighted_uniform(self, terms, query, threshold):
        tree = ft.BKTree(ft.WeightedLevenshtein(ft.UNIFORM), terms)
        expected = {t for t in terms if ft.levenshtein(query, t) <= threshold}
        assert set(tree.query(query, threshold)) == expected

    @given(st.lists(small_text, min_size=1, max_size=30), small_text)
    @settings(max_examples=100)
    def test_find_best_match(self, terms, query):
        tree = ft.BKTree(ft.Levenshtein(), terms)
        expected = min(ft.levenshtein(query, t) for t in terms)
        word, distance = tree.find_best_word_match_with_distance(query)
        assert distance == expected
        assert ft.levenshtein(query, word) == expected
        assert tree.find_best_match(query) == expected

    @given(
        st.lists(small_text, min_size=1, max_size=30),
        small_text,
        st.integers(min_value=1, max_value=5),
    )
    @settings(max_examples=100)
    def test_find_nearest(self, terms, query, limit):
        tree = ft.BKTree(ft.Levenshtein(), terms)
        expected = sorted(ft.levenshtein(query, t) for t in set(terms))[:limit]
        assert [r.distance for r in tree.find_nearest(query, limit)] == expected

    @given(st.lists(small_text, min_size=1, max_size=30))
    def test_every_term_is_found(self, terms):
        tree = ft.BKTree(terms=terms)
        assert len(tree) == len(terms)
        for term in terms:
            assert term in tree


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
