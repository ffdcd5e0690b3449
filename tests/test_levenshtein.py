"""Tests for edit distance algorithms: Levenshtein, Damerau-Levenshtein, weighted Levenshtein.

This module tests the exact and bounded variants of the edit distances
provided by fuzzytree, and their normalized forms.
"""

import pytest

import fuzzytree as ft


class TestLevenshtein:
    """Tests for Levenshtein distance functions."""

    def test_identical_strings(self):
        assert ft.levenshtein("hello", "hello") == 0, "Identical strings should have distance 0"
        assert ft.levenshtein("", "") == 0, "Two empty strings should have distance 0"

    def test_empty_strings(self):
        assert ft.levenshtein("hello", "") == 5, "Distance to empty string equals string length"
        assert ft.levenshtein("", "hello") == 5, "Distance from empty string equals target length"

    def test_classic_examples(self):
        # kitten -> sitten (s for k) -> sittin (i for e) -> sitting (g added) = 3 edits
        assert ft.levenshtein("kitten", "sitting") == 3, "kitten->sitting requires 3 edits"
        assert ft.levenshtein("saturday", "sunday") == 3, "saturday->sunday requires 3 edits"

    def test_transposition_costs_two(self):
        assert ft.levenshtein("ab", "ba") == 2

    def test_unicode(self):
        assert ft.levenshtein("café", "cafe") == 1, "Accent difference is 1 edit"
        assert ft.levenshtein("日本語", "日本") == 1

    def test_none_raises(self):
        with pytest.raises(ft.ValidationError):
            ft.levenshtein(None, "abc")
        with pytest.raises(ft.ValidationError):
            ft.levenshtein("abc", None)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            ft.levenshtein(None, None)

    def test_normalized_distance(self):
        assert ft.levenshtein_distance("hello", "hello") == 0.0
        assert ft.levenshtein_distance("hello", "hallo") == 0.2
        assert ft.levenshtein_distance("abc", "") == 1.0
        assert ft.levenshtein_distance("", "") == 0.0

    def test_alias(self):
        assert ft.edit_distance("kitten", "sitting") == 3


class TestLevenshteinBounded:
    """Tests for the limit parameter of levenshtein."""

    def test_within_limit_is_exact(self):
        assert ft.levenshtein("kitten", "sitting", 4) == 3
        assert ft.levenshtein("abc", "abd", 2) == 1

    def test_capped_at_limit(self):
        assert ft.levenshtein("kitten", "sitting", 3) == 3
        assert ft.levenshtein("kitten", "sitting", 2) == 2
        assert ft.levenshtein("abcdef", "ghijkl", 3) == 3

    def test_length_difference_short_circuit(self):
        assert ft.levenshtein("h", "hello", 2) == 2
        assert ft.levenshtein("hello", "h", 2) == 2

    def test_transposition_not_special(self):
        assert ft.levenshtein("sohrt", "short", 3) == 2
        assert ft.levenshtein("sohrts", "short", 2) == 2

    def test_empty_strings(self):
        assert ft.levenshtein("", "", 3) == 0
        assert ft.levenshtein("", "abcdef", 3) == 3
        assert ft.levenshtein("ab", "", 3) == 2

    def test_zero_limit(self):
        assert ft.levenshtein("abc", "abc", 0) == 0
        assert ft.levenshtein("abc", "xyz", 0) == 0

    def test_negative_limit_raises(self):
        with pytest.raises(ft.ValidationError, match="limit must be >= 0"):
            ft.levenshtein("abc", "abd", -1)


class TestDamerauLevenshtein:
    """Tests for restricted Damerau-Levenshtein (optimal string alignment) distance."""

    def test_transposition(self):
        assert ft.damerau_levenshtein("ab", "ba") == 1
        assert ft.damerau_levenshtein("ca", "ac") == 1

    def test_names(self):
        assert ft.damerau_levenshtein("michael", "mickael") == 1
        assert ft.damerau_levenshtein("mikael", "mickael") == 1
        assert ft.damerau_levenshtein("mickael", "mikael") == 1
        assert ft.damerau_levenshtein("mickael", "mikcael") == 1
        assert ft.damerau_levenshtein("mikael", "michael") == 2
        assert ft.damerau_levenshtein("michael", "mechail") == 2

    def test_banana(self):
        assert ft.damerau_levenshtein("banana", "baanaa") == 2
        # transposition at either end
        assert ft.damerau_levenshtein("banana", "banaan") == 1
        assert ft.damerau_levenshtein("banana", "abnana") == 1

    def test_empty_strings(self):
        assert ft.damerau_levenshtein("", "") == 0
        assert ft.damerau_levenshtein("short", "") == 5
        assert ft.damerau_levenshtein("", "short") == 5

    def test_deletion(self):
        assert ft.damerau_levenshtein("short", "shrt") == 1

    def test_optimal_string_alignment_restriction(self):
        # A transposed pair cannot be edited again: unrestricted
        # Damerau-Levenshtein would give 2 (ca -> ac -> abc).
        assert ft.damerau_levenshtein("ca", "abc") == 3

    def test_none_raises(self):
        with pytest.raises(ft.ValidationError):
            ft.damerau_levenshtein(None, "abc")

    def test_normalized_distance(self):
        assert ft.damerau_levenshtein_distance("hello", "ehllo") == 0.2
        assert ft.damerau_levenshtein_distance("", "") == 0.0


class TestDamerauLevenshteinBounded:
    """Tests for the limit parameter of damerau_levenshtein."""

    def test_length_difference_short_circuit(self):
        assert ft.damerau_levenshtein("h", "hello", 2) == 2
        assert ft.damerau_levenshtein("hello", "h", 2) == 2

    def test_long_single_character(self):
        long = "Blah blah blah blah blah blah"
        assert ft.damerau_levenshtein("1", long, 30) == 29
        assert ft.damerau_levenshtein("1", long, 10) == 10

    def test_prefix(self):
        assert ft.damerau_levenshtein("shortisbetter", "short", 10) == 8
        assert ft.damerau_levenshtein("shortisbetter", "short", 2) == 2
        assert ft.damerau_levenshtein("short", "shortisbetter", 10) == 8
        assert ft.damerau_levenshtein("short", "shortisbetter", 2) == 2

    def test_small_edits_below_limit(self):
        assert ft.damerau_levenshtein("short", "shorts", 2) == 1
        assert ft.damerau_levenshtein("sohrt", "short", 3) == 1
        assert ft.damerau_levenshtein("short", "shoort", 2) == 1
        assert ft.damerau_levenshtein("short", "shrt", 2) == 1

    def test_unrelated_strings(self):
        assert ft.damerau_levenshtein("abcdefghij", "klmnopqrst", 10) == 10
        assert ft.damerau_levenshtein("abcdefghij", "klmnopqrst", 2) == 2

    def test_empty_strings(self):
        assert ft.damerau_levenshtein("", "", 3) == 0
        assert ft.damerau_levenshtein("short", "", 2) == 2
        assert ft.damerau_levenshtein("other one is zero-length", "", 3) == 3
        assert ft.damerau_levenshtein("", "other one is zero-length", 3) == 3


class TestWorkspace:
    """Tests for reusing a preallocated Damerau-Levenshtein table."""

    def test_workspace_size(self):
        assert len(ft.get_workspace(3, 4)) == 20

    def test_reused_workspace(self):
        ws = ft.get_workspace(7, 7)
        words = ["mickael", "mikael", "michael", "mechail", "m", ""]
        expected = [ft.damerau_levenshtein("michael", w) for w in words]
        assert [ft.damerau_levenshtein("michael", w, workspace=ws) for w in words] == expected

    def test_bounded_with_workspace(self):
        ws = ft.get_workspace(10, 10)
        assert ft.damerau_levenshtein("abcdefghij", "klmnopqrst", 2, workspace=ws) == 2
        assert ft.damerau_levenshtein("sohrt", "short", 3, workspace=ws) == 1

    def test_oversized_workspace(self):
        ws = ft.get_workspace(50, 50)
        assert ft.damerau_levenshtein("banana", "baanaa", workspace=ws) == 2

    def test_undersized_workspace_raises(self):
        ws = ft.get_workspace(2, 2)
        with pytest.raises(ft.ValidationError, match="workspace"):
            ft.damerau_levenshtein("banana", "baanaa", workspace=ws)


class TestWeightedLevenshtein:
    """Tests for cost-weighted Levenshtein distance."""

    def test_uniform(self):
        assert ft.weighted_levenshtein("Michael", "Michael") == 0
        assert ft.weighted_levenshtein("Michael", "Michael ") == 1
        assert ft.weighted_levenshtein("Michael", "Michae") == 1
        assert ft.weighted_levenshtein("Michael", "michael") == 1
        assert ft.weighted_levenshtein("abcdef", "0abcdef") == 1
        assert ft.weighted_levenshtein("une phrase au hasard", "une fraise au hazar") == 5

    def test_case_insensitive(self):
        costs = ft.CASE_INSENSITIVE
        assert ft.weighted_levenshtein("Michael", "Michael", costs) == 0
        assert ft.weighted_levenshtein("Michael", "michael", costs) == 0
        assert ft.weighted_levenshtein("Une Phrase Au Hasard", "une fraise au hazar", costs) == 5

    def test_locale_tuned(self):
        costs = ft.LOCALE_TUNED
        assert ft.weighted_levenshtein("Michael", "Michael", costs) == 0
        assert ft.weighted_levenshtein("Michael", "michael", costs) == 0
        assert ft.weighted_levenshtein("Michael", "michaël", costs) == 1
        assert ft.weighted_levenshtein("Michael", "nichael", costs) == 2
        assert ft.weighted_levenshtein("Michael", "michaïl", costs) == 2
        assert ft.weighted_levenshtein("Michael", "mishaïl", costs) == 4
        assert ft.weighted_levenshtein("Michael", "mikhaïl", costs) == 4
        assert ft.weighted_levenshtein("Michael", "Lichael", costs) == 5

    def test_digit_for_letter(self):
        assert ft.weighted_levenshtein("Loto", "L0t0", "locale_tuned") == 2

    def test_insertion_uses_character_cost(self):
        # "s" costs 3 to insert, "x" costs 5
        assert ft.weighted_levenshtein("pa", "pas", ft.LOCALE_TUNED) == 3
        assert ft.weighted_levenshtein("pa", "pax", ft.LOCALE_TUNED) == 5
        assert ft.weighted_levenshtein("", "ts", ft.LOCALE_TUNED) == 6

    def test_cost_model_names(self):
        assert ft.weighted_levenshtein("Michael", "michael", "case_insensitive") == 0
        assert ft.weighted_levenshtein("Michael", "michael", ft.CostModel.CASE_INSENSITIVE) == 0
        assert ft.weighted_levenshtein("Michael", "michael", "caseInsensitive") == 0

    def test_unknown_cost_model_raises(self):
        with pytest.raises(ft.AlgorithmError, match="Unknown cost model"):
            ft.weighted_levenshtein("a", "b", "klingon")

    def test_empty_strings(self):
        assert ft.weighted_levenshtein("", "") == 0
        assert ft.weighted_levenshtein("abc", "") == 3

    def test_normalized_by_ten_times_length(self):
        assert ft.weighted_levenshtein_distance("abcde", "abcdx") == pytest.approx(1 / 50)
        assert ft.weighted_levenshtein_distance(
            "Michael", "michaël", "locale_tuned"
        ) == pytest.approx(1 / 70)
        assert ft.weighted_levenshtein_distance("", "") == 0.0


class TestMetricObjects:
    """Tests for the metric strategy classes."""

    def test_levenshtein_object(self):
        metric = ft.Levenshtein()
        assert metric.edit_distance("kitten", "sitting") == 3
        assert metric("kitten", "sitting") == 3
        assert metric.edit_distance("kitten", "sitting", limit=2) == 2
        assert metric.distance("hello", "hallo") == 0.2

    def test_damerau_object(self):
        metric = ft.DamerauLevenshtein()
        assert metric("ab", "ba") == 1
        assert metric.edit_distance("h", "hello", 2) == 2

    def test_weighted_object(self):
        metric = ft.WeightedLevenshtein("locale_tuned")
        assert metric.costs is ft.LOCALE_TUNED
        assert metric("Loto", "L0t0") == 2
        assert repr(metric) == "WeightedLevenshtein(costs=LocaleTunedCosts())"

    def test_interfaces(self):
        for metric in (ft.Levenshtein(), ft.DamerauLevenshtein(), ft.WeightedLevenshtein()):
            assert isinstance(metric, ft.EditDistance)
            assert isinstance(metric, ft.StringDistance)
            assert metric.is_metric

    def test_get_metric(self):
        assert isinstance(ft.get_metric("levenshtein"), ft.Levenshtein)
        assert isinstance(ft.get_metric("damerau"), ft.DamerauLevenshtein)
        assert isinstance(ft.get_metric(ft.Algorithm.DAMERAU_LEVENSHTEIN), ft.DamerauLevenshtein)
        assert isinstance(ft.get_metric("JARO_WINKLER"), ft.JaroWinkler)
        weighted = ft.get_metric("weighted_levenshtein", costs="locale_tuned")
        assert weighted.costs is ft.LOCALE_TUNED
        assert ft.get_metric("weighted_levenshtein").costs is ft.UNIFORM

    def test_get_metric_unknown(self):
        with pytest.raises(ft.AlgorithmError, match="Unknown algorithm"):
            ft.get_metric("soundex")

    def test_get_metric_costs_only_for_weighted(self):
        with pytest.raises(ft.ValidationError, match="does not take a cost model"):
            ft.get_metric("levenshtein", costs="uniform")


class TestVeryLongStrings:
    """Long inputs complete and stay exact."""

    def test_levenshtein_long_strings(self):
        assert ft.levenshtein("a" * 1000, "b" * 1000) == 1000

    def test_bounded_gives_up_early(self):
        assert ft.levenshtein("a" * 1000, "b" * 1000, 5) == 5
        assert ft.damerau_levenshtein("a" * 1000, "b" * 1000, 5) == 5

    def test_damerau_levenshtein_long_strings(self):
        assert ft.damerau_levenshtein("ab" * 200, "ba" * 200) == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
