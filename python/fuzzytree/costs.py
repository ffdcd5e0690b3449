"""Cost functions for weighted Levenshtein distance.

Three policies are provided as shared, immutable instances:

- ``UNIFORM``: every operation costs 1, matching characters cost 0.
- ``CASE_INSENSITIVE``: like ``UNIFORM``, but ``"A"`` -> ``"a"`` is free.
- ``LOCALE_TUNED``: costs from 1 to 5 tuned for French place and person
  names. Accented and unaccented forms of a vowel are cheap to swap, as are
  digits that look like letters (``0``/``o``, ``1``/``i``); phonetically
  close consonants cost 2; unrelated letters cost 5.

Example:
    >>> from fuzzytree.costs import LOCALE_TUNED
    >>> LOCALE_TUNED.subst_cost("e", "é")
    1
    >>> LOCALE_TUNED.subst_cost("d", "t")
    2
"""

import unicodedata
from typing import Dict, Union

from fuzzytree._utils import normalize_cost_model
from fuzzytree.enums import CostModel
from fuzzytree.interfaces import CostFunction


class UniformCosts(CostFunction):
    """All operations have cost 1."""

    def ins_del_cost(self, c: str) -> int:
        return 1

    def subst_cost(self, c1: str, c2: str) -> int:
        return 0 if c1 == c2 else 1

    def max_cost(self) -> int:
        return 1


class CaseInsensitiveCosts(UniformCosts):
    """Uniform costs, except that replacing a character with its opposite case is free."""

    def subst_cost(self, c1: str, c2: str) -> int:
        return 0 if c1.lower() == c2.lower() else 1


# Every pair of distinct characters within one family costs 1.
_VARIANT_FAMILIES = (
    "aàáâãäå",
    "cç",
    "eèéêë",
    "1iìíîï",
    "0oòóôõöø",
    "uùúûü",
    "yýÿ",
    "nñ",
    "sß",
    " -'",
)

_FAMILY_OF: Dict[str, int] = {
    c: i for i, family in enumerate(_VARIANT_FAMILIES) for c in family
}

# Any vowel-like character for any other: cost 2.
_VOWELS = frozenset("aàáâãäåeèéêë1iìíîï0oòóôõöøuùúûüyýÿ")

# Close consonants, stored with the lower code point first: cost 2.
_CLOSE_CONSONANTS = frozenset({
    ("b", "p"),
    ("c", "k"),
    ("c", "q"),
    ("c", "s"),
    ("d", "t"),
    ("m", "n"),
    ("s", "z"),
})


def _lower(c: str) -> str:
    low = c.lower()
    return low if len(low) == 1 else c


def _is_letter_or_digit(c: str) -> bool:
    category = unicodedata.category(c)
    return category[0] == "L" or category == "Nd"


class LocaleTunedCosts(CostFunction):
    """Costs tuned for French orthographic variants.

    Insertion and deletion cost 3 for ``r``, ``s``, ``t`` and for anything
    that is not a letter or digit, 4 for other common consonants and ``e``,
    and 5 for the remaining letters and digits.

    Substitution costs, case ignored:

    ====  =========================================================
    cost  pair
    ====  =========================================================
    0     same letter, any case
    1     accent variants (``e``/``é``), ``c``/``ç``, ``n``/``ñ``,
          ``s``/``ß``, ``0``/``o``, ``1``/``i``, space/``-``/``'``
    2     two different vowels, close consonants (``d``/``t``,
          ``m``/``n``...), two symbols of the same Unicode category
    3     two symbols of different Unicode categories
    5     anything else
    ====  =========================================================

    These costs are not a metric: ``c``/``s`` and ``s``/``z`` cost 2 each but
    ``c``/``z`` costs 5, so ``d("c", "z") > d("c", "s") + d("s", "z")``. A
    BK-tree over them warns on construction and may miss matches.
    """

    is_metric = False

    def ins_del_cost(self, c: str) -> int:
        upper = c.upper()
        if upper in ("R", "S", "T"):
            return 3
        if upper in ("B", "C", "E", "F", "H", "L", "M", "N", "P"):
            return 4
        if _is_letter_or_digit(c):
            return 5
        return 3

    def subst_cost(self, c1: str, c2: str) -> int:
        if c1 == c2:
            return 0
        c1, c2 = _lower(c1), _lower(c2)
        if c1 == c2:
            return 0
        if c1 > c2:
            c1, c2 = c2, c1

        family = _FAMILY_OF.get(c1)
        if family is not None and family == _FAMILY_OF.get(c2):
            return 1
        if c1 in _VOWELS and c2 in _VOWELS:
            return 2
        if (c1, c2) in _CLOSE_CONSONANTS:
            return 2
        if not _is_letter_or_digit(c1) and not _is_letter_or_digit(c2):
            if unicodedata.category(c1) == unicodedata.category(c2):
                return 2
            return 3
        return 5

    def max_cost(self) -> int:
        return 5


UNIFORM = UniformCosts()
CASE_INSENSITIVE = CaseInsensitiveCosts()
LOCALE_TUNED = LocaleTunedCosts()

_COST_FUNCTIONS = {
    CostModel.UNIFORM.value: UNIFORM,
    CostModel.CASE_INSENSITIVE.value: CASE_INSENSITIVE,
    CostModel.LOCALE_TUNED.value: LOCALE_TUNED,
}


def get_cost_function(model: Union[str, CostModel, CostFunction]) -> CostFunction:
    """Resolve a cost model name to its shared CostFunction instance.

    CostFunction instances are returned unchanged, so callers can pass either
    a name from configuration or a custom implementation.

    Args:
        model: ``"uniform"``, ``"case_insensitive"``, ``"locale_tuned"``
            (or ``"caseInsensitive"``/``"localeTuned"``), a CostModel member,
            or a CostFunction.

    Raises:
        AlgorithmError: If the name is not a known cost model.

    Example:
        >>> get_cost_function("localeTuned").max_cost()
        5
    """
    if isinstance(model, CostFunction):
        return model
    return _COST_FUNCTIONS[normalize_cost_model(model)]


__all__ = [
    "UniformCosts",
    "CaseInsensitiveCosts",
    "LocaleTunedCosts",
    "UNIFORM",
    "CASE_INSENSITIVE",
    "LOCALE_TUNED",
    "get_cost_function",
]
