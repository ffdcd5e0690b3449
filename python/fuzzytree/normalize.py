"""String normalization applied before distance computation.

Distances compare characters exactly, so ``"Bard-lès-Pesmes"`` and
``"BARD LES PESMES"`` are far apart unless both are folded to a common form
first. Normalization is the caller's choice: metrics and indexes never
normalize implicitly.

Example:
    >>> normalize_string("Bard-lès-Pesmes", "ascii_fold")
    'Bard-les-Pesmes'
    >>> normalize_string("  Bard  lès   Pesmes ", ["lowercase", "collapse_whitespace"])
    'bard lès pesmes'
"""

import re
import unicodedata
from typing import Iterable, Optional, Tuple, Union

from fuzzytree._utils import require_str
from fuzzytree.enums import NormalizationMode
from fuzzytree.exceptions import ValidationError

_WHITESPACE = re.compile(r"\s+")

# Letters NFKD does not decompose
_LIGATURES = {
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "ß": "ss",
    "đ": "d",
    "Đ": "D",
    "ł": "l",
    "Ł": "L",
}

ModeLike = Union[str, NormalizationMode]


def ascii_fold(s: str) -> str:
    """Replace accented letters by their unaccented ASCII form.

    Characters without an ASCII equivalent are dropped.
    """
    s = "".join(_LIGATURES.get(c, c) for c in s)
    decomposed = unicodedata.normalize("NFKD", s)
    return decomposed.encode("ascii", "ignore").decode("ascii")


def _remove_punctuation(s: str) -> str:
    return "".join(c for c in s if not unicodedata.category(c).startswith("P"))


def _resolve_mode(mode: ModeLike) -> NormalizationMode:
    if isinstance(mode, NormalizationMode):
        return mode
    try:
        return NormalizationMode(str(mode).lower())
    except ValueError:
        raise ValidationError(
            f"Unknown normalization mode: '{mode}'. "
            f"Valid options: {sorted(m.value for m in NormalizationMode)}"
        ) from None


def _apply(s: str, mode: NormalizationMode) -> str:
    if mode is NormalizationMode.LOWERCASE:
        return s.lower()
    if mode is NormalizationMode.ASCII_FOLD:
        return ascii_fold(s)
    if mode is NormalizationMode.REMOVE_PUNCTUATION:
        return _remove_punctuation(s)
    if mode is NormalizationMode.REMOVE_WHITESPACE:
        return _WHITESPACE.sub("", s)
    if mode is NormalizationMode.COLLAPSE_WHITESPACE:
        return _WHITESPACE.sub(" ", s).strip()
    # STRICT
    return _WHITESPACE.sub("", _remove_punctuation(ascii_fold(s).lower()))


def normalize_string(
    s: str,
    mode: Union[ModeLike, Iterable[ModeLike], None] = NormalizationMode.STRICT,
) -> str:
    """Normalize a string for comparison.

    Args:
        s: String to normalize.
        mode: A NormalizationMode (or its name), a sequence of modes applied
            in order, or None to return ``s`` unchanged.

    Raises:
        ValidationError: If ``s`` is None or a mode is unknown.
    """
    require_str(s, "s")
    if mode is None:
        return s
    if isinstance(mode, (str, NormalizationMode)):
        return _apply(s, _resolve_mode(mode))
    for m in mode:
        s = _apply(s, _resolve_mode(m))
    return s


def normalize_pair(
    s1: str,
    s2: str,
    mode: Union[ModeLike, Iterable[ModeLike], None] = NormalizationMode.STRICT,
) -> Tuple[str, str]:
    """Normalize two strings the same way."""
    return normalize_string(s1, mode), normalize_string(s2, mode)


def resolve_normalizer(
    mode: Union[ModeLike, Iterable[ModeLike], None],
) -> Optional[Tuple[NormalizationMode, ...]]:
    """Validate normalization settings up front, so bad configuration fails before any work."""
    if mode is None:
        return None
    if isinstance(mode, (str, NormalizationMode)):
        return (_resolve_mode(mode),)
    return tuple(_resolve_mode(m) for m in mode)


__all__ = ["ascii_fold", "normalize_string", "normalize_pair", "resolve_normalizer"]
