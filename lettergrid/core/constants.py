"""Shared constants and static letter tables for the board generator."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class Language(str, Enum):
    """Languages with a bundled frequency table."""

    EN = "en"
    ES = "es"
    FR = "fr"


DEFAULT_LANGUAGE = Language.EN.value
DEFAULT_ROWS = 6
DEFAULT_COLS = 6
DEFAULT_VOWEL_PROBABILITY = 0.35
DEFAULT_SPECIAL_LETTER_PROBABILITY = 0.15

DAILY_ROWS = 6
DAILY_COLS = 6
DAILY_LANGUAGE = Language.EN.value
DAILY_VOWEL_PROBABILITY = 0.4
DAILY_SPECIAL_LETTER_PROBABILITY = 0.2

# Returned when the cumulative walk runs out before reaching the draw.
FALLBACK_LETTER = "E"

DEFAULT_LETTER_POINTS = 2
SPECIAL_LETTER_POINTS = 8


def _freeze(table: dict) -> Mapping[str, float]:
    return MappingProxyType(table)


# Relative weights, roughly percent of occurrences in running text.
LETTER_FREQUENCIES: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        Language.EN.value: _freeze(
            {
                "A": 8.2, "B": 1.5, "C": 2.8, "D": 4.3, "E": 12.7, "F": 2.2, "G": 2.0,
                "H": 6.1, "I": 7.0, "J": 0.2, "K": 0.8, "L": 4.0, "M": 2.4, "N": 6.7,
                "O": 7.5, "P": 1.9, "Q": 0.1, "R": 6.0, "S": 6.3, "T": 9.1, "U": 2.8,
                "V": 1.0, "W": 2.4, "X": 0.2, "Y": 2.0, "Z": 0.1,
            }
        ),
        Language.ES.value: _freeze(
            {
                "A": 11.5, "B": 2.2, "C": 4.0, "D": 5.0, "E": 12.2, "F": 0.7, "G": 1.0,
                "H": 0.7, "I": 6.2, "J": 0.5, "K": 0.1, "L": 5.0, "M": 3.2, "N": 7.0,
                "O": 8.7, "P": 2.5, "Q": 0.9, "R": 6.5, "S": 7.3, "T": 4.6, "U": 3.9,
                "V": 1.0, "W": 0.1, "X": 0.2, "Y": 1.0, "Z": 0.5, "Ñ": 0.2,
            }
        ),
        Language.FR.value: _freeze(
            {
                "A": 7.6, "B": 0.9, "C": 3.0, "D": 3.7, "E": 14.7, "F": 1.0, "G": 0.9,
                "H": 0.7, "I": 7.5, "J": 0.6, "K": 0.1, "L": 5.5, "M": 2.9, "N": 7.1,
                "O": 5.3, "P": 3.0, "Q": 1.4, "R": 6.5, "S": 7.9, "T": 7.2, "U": 6.3,
                "V": 1.8, "W": 0.1, "X": 0.4, "Y": 0.3, "Z": 0.1, "É": 1.9, "È": 0.3,
                "Ê": 0.2, "Ç": 0.1,
            }
        ),
    }
)

VOWELS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        Language.EN.value: ("A", "E", "I", "O", "U", "Y"),
        Language.ES.value: ("A", "E", "I", "O", "U"),
        Language.FR.value: ("A", "E", "I", "O", "U", "Y", "É", "È", "Ê"),
    }
)

# Shared by every language, roughly inverse to frequency.
LETTER_POINTS: Mapping[str, int] = MappingProxyType(
    {
        "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2, "H": 4, "I": 1,
        "J": 8, "K": 5, "L": 1, "M": 3, "N": 1, "O": 1, "P": 3, "Q": 10, "R": 1,
        "S": 1, "T": 1, "U": 1, "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10,
    }
)


def resolve_language(
    code: Optional[str],
    available: Optional[Mapping[str, object]] = None,
) -> str:
    """Return ``code`` normalized to a known language, defaulting to English.

    ``available`` restricts the lookup to a custom table set; when it lacks
    English too, its first language is used instead.
    """

    tables = LETTER_FREQUENCIES if available is None else available
    normalized = (code or "").strip().lower()
    if normalized in tables:
        return normalized
    if DEFAULT_LANGUAGE in tables:
        return DEFAULT_LANGUAGE
    return next(iter(tables), DEFAULT_LANGUAGE)
