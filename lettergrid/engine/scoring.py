"""Letter point values used to score played letters."""

from __future__ import annotations

from typing import List, Sequence

from ..core.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_LETTER_POINTS,
    LETTER_POINTS,
    SPECIAL_LETTER_POINTS,
)


def get_letter_points(letter: str, language: str = DEFAULT_LANGUAGE) -> int:
    """Return the point value of ``letter``.

    The table is shared by every language; ``language`` is accepted so callers
    can pass the board language through unchanged. Multi-character glyphs and
    anything missing from the table count as special letters.
    """

    if len(letter) != 1 or letter not in LETTER_POINTS:
        return SPECIAL_LETTER_POINTS
    return LETTER_POINTS.get(letter, DEFAULT_LETTER_POINTS)


def board_points(
    board: Sequence[Sequence[str]], language: str = DEFAULT_LANGUAGE
) -> List[List[int]]:
    """Return a grid of the same shape holding each cell's point value."""

    return [[get_letter_points(cell, language) for cell in row] for row in board]


def total_points(board: Sequence[Sequence[str]], language: str = DEFAULT_LANGUAGE) -> int:
    return sum(sum(row) for row in board_points(board, language))


__all__ = ["get_letter_points", "board_points", "total_points"]
