"""Board generation orchestration.

Every cell is an independent trial: an optional forced vowel, a
frequency-weighted base letter, then an optional substitution by a special
letter borrowed from another language. All randomness flows through one
``random.Random`` per generator, which is what makes daily puzzles
reproducible.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Sequence

from ..core.constants import (
    DAILY_COLS,
    DAILY_LANGUAGE,
    DAILY_ROWS,
    DAILY_SPECIAL_LETTER_PROBABILITY,
    DAILY_VOWEL_PROBABILITY,
    DEFAULT_COLS,
    DEFAULT_LANGUAGE,
    DEFAULT_ROWS,
    DEFAULT_SPECIAL_LETTER_PROBABILITY,
    DEFAULT_VOWEL_PROBABILITY,
    LETTER_FREQUENCIES,
    VOWELS,
)
from ..core.exceptions import InvalidBoardDimensionsError
from ..core.models import Board, Puzzle
from ..utils.logger import get_logger
from .sampler import LetterSampler


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    language: str = DEFAULT_LANGUAGE
    vowel_probability: float = DEFAULT_VOWEL_PROBABILITY
    special_letter_probability: float = DEFAULT_SPECIAL_LETTER_PROBABILITY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidBoardDimensionsError(
                    f"{name} must be a positive integer, got {value!r}"
                )


class BoardGenerator:
    """Builds letter boards from a :class:`GeneratorConfig`."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
        frequencies: Mapping[str, Mapping[str, float]] = LETTER_FREQUENCIES,
        vowels: Mapping[str, Sequence[str]] = VOWELS,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.sampler = LetterSampler(self.rng, frequencies=frequencies, vowels=vowels)

    def generate(self) -> Board:
        config = self.config
        language = self.sampler.resolve(config.language)
        if language != config.language:
            LOGGER.debug("Language %r resolved to %s tables", config.language, language)

        substitutions = 0
        board: Board = []
        for _ in range(config.rows):
            row = []
            for _ in range(config.cols):
                force_vowel = self.rng.random() < config.vowel_probability
                letter = self.sampler.sample(language, force_vowel)
                if self.rng.random() < config.special_letter_probability:
                    special = self.sampler.special_letter(language)
                    if special is not None:
                        letter = special
                        substitutions += 1
                row.append(letter)
            board.append(row)

        LOGGER.debug(
            "Generated %sx%s %s board with %s special letters",
            config.rows,
            config.cols,
            language,
            substitutions,
        )
        return board

    def generate_puzzle(self, daily_date: Optional[date] = None) -> Puzzle:
        board = self.generate()
        return Puzzle(
            board=board,
            language=self.sampler.resolve(self.config.language),
            seed=self.config.seed,
            daily_date=daily_date,
        )


def generate_board(
    rows: int = DEFAULT_ROWS,
    cols: int = DEFAULT_COLS,
    *,
    language: str = DEFAULT_LANGUAGE,
    vowel_probability: float = DEFAULT_VOWEL_PROBABILITY,
    special_letter_probability: float = DEFAULT_SPECIAL_LETTER_PROBABILITY,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """Return a ``rows`` x ``cols`` grid of letters.

    Pass ``seed`` or an explicit ``rng`` for reproducible boards; otherwise a
    fresh unseeded generator is used.
    """

    config = GeneratorConfig(
        rows=rows,
        cols=cols,
        language=language,
        vowel_probability=vowel_probability,
        special_letter_probability=special_letter_probability,
        seed=seed,
    )
    return BoardGenerator(config, rng=rng).generate()


# ----------------------------------------------------------------------
# Daily puzzle
# ----------------------------------------------------------------------
def daily_seed(day: date) -> int:
    """Return the integer seed for ``day``, e.g. 20261017."""

    return day.year * 10000 + day.month * 100 + day.day


def daily_config(day: date) -> GeneratorConfig:
    return GeneratorConfig(
        rows=DAILY_ROWS,
        cols=DAILY_COLS,
        language=DAILY_LANGUAGE,
        vowel_probability=DAILY_VOWEL_PROBABILITY,
        special_letter_probability=DAILY_SPECIAL_LETTER_PROBABILITY,
        seed=daily_seed(day),
    )


def daily_puzzle(today: Optional[date] = None) -> Puzzle:
    """Return the daily puzzle for ``today`` (the local date by default)."""

    day = today or date.today()
    config = daily_config(day)
    LOGGER.info("Generating daily puzzle for %s (seed %s)", day.isoformat(), config.seed)
    return BoardGenerator(config).generate_puzzle(daily_date=day)


def generate_daily_puzzle(today: Optional[date] = None) -> Board:
    """Return the board shared by every caller on the same calendar date."""

    return daily_puzzle(today).board


__all__ = [
    "BoardGenerator",
    "GeneratorConfig",
    "generate_board",
    "generate_daily_puzzle",
    "daily_puzzle",
    "daily_seed",
]
