"""Letter grid generator for word-search style puzzles.

This package exposes the public API surface via:

- ``lettergrid.engine.generator``: random and daily board generation.
- ``lettergrid.engine.sampler.LetterSampler``: frequency-weighted letter draws.
- ``lettergrid.engine.scoring``: letter point values.
"""

from .core.models import Board, Puzzle
from .engine.generator import (
    BoardGenerator,
    GeneratorConfig,
    daily_puzzle,
    daily_seed,
    generate_board,
    generate_daily_puzzle,
)
from .engine.sampler import LetterSampler, get_random_letter, special_letters
from .engine.scoring import get_letter_points

__all__ = [
    "Board",
    "Puzzle",
    "BoardGenerator",
    "GeneratorConfig",
    "LetterSampler",
    "daily_puzzle",
    "daily_seed",
    "generate_board",
    "generate_daily_puzzle",
    "get_letter_points",
    "get_random_letter",
    "special_letters",
]

__version__ = "0.1.0"
