"""Data models returned by the board generator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from ..engine.scoring import board_points

Board = List[List[str]]


@dataclass
class Puzzle:
    """A generated board together with the settings that produced it."""

    board: Board
    language: str
    seed: Optional[int] = None
    daily_date: Optional[date] = None

    @property
    def rows(self) -> int:
        return len(self.board)

    @property
    def cols(self) -> int:
        return len(self.board[0]) if self.board else 0

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "seed": self.seed,
            "date": self.daily_date.isoformat() if self.daily_date else None,
            "rows": self.rows,
            "cols": self.cols,
            "board": [list(row) for row in self.board],
            "points": board_points(self.board, self.language),
        }
