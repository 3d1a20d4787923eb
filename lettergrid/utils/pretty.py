"""Pretty-print helpers for letter boards."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Sequence

from ..engine.scoring import board_points, total_points

if TYPE_CHECKING:
    from ..core.models import Puzzle


def format_board(board: Sequence[Sequence[str]]) -> str:
    width = len(board[0]) if board else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(board):
        row_render = " ".join(f"{cell:>2}" for cell in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def print_puzzle_stats(puzzle: Puzzle, *, stream=None) -> None:
    """Print the board followed by letter and scoring stats."""

    stream = stream or sys.stdout
    board = puzzle.board
    print(format_board(board), file=stream)

    cells = [cell for row in board for cell in row]
    counts = Counter(cells)
    points = [p for row in board_points(board, puzzle.language) for p in row]
    high_value = sum(1 for p in points if p >= 8)

    print(file=stream)
    print("--- Board ---", file=stream)
    print(f"  Size:          {puzzle.rows} x {puzzle.cols} ({len(cells)} cells)", file=stream)
    print(f"  Language:      {puzzle.language}", file=stream)
    print(f"  Distinct:      {len(counts)} letters", file=stream)
    common = " ".join(f"{letter}:{count}" for letter, count in counts.most_common(5))
    print(f"  Most common:   {common}", file=stream)

    print(file=stream)
    print("--- Points ---", file=stream)
    print(f"  Total:         {total_points(board, puzzle.language)}", file=stream)
    print(f"  High value:    {high_value} cells worth 8+", file=stream)

    if puzzle.daily_date is not None:
        print(file=stream)
        print(f"Daily puzzle: {puzzle.daily_date.isoformat()}", file=stream)
    if puzzle.seed is not None:
        print(f"Seed: {puzzle.seed}", file=stream)
