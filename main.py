"""CLI entrypoint for the letter grid generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from lettergrid.core.constants import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_SPECIAL_LETTER_PROBABILITY,
    DEFAULT_VOWEL_PROBABILITY,
    Language,
)
from lettergrid.core.exceptions import LetterGridError
from lettergrid.engine.generator import BoardGenerator, GeneratorConfig, daily_puzzle
from lettergrid.utils.logger import configure_logging
from lettergrid.utils.pretty import print_puzzle_stats


def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate letter boards for word-search puzzles",
    )
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Board height in cells")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Board width in cells")
    parser.add_argument(
        "--language",
        type=str,
        default=Language.EN.value,
        help="Letter frequency table to draw from (en, es, fr; unknown codes use en)",
    )
    parser.add_argument(
        "--vowel-probability",
        type=float,
        default=DEFAULT_VOWEL_PROBABILITY,
        help="Chance that a cell is drawn from vowels only",
    )
    parser.add_argument(
        "--special-probability",
        type=float,
        default=DEFAULT_SPECIAL_LETTER_PROBABILITY,
        help="Chance that a cell is replaced by a special letter from another language",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--daily",
        action="store_true",
        help="Generate the daily puzzle (fixed 6x6 English settings)",
    )
    parser.add_argument(
        "--date",
        type=parse_date,
        metavar="YYYY-MM-DD",
        help="Date of the daily puzzle (defaults to today)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print a text grid with stats instead of JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.date and not args.daily:
        parser.error("--date requires --daily")
    if args.daily and args.seed is not None:
        parser.error("--daily derives its seed from the date and cannot be combined with --seed")

    if args.daily:
        puzzle = daily_puzzle(args.date)
    else:
        try:
            config = GeneratorConfig(
                rows=args.rows,
                cols=args.cols,
                language=args.language,
                vowel_probability=args.vowel_probability,
                special_letter_probability=args.special_probability,
                seed=args.seed,
            )
        except LetterGridError as exc:
            parser.error(str(exc))
        puzzle = BoardGenerator(config).generate_puzzle()

    if args.pretty:
        print_puzzle_stats(puzzle, stream=sys.stdout)
        return

    output_text = json.dumps(puzzle.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
