import unittest
from datetime import date

from lettergrid.core.constants import LETTER_POINTS
from lettergrid.core.models import Puzzle
from lettergrid.engine.scoring import board_points, get_letter_points, total_points


class LetterPointsTests(unittest.TestCase):
    def test_known_letters(self) -> None:
        self.assertEqual(get_letter_points("Q", "en"), 10)
        self.assertEqual(get_letter_points("E"), 1)
        self.assertEqual(get_letter_points("K", "fr"), 5)

    def test_special_letters_score_eight(self) -> None:
        self.assertEqual(get_letter_points("Ñ", "es"), 8)
        self.assertEqual(get_letter_points("É", "fr"), 8)

    def test_unknown_single_character_scores_eight(self) -> None:
        self.assertEqual(get_letter_points("@", "en"), 8)

    def test_multi_character_glyph_scores_eight(self) -> None:
        self.assertEqual(get_letter_points("QU", "en"), 8)
        self.assertEqual(get_letter_points("AE", "en"), 8)

    def test_lookup_is_case_sensitive(self) -> None:
        self.assertEqual(get_letter_points("q"), 8)

    def test_language_does_not_change_scores(self) -> None:
        for letter in LETTER_POINTS:
            scores = {get_letter_points(letter, lang) for lang in ("en", "es", "fr", "xx")}
            self.assertEqual(len(scores), 1)


class BoardPointsTests(unittest.TestCase):
    def test_board_points_mirror_board_shape(self) -> None:
        board = [["A", "Q"], ["Ñ", "E"]]
        self.assertEqual(board_points(board), [[1, 10], [8, 1]])
        self.assertEqual(total_points(board), 20)

    def test_puzzle_jsonable(self) -> None:
        puzzle = Puzzle(board=[["Z", "É", "A"]], language="fr", seed=20260102, daily_date=date(2026, 1, 2))
        payload = puzzle.to_jsonable()
        self.assertEqual(payload["rows"], 1)
        self.assertEqual(payload["cols"], 3)
        self.assertEqual(payload["date"], "2026-01-02")
        self.assertEqual(payload["board"], [["Z", "É", "A"]])
        self.assertEqual(payload["points"], [[10, 8, 1]])

    def test_puzzle_without_date(self) -> None:
        payload = Puzzle(board=[["A"]], language="en").to_jsonable()
        self.assertIsNone(payload["date"])
        self.assertIsNone(payload["seed"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
