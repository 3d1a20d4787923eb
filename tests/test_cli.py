import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from lettergrid.engine.generator import generate_board
import main


class CliTests(unittest.TestCase):
    def run_cli(self, *argv: str) -> str:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main.main(list(argv))
        return buffer.getvalue()

    def test_json_output_matches_library(self) -> None:
        payload = json.loads(self.run_cli("--rows", "3", "--cols", "4", "--seed", "42"))
        self.assertEqual(payload["rows"], 3)
        self.assertEqual(payload["cols"], 4)
        self.assertEqual(payload["seed"], 42)
        self.assertEqual(payload["board"], generate_board(3, 4, seed=42))

    def test_daily_with_date(self) -> None:
        payload = json.loads(self.run_cli("--daily", "--date", "2026-10-17"))
        self.assertEqual(payload["seed"], 20261017)
        self.assertEqual(payload["date"], "2026-10-17")
        self.assertEqual(len(payload["board"]), 6)

    def test_output_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "board.json"
            self.run_cli("--language", "es", "--seed", "1", "--output", str(target))
            payload = json.loads(target.read_text(encoding="utf-8"))
            self.assertEqual(payload["language"], "es")

    def test_pretty_output(self) -> None:
        text = self.run_cli("--rows", "2", "--cols", "2", "--seed", "5", "--pretty")
        self.assertIn("--- Points ---", text)
        self.assertIn("Seed: 5", text)

    def test_invalid_dimensions_exit(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["--rows", "0"])

    def test_date_requires_daily(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["--date", "2026-10-17"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
