# -*- coding: utf-8 -*-
"""End to end tests for the command line front end."""
import contextlib
import io
import os
import shutil
import tempfile
import unittest
from unittest import mock

import sudoku_gen
from sudoku_puzzler.board import is_valid_solution


class TestCommandLine(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, "puzzles.txt")

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def run_main(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = sudoku_gen.main(list(argv))
        return code, out.getvalue()

    def read_lines(self):
        with open(self.path, encoding="utf-8") as f:
            return f.read().splitlines()

    def test_writes_pairs(self):
        code, out = self.run_main("3", "35", self.path, "--seed", "5")
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("..."))
        self.assertTrue(out.rstrip().endswith("Done."))
        lines = self.read_lines()
        self.assertEqual(len(lines), 6)
        for puzzle, solution in zip(lines[::2], lines[1::2]):
            self.assertEqual(puzzle.count("."), 46)
            self.assertTrue(is_valid_solution(solution))

    def test_counts_are_clamped(self):
        code, _ = self.run_main("0", "80", self.path, "--seed", "1")
        self.assertEqual(code, 0)
        lines = self.read_lines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(81 - lines[0].count("."), 50)

    def test_replaces_existing_file(self):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("old\n" * 10)
        self.run_main("1", "40", self.path, "--seed", "2")
        lines = self.read_lines()
        self.assertEqual(len(lines), 2)
        self.assertNotIn("old", lines)

    def test_show(self):
        _, out = self.run_main("1", "40", self.path, "--seed", "3", "--show")
        self.assertIn("Puzzle:", out)
        self.assertIn("------+-------+------", out)
        puzzle = self.read_lines()[0]
        first_row = " ".join(puzzle[0:3]) + " | " + " ".join(puzzle[3:6]) + " | " + " ".join(puzzle[6:9])
        self.assertIn("Puzzle:\n" + first_row + "\n", out)

    def test_as_rows(self):
        rows = sudoku_gen.as_rows("1.3" + "." * 78)
        self.assertEqual(len(rows), 9)
        self.assertEqual(rows[0], [1, 0, 3, 0, 0, 0, 0, 0, 0])
        self.assertEqual(rows[8], [0] * 9)

    def test_unwritable_destination(self):
        path = os.path.join(self.temp_dir, "missing", "puzzles.txt")
        code, out = self.run_main("1", "40", path, "--seed", "4")
        self.assertEqual(code, 1)
        self.assertIn("There's an error : [", out)

    def test_attempt_budget_exhausted(self):
        with mock.patch("sudoku_puzzler.generator.attempt", return_value=None):
            code, out = self.run_main("1", "40", self.path, "--max-attempts", "2")
        self.assertEqual(code, 1)
        self.assertIn("gave up after 2 attempts", out)
        self.assertFalse(os.path.exists(self.path))

    def test_bad_arguments(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                sudoku_gen.main(["ten", "35", self.path])
            with self.assertRaises(SystemExit):
                sudoku_gen.main(["10", "35"])


class TestProgress(unittest.TestCase):
    def test_wraps_after_71_dots(self):
        stream = io.StringIO()
        progress = sudoku_gen.Progress(stream)
        for _ in range(72):
            progress("p", "s")
        self.assertEqual(stream.getvalue(), "." * 71 + "\n" + ".")


if __name__ == "__main__":
    unittest.main()
