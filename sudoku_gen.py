#!/usr/bin/env python3
"""
Sudoku generator that writes puzzle/solution pairs to a file, two lines per
puzzle: the puzzle (blanks as '.') followed by its solution.

Usage examples:
  python sudoku_gen.py 10 35 puzzles.txt
  python sudoku_gen.py 100 29 hard.txt --seed 123
  python sudoku_gen.py 1 40 one.txt --show

Notes:
- COUNT is clamped to 1-500 and CLUES to 29-50.
- FILE is deleted first if it already exists, then written once at the end.
- A puzzle is kept only when re-solving it gives back its solution. Nothing
  checks that the solution is unique.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence

from sudoku_puzzler.board import Board
from sudoku_puzzler.generator import (
    MAX_HINTS,
    MAX_PUZZLES,
    MIN_HINTS,
    MIN_PUZZLES,
    GenerationError,
    GeneratorConfig,
    generate_pairs,
)
from sudoku_puzzler.log import get_logger

logger = get_logger(__name__)

Grid = List[List[int]]
DOTS_PER_LINE = 70


def as_rows(text: str) -> Grid:
    board = Board()
    board.load(text)
    return board.rows()


def print_board(board: Grid) -> None:
    """Pretty print a Sudoku board (0 = blank)."""
    for r in range(9):
        row = []
        for c in range(9):
            val = board[r][c]
            row.append("." if val == 0 else str(val))
            if c in (2, 5): row.append("|")
        print(" ".join(row))
        if r in (2, 5): print("------+-------+------")


class Progress:
    """One dot per accepted puzzle, wrapping the line after every 71 dots."""

    def __init__(self, stream=None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.dots = 0

    def __call__(self, puzzle: str, solution: str) -> None:
        self.stream.write(".")
        self.dots += 1
        if self.dots > DOTS_PER_LINE:
            self.dots = 0
            self.stream.write("\n")
        self.stream.flush()


def write_pairs(path: str, lines: Sequence[str]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.writelines(line + "\n" for line in lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sudoku-gen",
        description="Generate Sudoku puzzle/solution pairs and write them to a file.",
    )
    ap.add_argument("count", type=int, help=f"Number of puzzles in file ({MIN_PUZZLES}-{MAX_PUZZLES}).")
    ap.add_argument("clues", type=int, help=f"Number of visible values per puzzle ({MIN_HINTS}-{MAX_HINTS}).")
    ap.add_argument("file", help="Output file. Deleted first if it already exists.")
    ap.add_argument("--seed", type=int, help="Random seed for reproducibility.")
    ap.add_argument("--max-attempts", type=int,
                    help="Give up after this many boards (default: retry until done).")
    ap.add_argument("--show", action="store_true", help="Pretty print the first puzzle and its solution.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every rejected attempt.")
    return ap


def run(args: argparse.Namespace) -> None:
    config = GeneratorConfig(
        count=args.count,
        hints=args.clues,
        seed=args.seed,
        max_attempts=args.max_attempts,
    ).clamped()
    if (config.count, config.hints) != (args.count, args.clues):
        logger.info("clamped to %d puzzles with %d clues", config.count, config.hints)

    if os.path.exists(args.file):
        os.remove(args.file)

    lines: List[str] = []
    for puzzle, solution in generate_pairs(config, on_accept=Progress()):
        lines.extend((puzzle, solution))

    if lines:
        write_pairs(args.file, lines)
    print()
    print("Done.")

    if args.show and lines:
        print("\nPuzzle:")
        print_board(as_rows(lines[0]))
        print("\nSolution:")
        print_board(as_rows(lines[1]))


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    get_logger(__name__, logging.DEBUG if args.verbose else logging.INFO)
    try:
        run(args)
    except (OSError, ValueError, GenerationError) as e:
        print()
        print(f"There's an error : [{e}]")
        ap.print_usage()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
