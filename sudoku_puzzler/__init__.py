"""Sudoku puzzle/solution pair generator."""
from sudoku_puzzler.board import Board, Cell, is_valid_solution
from sudoku_puzzler.generator import (
    GenerationError,
    GeneratorConfig,
    attempt,
    generate_pairs,
)
from sudoku_puzzler.grid import Coord, NeighborPolicy, neighbor_table, neighbors

__all__ = [
    "Board",
    "Cell",
    "Coord",
    "GenerationError",
    "GeneratorConfig",
    "NeighborPolicy",
    "attempt",
    "generate_pairs",
    "is_valid_solution",
    "neighbor_table",
    "neighbors",
]
