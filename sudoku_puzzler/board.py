"""
The 81-cell board: randomized backtracking fill, puzzle carving and the
round-trip check that accepts a carved puzzle.

Cells live in one row-major list and refer to each other only by linear
index, so the solver works on positions rather than on cell objects.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence, Union

from sudoku_puzzler.grid import (
    BOX,
    SIZE,
    TOTAL_CELLS,
    Coord,
    NeighborPolicy,
    neighbor_table,
)
from sudoku_puzzler.log import get_logger

logger = get_logger(__name__)

ALL = frozenset(range(1, SIZE + 1))
BLANK = "."
BLANKS = frozenset(".0")
DIGITS = "123456789"


class Cell:
    """A position, its neighbor indices and its current value (0 = empty)."""

    __slots__ = ("position", "neighbors", "value")

    def __init__(self, position: Coord, neighbors: Sequence[int], value: int = 0) -> None:
        self.position = position
        self.neighbors = tuple(neighbors)
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.position.row}, {self.position.col}, value={self.value})"


def cells_to_string(cells: Sequence[Cell]) -> str:
    return "".join(BLANK if cell.value == 0 else str(cell.value) for cell in cells)


class Board:
    """Owns the 81 cells and the frontier of cells the next fill has to assign."""

    def __init__(
        self,
        policy: NeighborPolicy = NeighborPolicy.FULL,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.policy = policy
        self.rng = rng if rng is not None else random.Random()
        table = neighbor_table(policy)
        self.all_cells: List[Cell] = [
            Cell(Coord.from_index(i), table[i]) for i in range(TOTAL_CELLS)
        ]
        self.cells_to_fill: List[Cell] = list(self.all_cells)
        self.puzzle_string = ""
        self.solution_string = ""

    def at(self, position: Union[int, Coord]) -> Cell:
        if isinstance(position, Coord):
            position = position.index
        return self.all_cells[position]

    def to_string(self, cells: Optional[Sequence[Cell]] = None) -> str:
        return cells_to_string(self.all_cells if cells is None else cells)

    __str__ = to_string

    def __repr__(self) -> str:
        return f"Board(policy={self.policy.value}, {self.to_string()!r})"

    def rows(self) -> List[List[int]]:
        return [
            [cell.value for cell in self.all_cells[r * SIZE:(r + 1) * SIZE]]
            for r in range(SIZE)
        ]

    # ---- solving ----------------------------------------------------------

    def fill_cells(self) -> bool:
        """Assign every frontier cell a value that differs from all its neighbors."""
        if self._fill(0):
            return True
        logger.warning("Unable to fill board")
        return False

    def _fill(self, index: int) -> bool:
        if index >= len(self.cells_to_fill):
            return True
        cell = self.cells_to_fill[index]
        taken = {self.all_cells[n].value for n in cell.neighbors}
        options = list(ALL - taken)
        self.rng.shuffle(options)
        last = len(self.cells_to_fill) - 1
        for option in options:
            cell.value = option
            if index == last or self._fill(index + 1):
                return True
        # out of options, backtrack
        cell.value = 0
        return False

    def load(self, text: str) -> None:
        """Set all cells from a serialized grid; the blanks become the frontier."""
        if len(text) != TOTAL_CELLS:
            raise ValueError(f"expected {TOTAL_CELLS} characters, got {len(text)}")
        values = []
        for ch in text:
            if ch in BLANKS:
                values.append(0)
            elif ch in DIGITS:
                values.append(int(ch))
            else:
                raise ValueError(f"unexpected character in puzzle: {ch!r}")
        self.cells_to_fill = []
        for cell, value in zip(self.all_cells, values):
            cell.value = value
            if value == 0:
                self.cells_to_fill.append(cell)

    def solve(self) -> bool:
        return self._fill(0)

    # ---- puzzle carving ---------------------------------------------------

    def generate_puzzle(self, hints: int) -> str:
        """Blank cells of the solved board until only `hints` remain visible."""
        if not 0 <= hints <= TOTAL_CELLS:
            raise ValueError(f"hints must be between 0 and {TOTAL_CELLS}, got {hints}")
        indices = list(range(TOTAL_CELLS))
        self.rng.shuffle(indices)

        self.solution_string = self.to_string()

        removed: List[int] = []
        count = TOTAL_CELLS - hints
        self.cells_to_fill = []
        for index in indices:
            if len(removed) >= count:
                break
            self.cells_to_fill.append(self.at(index))
            saved = [cell.value for cell in self.cells_to_fill]
            if self._fill(0):
                removed.append(index)
            else:
                logger.debug("cell %d is not removable", index)
                for cell, value in zip(self.cells_to_fill, saved):
                    cell.value = value
                self.cells_to_fill.pop()

        for index in removed:
            self.all_cells[index].value = 0
        self.puzzle_string = self.to_string()
        return self.puzzle_string

    def verify(self) -> bool:
        """Re-solve the carved puzzle from its blanks and compare with the stored solution."""
        self.load(self.puzzle_string)
        if not self.solve():
            return False
        return self.to_string() == self.solution_string


def is_valid_solution(text: str) -> bool:
    """True when `text` is a complete grid whose rows, columns and boxes all hold 1-9."""
    if len(text) != TOTAL_CELLS or not all(ch in DIGITS for ch in text):
        return False
    grid = [[int(text[r * SIZE + c]) for c in range(SIZE)] for r in range(SIZE)]
    for i in range(SIZE):
        if set(grid[i]) != ALL:
            return False
        if {grid[r][i] for r in range(SIZE)} != ALL:
            return False
    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            box = {grid[r][c] for r in range(br, br + BOX) for c in range(bc, bc + BOX)}
            if box != ALL:
                return False
    return True
