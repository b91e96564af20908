"""
Grid coordinates and the neighbor index.

Two cells are neighbors when they share a row, a column or a 3x3 box.
The FULL policy keeps every such cell; the OPTIMAL policy keeps only the
ones that come before the cell in row-major order, which is all a strictly
forward fill ever has to look at.
"""
from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import FrozenSet, NamedTuple, Tuple

SIZE = 9
BOX = 3
TOTAL_CELLS = SIZE * SIZE


class Coord(NamedTuple):
    """Row/column position. Tuple ordering is row-major."""
    row: int
    col: int

    @property
    def index(self) -> int:
        return self.row * SIZE + self.col

    @classmethod
    def from_index(cls, index: int) -> "Coord":
        if not 0 <= index < TOTAL_CELLS:
            raise ValueError(f"cell index out of range: {index}")
        return cls(*divmod(index, SIZE))


class NeighborPolicy(Enum):
    FULL = "full"
    OPTIMAL = "optimal"


def box_start(i: int) -> int:
    return (i // BOX) * BOX


def _check(coord: Coord) -> None:
    if not (0 <= coord.row < SIZE and 0 <= coord.col < SIZE):
        raise ValueError(f"coordinate off the board: {tuple(coord)}")


def neighbors(coord: Coord, policy: NeighborPolicy = NeighborPolicy.FULL) -> FrozenSet[Coord]:
    """Return the coordinates whose values constrain `coord` under `policy`."""
    _check(coord)
    r, c = coord
    found = set()
    for n in range(SIZE):
        found.add(Coord(n, c))
        found.add(Coord(r, n))
    br, bc = box_start(r), box_start(c)
    for rr in range(br, br + BOX):
        for cc in range(bc, bc + BOX):
            found.add(Coord(rr, cc))
    found.discard(coord)
    if policy is NeighborPolicy.OPTIMAL:
        found = {n for n in found if n < coord}
    return frozenset(found)


@lru_cache(maxsize=None)
def neighbor_table(policy: NeighborPolicy = NeighborPolicy.FULL) -> Tuple[Tuple[int, ...], ...]:
    """Linear neighbor indices for every cell, sorted, indexed by row*9+col."""
    return tuple(
        tuple(sorted(n.index for n in neighbors(Coord.from_index(i), policy)))
        for i in range(TOTAL_CELLS)
    )
