"""
Generator loop: build a board, fill it, carve a puzzle and keep the pair only
when re-solving the puzzle lands on the same solution.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Callable, Iterator, Optional, Tuple

from sudoku_puzzler.board import Board
from sudoku_puzzler.grid import NeighborPolicy
from sudoku_puzzler.log import get_logger

logger = get_logger(__name__)

MIN_PUZZLES, MAX_PUZZLES = 1, 500
MIN_HINTS, MAX_HINTS = 29, 50

Pair = Tuple[str, str]


class GenerationError(RuntimeError):
    """Raised when the attempt budget runs out before enough puzzles were accepted."""


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(value, hi))


@dataclass
class GeneratorConfig:
    count: int
    hints: int
    seed: Optional[int] = None
    # None retries until every puzzle is accepted
    max_attempts: Optional[int] = None
    policy: NeighborPolicy = NeighborPolicy.FULL

    def clamped(self) -> "GeneratorConfig":
        return replace(
            self,
            count=clamp(self.count, MIN_PUZZLES, MAX_PUZZLES),
            hints=clamp(self.hints, MIN_HINTS, MAX_HINTS),
        )


def attempt(
    hints: int,
    rng: Optional[random.Random] = None,
    policy: NeighborPolicy = NeighborPolicy.FULL,
) -> Optional[Pair]:
    """One fresh board through fill, carve and verify. None means discard and retry."""
    board = Board(policy=policy, rng=rng)
    if not board.fill_cells():
        return None
    board.generate_puzzle(hints)
    if not board.verify():
        return None
    return board.puzzle_string, board.solution_string


def generate_pairs(
    config: GeneratorConfig,
    on_accept: Optional[Callable[[str, str], None]] = None,
) -> Iterator[Pair]:
    """Yield exactly `config.count` accepted (puzzle, solution) pairs in generation order."""
    if config.count < 1:
        raise ValueError(f"count must be positive, got {config.count}")
    if config.max_attempts is not None and config.max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {config.max_attempts}")
    rng = random.Random(config.seed)
    accepted = attempts = 0
    while accepted < config.count:
        if config.max_attempts is not None and attempts >= config.max_attempts:
            raise GenerationError(
                f"gave up after {attempts} attempts with {accepted}/{config.count} puzzles accepted"
            )
        attempts += 1
        pair = attempt(config.hints, rng, config.policy)
        if pair is None:
            logger.debug("attempt %d rejected (%d/%d accepted)", attempts, accepted, config.count)
            continue
        accepted += 1
        if on_accept is not None:
            on_accept(*pair)
        yield pair
    logger.info("accepted %d puzzles in %d attempts", accepted, attempts)
