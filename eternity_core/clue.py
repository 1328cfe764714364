from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .board import Board, Location
from .geometry import Rotation
from .logging_utils import get_logger
from .tile import Tile

logger = get_logger('clue')


@dataclass(frozen=True)
class Clue:
    """A known placement: the tile, its rotation and its position within the puzzle."""
    tile: Tile
    rotation: Rotation
    at: Location

    def placed_tile(self) -> Tile:
        return self.tile.rotate(self.rotation).apply()

    def apply(self, board: Board) -> None:
        """Writes the rotated tile into its cell; whatever was there is replaced."""
        placed = self.placed_tile()
        col, row = self.at
        previous = board.get(col, row)
        if previous is not None and previous != placed:
            logger.debug("clue at (%d, %d) overwrites %r with %r", col, row, previous, placed)
        board.set_unchecked(col, row, placed)


def apply_clues(board: Board, clues: Iterable[Clue]) -> Board:
    """Applies clues in order; later clues win on a shared cell."""
    n = 0
    for clue in clues:
        clue.apply(board)
        n += 1
    logger.info("applied %d clues, %d cells filled", n, board.filled_count)
    return board
