"""Constants and loaders for the Eternity II puzzle itself.

The published tile list (e2pieces) has one tile per line with the edges in
north, south, west, east column order and edge 0 as the grey outside edge.
"""

from __future__ import annotations

from typing import Tuple

from .board import BoardShape
from .edge import E2Edge
from .geometry import Side
from .parse import BoardSpec

E2_COLUMNS = 16
E2_ROWS = 16
E2_TILE_COUNT = E2_COLUMNS * E2_ROWS
E2_SHAPE = BoardShape(E2_COLUMNS, E2_ROWS)

E2_SIDE_ORDER: Tuple[Side, ...] = (Side.NORTH, Side.SOUTH, Side.WEST, Side.EAST)


def e2_board_spec(text: str) -> BoardSpec:
    """Parses an e2pieces-style document, defaulting to the 16x16 board."""
    return BoardSpec.parse(text, E2_SIDE_ORDER, E2Edge, default_shape=E2_SHAPE)
