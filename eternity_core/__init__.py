"""
Eternity core Python package.

Data model for Eternity II style edge-matching puzzles: square tiles with
four edges placed on a rectangular board so that abutting edges match.
Modules:
- geometry.py: Side, Rotation
- edge.py: Edge capability, E2Edge
- tile.py: Tile, RotatedTile
- tileset.py: TileSet, TileId
- board.py: Board, BoardShape, Location
- clue.py: Clue
- parse.py: tiles and clues parsers, BoardSpec
- e2.py: Eternity II constants
"""

from .board import Board, BoardShape, Location
from .clue import Clue, apply_clues
from .edge import E2Edge, Edge
from .errors import (
    BoardIndexError,
    CapacityError,
    EdgeCodeError,
    ForeignTileIdError,
    OutOfRangeError,
    ParseError,
    PuzzleError,
    RotationIndexError,
    TileIndexError,
)
from .geometry import NESW, ROTATIONS, SIDES, Rotation, Side
from .parse import BoardSpec, format_tile, parse_clues, parse_tiles
from .tile import RotatedTile, Tile
from .tileset import MAX_TILES, TileId, TileSet
