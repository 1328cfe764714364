"""Readers for the flat text formats puzzles are published in.

Tiles document, one record per line, tokens separated by a single space:

- ``N``          square board, N columns and N rows
- ``C R``        board of C columns and R rows
- ``a b c d``    one tile; the four edge codes (0-255) go to the sides named
                 by the caller's column order, e.g. N,S,W,E for Eternity II

Tiles are numbered from 1 in file order. Blank lines are skipped; any other
token count, a non-numeric token, an out-of-range code or a second dimension
line aborts the parse.

Clues document, one record per line: ``tile column row rotation`` where tile
is the 1-based tile number and rotation is 0..3 quarter turns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .board import Board, BoardShape, Location
from .clue import Clue
from .edge import E2Edge
from .errors import EdgeCodeError, OutOfRangeError, ParseError
from .geometry import NESW, Rotation, Side
from .logging_utils import get_logger
from .tile import Tile
from .tileset import TileSet

logger = get_logger('parse')

MAX_EDGE_CODE = 255


def _check_side_order(side_order: Sequence[Side]) -> Tuple[Side, ...]:
    order = tuple(side_order)
    if len(order) != 4 or set(order) != set(NESW):
        raise ValueError(f"side order must list each side exactly once: {order}")
    return order


def _to_uint(token: str, line_no: int, line: str, what: str) -> int:
    if not token.isdigit() or not token.isascii():
        raise ParseError(f"{what} is not an unsigned integer: {token!r}", line_no, line)
    return int(token)


def _records(text: str, sep: Optional[str]) -> List[Tuple[int, str, List[str]]]:
    out: List[Tuple[int, str, List[str]]] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        out.append((line_no, line, line.split(sep)))
    return out


def parse_tiles(
    text: str,
    side_order: Sequence[Side] = NESW,
    edge_type: Any = E2Edge,
) -> Tuple[TileSet, Optional[BoardShape]]:
    """Parses a tiles document into a TileSet and, if the document names one, a BoardShape.

    ``edge_type`` supplies ``from_code(int)`` to decode each edge and ``blank()``
    for the starting template of every tile.
    """
    order = _check_side_order(side_order)
    decode: Callable[[int], Any] = edge_type.from_code
    template = [edge_type.blank()] * 4

    shape: Optional[BoardShape] = None
    tiles: List[Tile] = []
    for line_no, line, tokens in _records(text, " "):
        n = len(tokens)
        if n in (1, 2):
            if shape is not None:
                raise ParseError("duplicate board dimension line", line_no, line)
            dims = [_to_uint(t, line_no, line, "dimension") for t in tokens]
            columns = dims[0]
            rows = dims[1] if n == 2 else dims[0]
            if columns == 0 or rows == 0:
                raise ParseError("board dimensions must be positive", line_no, line)
            shape = BoardShape(columns, rows)
        elif n == 4:
            edges = list(template)
            for side, token in zip(order, tokens):
                code = _to_uint(token, line_no, line, "edge code")
                if code > MAX_EDGE_CODE:
                    raise ParseError(f"edge code out of range 0..{MAX_EDGE_CODE}: {code}", line_no, line)
                try:
                    edges[side.value] = decode(code)
                except (EdgeCodeError, ValueError) as e:
                    raise ParseError(str(e), line_no, line) from e
            tiles.append(Tile(*edges))
        else:
            raise ParseError(f"bad number of values in tiles file: {n}", line_no, line)

    tile_set = TileSet(tiles)
    logger.debug("parsed %d tiles, shape=%s", len(tile_set), shape)
    return tile_set, shape


def format_tile(tile: Tile, side_order: Sequence[Side] = NESW) -> str:
    """Writes a tile back as a 4-token tiles-file record."""
    order = _check_side_order(side_order)
    return " ".join(str(int(tile[s])) for s in order)


def parse_clues(
    text: str,
    tiles: TileSet,
    clockwise: bool = False,
    shape: Optional[BoardShape] = None,
) -> List[Clue]:
    """Parses a clues document against a tile set.

    If ``clockwise`` is true, rotation indices count clockwise turns and are
    reversed into the counter-clockwise convention. When ``shape`` is given,
    positions are checked against it.
    """
    clues: List[Clue] = []
    for line_no, line, tokens in _records(text, None):
        if len(tokens) != 4:
            raise ParseError(f"bad number of values in clues file: {len(tokens)}", line_no, line)
        number, col, row, rot = (
            _to_uint(t, line_no, line, what)
            for t, what in zip(tokens, ("tile number", "column", "row", "rotation"))
        )
        try:
            tile = tiles[tiles.id(number)]
            rotation = Rotation.from_index(rot)
        except OutOfRangeError as e:
            raise ParseError(str(e), line_no, line) from e
        if clockwise:
            rotation = rotation.reverse()
        if shape is not None and not shape.contains(col, row):
            raise ParseError(
                f"position ({col}, {row}) outside {shape.columns}x{shape.rows} board", line_no, line
            )
        clues.append(Clue(tile, rotation, Location(col, row)))

    logger.debug("parsed %d clues", len(clues))
    return clues


@dataclass(frozen=True)
class BoardSpec:
    """The parsed description of one puzzle: board dimensions and its tile set."""
    dimensions: BoardShape
    tiles: TileSet

    @classmethod
    def parse(
        cls,
        text: str,
        side_order: Sequence[Side] = NESW,
        edge_type: Any = E2Edge,
        default_shape: Optional[BoardShape] = None,
    ) -> 'BoardSpec':
        """Parses a tiles document; ``default_shape`` applies when it has no dimension line."""
        tiles, shape = parse_tiles(text, side_order, edge_type)
        if shape is None:
            shape = default_shape
        if shape is None:
            raise ParseError("tiles file has no board dimension line and no default shape was given")
        return cls(shape, tiles)

    def new_board(self) -> Board:
        return self.dimensions.new_board()

    def parse_clues(self, text: str, clockwise: bool = False) -> List[Clue]:
        return parse_clues(text, self.tiles, clockwise, shape=self.dimensions)
