from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Tuple, Union

from .errors import BoardIndexError
from .tile import Tile


class Location(NamedTuple):
    """A cell position within a board."""
    col: int
    row: int


Coord = Union[Location, Tuple[int, int]]


@dataclass(frozen=True)
class BoardShape:
    """The shape of a board: column count (width) and row count (height)."""
    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"board shape must be positive, got {self.columns}x{self.rows}")

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.columns and 0 <= row < self.rows

    def new_board(self) -> 'Board':
        """Makes a new board of this shape with every cell empty."""
        return Board(self.columns, self.rows)


class Board:
    """A (partially filled) board; each cell is empty or holds a placed tile.

    Cells are stored row-major: cell (col, row) lives at col + row * columns.
    """

    def __init__(self, columns: int, rows: int):
        if columns <= 0 or rows <= 0:
            raise ValueError(f"board shape must be positive, got {columns}x{rows}")
        self.columns = columns
        self.rows = rows
        self._cells: List[Optional[Tile]] = [None] * (columns * rows)

    @property
    def shape(self) -> BoardShape:
        return BoardShape(self.columns, self.rows)

    @property
    def cells(self) -> Tuple[Optional[Tile], ...]:
        """Row-major snapshot of all cells."""
        return tuple(self._cells)

    def index(self, col: int, row: int) -> int:
        """Calculates the row-major offset, rejecting coordinates off the board."""
        if not (0 <= col < self.columns and 0 <= row < self.rows):
            raise BoardIndexError(f"cell ({col}, {row}) outside {self.columns}x{self.rows} board")
        return col + row * self.columns

    def get(self, col: int, row: int) -> Optional[Tile]:
        return self._cells[self.index(col, row)]

    def set(self, col: int, row: int, tile: Optional[Tile]) -> None:
        self._cells[self.index(col, row)] = tile

    # Fast paths for coordinates already validated against this board's shape.
    def get_unchecked(self, col: int, row: int) -> Optional[Tile]:
        return self._cells[col + row * self.columns]

    def set_unchecked(self, col: int, row: int, tile: Optional[Tile]) -> None:
        self._cells[col + row * self.columns] = tile

    def __getitem__(self, at: Coord) -> Optional[Tile]:
        col, row = at
        return self.get(col, row)

    def __setitem__(self, at: Coord, tile: Optional[Tile]) -> None:
        col, row = at
        self.set(col, row, tile)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.columns, self.rows, self._cells) == (other.columns, other.rows, other._cells)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board({self.columns}x{self.rows}, {self.filled_count} placed)"

    def is_empty(self, at: Coord) -> bool:
        return self[at] is None

    def coords(self) -> Iterator[Location]:
        """Iterates over all cell positions, row by row."""
        for r in range(self.rows):
            for c in range(self.columns):
                yield Location(c, r)

    def placed(self) -> Iterator[Tuple[Location, Tile]]:
        """Iterates over the filled cells only."""
        for loc in self.coords():
            t = self.get_unchecked(loc.col, loc.row)
            if t is not None:
                yield loc, t

    @property
    def filled_count(self) -> int:
        return sum(1 for t in self._cells if t is not None)

    def pretty(self) -> str:
        """Human-readable grid: each cell shows its edges as N/E/S/W codes, '.' when empty."""
        width = 1
        for t in self._cells:
            if t is not None:
                width = max(width, len(_cell_text(t)))
        lines: List[str] = []
        for r in range(self.rows):
            row: List[str] = []
            for c in range(self.columns):
                t = self.get_unchecked(c, r)
                text = '.' if t is None else _cell_text(t)
                row.append(text.rjust(width))
            lines.append(' | '.join(row))
        return '\n'.join(lines)


def _cell_text(tile: Tile) -> str:
    return '/'.join(str(int(e)) if isinstance(e, int) else str(e) for e in tile.edges)
