from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Tuple, TypeVar

from .edge import Edge
from .geometry import ROTATIONS, SIDES, Rotation, Side

E = TypeVar('E')


@dataclass(frozen=True)
class Tile(Generic[E]):
    """Four edges, stored as north, east, south, west (clockwise from the top).

    The stored order never changes; rotation is expressed with a RotatedTile
    view and only ``RotatedTile.apply`` produces a new, re-ordered tile.
    """
    north: E
    east: E
    south: E
    west: E

    @classmethod
    def blank(cls, edge_type: Any) -> 'Tile':
        """A tile whose four edges are the edge type's blank value."""
        b = edge_type.blank()
        return cls(b, b, b, b)

    @property
    def edges(self) -> Tuple[E, E, E, E]:
        return (self.north, self.east, self.south, self.west)

    def __getitem__(self, side: Side) -> E:
        return self.edges[side.value]

    def rotate(self, rotation: Rotation) -> 'RotatedTile[E]':
        return RotatedTile(self, rotation)

    def orientations(self) -> Iterator['RotatedTile[E]']:
        """Yields the tile under each of the four rotations, ROT0 first."""
        for r in ROTATIONS:
            yield self.rotate(r)

    def _count_border(self) -> int:
        count = 0
        for e in self.edges:
            if not isinstance(e, Edge):
                raise TypeError(f"edge {e!r} does not support border classification")
            if e.is_border():
                count += 1
        return count

    # Classification assumes no tile has two opposite border edges (N/S or E/W).
    def is_corner(self) -> bool:
        return self._count_border() == 2

    def is_edge(self) -> bool:
        return self._count_border() == 1

    def is_border(self) -> bool:
        """Corners and edge pieces, everything placed on the outer ring."""
        return self._count_border() > 0

    def classify(self) -> str:
        n = self._count_border()
        if n == 0:
            return 'interior'
        if n == 1:
            return 'edge'
        if n == 2:
            return 'corner'
        return 'border'


@dataclass(frozen=True)
class RotatedTile(Generic[E]):
    """A tile seen through a rotation. The underlying tile is not altered."""
    tile: Tile[E]
    rotation: Rotation

    def __getitem__(self, side: Side) -> E:
        return self.tile[side.rotate(self.rotation)]

    def rotate(self, rotation: Rotation) -> 'RotatedTile[E]':
        """Composes a further rotation onto this view."""
        return RotatedTile(self.tile, self.rotation + rotation)

    def apply(self) -> Tile[E]:
        """Materializes a new tile with the edges moved round by the rotation.

        New side s takes the old edge at position (s - k) mod 4, so ROT90 turns
        (n, e, s, w) into (w, n, e, s).
        """
        edges = self.tile.edges
        k = self.rotation.value
        return Tile(*(edges[(side.value - k) % 4] for side in SIDES))
