from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .errors import CapacityError, ForeignTileIdError, TileIndexError
from .tile import Tile

# Tile ids fit in a byte.
MAX_TILES = 256


@dataclass(frozen=True)
class TileId:
    """A tile number validated against one specific TileSet.

    ``index`` is the 0-based storage index; ``owner`` is the identity tag of
    the issuing set, checked on every lookup.
    """
    index: int
    owner: object

    def __int__(self) -> int:
        return self.index + 1

    @property
    def number(self) -> int:
        """The 1-based puzzle number."""
        return self.index + 1


class TileSet:
    """The complete, ordered tile set of one puzzle.

    Tiles are numbered from 1 in the puzzle's own numbering scheme; tile
    number n lives at storage index n - 1. There is no reserved blank tile.
    """

    def __init__(self, tiles: Iterable[Tile]):
        stored: Tuple[Tile, ...] = tuple(tiles)
        if len(stored) > MAX_TILES:
            raise CapacityError(f"tile set holds {len(stored)} tiles, maximum is {MAX_TILES}")
        self._tiles = stored
        self._tag = object()

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __repr__(self) -> str:
        return f"TileSet({len(self._tiles)} tiles)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileSet):
            return NotImplemented
        return self._tiles == other._tiles

    __hash__ = None  # type: ignore[assignment]

    def id(self, number: int) -> TileId:
        """Converts a 1-based puzzle number into a TileId for this set."""
        if not 1 <= number <= len(self._tiles):
            raise TileIndexError(f"tile number {number} outside 1..{len(self._tiles)}")
        return TileId(number - 1, self._tag)

    def owns(self, tile_id: TileId) -> bool:
        return tile_id.owner is self._tag

    def __getitem__(self, tile_id: TileId) -> Tile:
        if not isinstance(tile_id, TileId):
            raise TypeError(f"tile sets are indexed by TileId, not {type(tile_id).__name__}")
        if tile_id.owner is not self._tag:
            raise ForeignTileIdError(f"tile id #{tile_id.number} was issued by another tile set")
        return self._tiles[tile_id.index]

    def get_unchecked(self, tile_id: TileId) -> Tile:
        """Fast lookup that skips the ownership check.

        Only for ids already known to come from this set.
        """
        return self._tiles[tile_id.index]

    def tile(self, number: int) -> Tile:
        """Looks up a tile by its 1-based puzzle number."""
        return self._tiles[self.id(number).index]

    def numbered(self) -> Iterator[Tuple[int, Tile]]:
        """Yields (puzzle number, tile) pairs in storage order."""
        for i, t in enumerate(self._tiles):
            yield i + 1, t

    def count_by_class(self) -> List[Tuple[str, int]]:
        """Number of corner, edge and interior tiles, in that order."""
        counts = {'corner': 0, 'edge': 0, 'interior': 0, 'border': 0}
        for t in self._tiles:
            counts[t.classify()] += 1
        out = [(k, counts[k]) for k in ('corner', 'edge', 'interior')]
        if counts['border']:
            out.append(('border', counts['border']))
        return out
