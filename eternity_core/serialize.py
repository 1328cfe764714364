from __future__ import annotations

from typing import Any, Dict, List, Optional

from .board import Board
from .edge import E2Edge
from .tile import Tile
from .tileset import TileSet


def tile_to_json(t: Tile) -> List[int]:
    """Edges as integer codes in north, east, south, west order."""
    return [int(e) for e in t.edges]


def tile_from_json(obj: List[Any], edge_type: Any = E2Edge) -> Tile:
    if len(obj) != 4:
        raise ValueError(f"tile needs 4 edges, got {len(obj)}")
    return Tile(*(edge_type.from_code(int(x)) for x in obj))


def board_to_json(b: Board) -> Dict[str, Any]:
    """The board handoff shape: columns, rows and a row-major list of cells (null when empty)."""
    cells: List[Optional[List[int]]] = []
    for t in b.cells:
        cells.append(None if t is None else tile_to_json(t))
    return {"columns": int(b.columns), "rows": int(b.rows), "cells": cells}


def board_from_json(obj: Dict[str, Any], edge_type: Any = E2Edge) -> Board:
    columns = int(obj["columns"])
    rows = int(obj["rows"])
    cells = obj.get("cells", [])
    if len(cells) != columns * rows:
        raise ValueError(f"expected {columns * rows} cells, got {len(cells)}")
    board = Board(columns, rows)
    for i, cell in enumerate(cells):
        if cell is not None:
            board.set_unchecked(i % columns, i // columns, tile_from_json(cell, edge_type))
    return board


def tileset_to_json(tiles: TileSet) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for number, t in tiles.numbered():
        entry: Dict[str, Any] = {"number": number, "edges": tile_to_json(t)}
        try:
            entry["kind"] = t.classify()
        except TypeError:
            entry["kind"] = None
        out.append(entry)
    return out
