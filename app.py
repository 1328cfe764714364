from __future__ import annotations

import os
import sys
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from the repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from eternity_core import config
from eternity_core.clue import apply_clues
from eternity_core.errors import PuzzleError
from eternity_core.logging_utils import get_logger
from eternity_core.parse import BoardSpec, parse_tiles
from eternity_core.serialize import (
    board_from_json,
    board_to_json,
    tile_to_json,
    tileset_to_json,
)

__all__ = ["app", "board_to_json", "board_from_json", "tile_to_json"]

logger = get_logger("app")

app = Flask(__name__)


def _bad_request(msg: str) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": msg}), 400


def _side_order(body: Dict[str, Any]):
    order = body.get("order")
    if order is None:
        return config.side_order()
    return config.parse_side_order(str(order))


def _text_field(body: Dict[str, Any], name: str) -> str:
    value = body.get(name)
    if not isinstance(value, str):
        raise ValueError(f"{name} text required")
    return value


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/tiles")
def api_tiles() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return _bad_request("JSON object required")
    try:
        tiles, shape = parse_tiles(_text_field(body, "tiles"), _side_order(body))
    except (PuzzleError, ValueError) as e:
        return _bad_request(str(e))
    dims = None if shape is None else {"columns": shape.columns, "rows": shape.rows}
    return jsonify({
        "ok": True,
        "dimensions": dims,
        "count": len(tiles),
        "tiles": tileset_to_json(tiles),
    })


@app.post("/api/board")
def api_board() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return _bad_request("JSON object required")
    clockwise = body.get("clockwise", config.clockwise())
    if not isinstance(clockwise, bool):
        return _bad_request("clockwise must be a boolean")
    try:
        spec = BoardSpec.parse(_text_field(body, "tiles"), _side_order(body))
        clues = spec.parse_clues(_text_field(body, "clues"), clockwise=clockwise)
    except (PuzzleError, ValueError) as e:
        return _bad_request(str(e))
    board = apply_clues(spec.new_board(), clues)
    logger.info("built %dx%d board from %d clues", board.columns, board.rows, len(clues))
    return jsonify({
        "ok": True,
        "board": board_to_json(board),
        "clues": [
            {
                "tile": tile_to_json(c.tile),
                "rotation": c.rotation.degrees,
                "at": [c.at.col, c.at.row],
            }
            for c in clues
        ],
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=config.debug())
