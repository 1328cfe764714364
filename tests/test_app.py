import json
import unittest

from app import app as flask_app  # noqa: E402
from app import board_from_json, board_to_json  # noqa: E402
from eternity_core.board import Board
from eternity_core.edge import E2Edge
from eternity_core.tile import Tile

TILES = "2\n0 1 2 0\n0 0 3 1\n2 4 0 0\n3 0 0 4\n"


class TestJsonCodec(unittest.TestCase):
    def test_given_board_when_roundtrip_json_then_equal(self):
        board = Board(2, 2)
        board.set(1, 0, Tile(E2Edge.OUTSIDE, E2Edge.EDGE1, E2Edge.EDGE2, E2Edge.EDGE3))
        bj = board_to_json(board)
        self.assertEqual(bj["columns"], 2)
        self.assertEqual(bj["rows"], 2)
        self.assertEqual(bj["cells"], [None, [0, 1, 2, 3], None, None])
        self.assertEqual(board_from_json(bj), board)

    def test_given_zero_sized_board_json_when_decoding_then_value_error(self):
        with self.assertRaises(ValueError):
            board_from_json({"columns": 0, "rows": 3, "cells": []})

    def test_given_wrong_cell_count_when_decoding_then_value_error(self):
        with self.assertRaises(ValueError):
            board_from_json({"columns": 2, "rows": 2, "cells": [None]})


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, url, payload):
        return self.client.post(url, data=json.dumps(payload), content_type="application/json")

    def test_given_health_when_requested_then_ok(self):
        r = self.client.get("/api/health")
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.get_json()["ok"])

    def test_given_tiles_text_when_posted_then_numbered_tiles_and_dimensions(self):
        r = self._post("/api/tiles", {"tiles": TILES})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        self.assertEqual(data["dimensions"], {"columns": 2, "rows": 2})
        self.assertEqual(data["count"], 4)
        self.assertEqual(data["tiles"][0], {"number": 1, "edges": [0, 1, 2, 0], "kind": "corner"})

    def test_given_tiles_and_clues_when_posted_then_board_filled(self):
        r = self._post("/api/board", {"tiles": TILES, "clues": "1 0 0 1\n2 1 0 0\n"})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        board = data["board"]
        self.assertEqual((board["columns"], board["rows"]), (2, 2))
        # Tile 1 (0,1,2,0) turned 90 degrees counter-clockwise -> (0,0,1,2)
        self.assertEqual(board["cells"][0], [0, 0, 1, 2])
        self.assertEqual(board["cells"][1], [0, 0, 3, 1])
        self.assertIsNone(board["cells"][2])
        self.assertEqual(data["clues"][0]["rotation"], 90)
        self.assertEqual(data["clues"][0]["at"], [0, 0])

    def test_given_clockwise_flag_when_posted_then_rotation_reversed(self):
        r = self._post("/api/board", {"tiles": TILES, "clues": "1 0 0 1", "clockwise": True})
        data = r.get_json()
        self.assertEqual(data["clues"][0]["rotation"], 270)
        self.assertEqual(data["board"]["cells"][0], [1, 2, 0, 0])

    def test_given_string_clockwise_flag_when_posted_then_rejected_not_reversed(self):
        for flag in ("false", "0", "no", 1):
            r = self._post("/api/board", {"tiles": TILES, "clues": "1 0 0 1", "clockwise": flag})
            self.assertEqual(r.status_code, 400, msg=repr(flag))
            self.assertIn("clockwise", r.get_json()["error"])
        r2 = self._post("/api/board", {"tiles": TILES, "clues": "1 0 0 1", "clockwise": False})
        self.assertEqual(r2.status_code, 200)
        self.assertEqual(r2.get_json()["clues"][0]["rotation"], 90)

    def test_given_non_object_json_body_when_posted_then_400(self):
        for url in ("/api/tiles", "/api/board"):
            r = self._post(url, [1, 2])
            self.assertEqual(r.status_code, 400)
            data = r.get_json()
            self.assertFalse(data["ok"])
            self.assertIn("JSON object", data["error"])

    def test_given_bad_input_when_posted_then_400_with_error(self):
        r = self._post("/api/tiles", {"tiles": "1 2 3\n"})
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.get_json()["ok"])
        self.assertIn("line 1", r.get_json()["error"])

        r2 = self._post("/api/board", {"tiles": TILES, "clues": "9 0 0 0"})
        self.assertEqual(r2.status_code, 400)
        self.assertFalse(r2.get_json()["ok"])

        r3 = self._post("/api/board", {"tiles": TILES})
        self.assertEqual(r3.status_code, 400)

        r4 = self._post("/api/tiles", {"tiles": TILES, "order": "NNWE"})
        self.assertEqual(r4.status_code, 400)


if __name__ == "__main__":
    unittest.main(verbosity=2)
