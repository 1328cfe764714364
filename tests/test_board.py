import unittest

from eternity_core.board import Board, BoardShape, Location
from eternity_core.clue import Clue, apply_clues
from eternity_core.errors import BoardIndexError, OutOfRangeError
from eternity_core.geometry import Rotation
from eternity_core.tile import Tile


class TestBoard(unittest.TestCase):
    def test_given_shape_when_creating_board_then_every_cell_empty(self):
        shape = BoardShape(columns=3, rows=2)
        board = shape.new_board()
        self.assertEqual(shape.cell_count, 6)
        self.assertEqual((board.columns, board.rows), (3, 2))
        self.assertEqual(len(board.cells), 6)
        for c in range(3):
            for r in range(2):
                self.assertIsNone(board[(c, r)])
                self.assertTrue(board.is_empty(Location(c, r)))
        self.assertEqual(board.filled_count, 0)
        self.assertEqual(board.shape, shape)

    def test_given_non_positive_dimensions_when_building_shape_then_value_error(self):
        with self.assertRaises(ValueError):
            BoardShape(0, 3)
        with self.assertRaises(ValueError):
            BoardShape(3, -1)

    def test_given_non_positive_dimensions_when_building_board_directly_then_value_error(self):
        for c, r in [(0, 2), (2, 0), (-1, 3)]:
            with self.assertRaises(ValueError):
                Board(c, r)

    def test_given_board_when_setting_cell_then_row_major_offset(self):
        board = Board(3, 2)
        t = Tile(1, 2, 3, 4)
        self.assertEqual(board.index(1, 1), 4)
        board[Location(1, 1)] = t
        self.assertIs(board.cells[4], t)
        self.assertIs(board.get(1, 1), t)
        self.assertIs(board.get_unchecked(1, 1), t)
        self.assertEqual(list(board.placed()), [(Location(1, 1), t)])

    def test_given_off_board_coordinates_when_accessing_then_board_index_error(self):
        board = Board(3, 2)
        for c, r in [(3, 0), (0, 2), (-1, 0), (0, -1)]:
            with self.assertRaises(BoardIndexError):
                _ = board[(c, r)]
            with self.assertRaises(OutOfRangeError):
                board.set(c, r, Tile(1, 1, 1, 1))

    def test_given_board_when_iterating_coords_then_row_by_row(self):
        board = Board(2, 2)
        self.assertEqual(list(board.coords()), [(0, 0), (1, 0), (0, 1), (1, 1)])

    def test_given_board_when_pretty_then_empty_cells_dotted(self):
        board = Board(2, 1)
        board.set(1, 0, Tile(1, 2, 3, 4))
        txt = board.pretty()
        self.assertIn('.', txt)
        self.assertIn('1/2/3/4', txt)


class TestClue(unittest.TestCase):
    def test_given_clue_when_applied_then_rotated_tile_placed(self):
        board = BoardShape(4, 4).new_board()
        clue = Clue(Tile('a', 'b', 'c', 'd'), Rotation.ROT90, Location(1, 2))
        clue.apply(board)
        self.assertEqual(board[(1, 2)], Tile('d', 'a', 'b', 'c'))
        self.assertEqual(board.filled_count, 1)

    def test_given_clue_when_applied_twice_then_cell_identical(self):
        board = BoardShape(4, 4).new_board()
        clue = Clue(Tile(1, 2, 3, 4), Rotation.ROT270, Location(3, 3))
        clue.apply(board)
        first = board[(3, 3)]
        clue.apply(board)
        self.assertEqual(board[(3, 3)], first)
        self.assertEqual(board.filled_count, 1)

    def test_given_two_clues_on_one_cell_when_applied_then_last_wins(self):
        board = BoardShape(2, 2).new_board()
        apply_clues(board, [
            Clue(Tile(1, 1, 1, 1), Rotation.ROT0, Location(0, 0)),
            Clue(Tile(2, 2, 2, 2), Rotation.ROT0, Location(0, 0)),
        ])
        self.assertEqual(board[(0, 0)], Tile(2, 2, 2, 2))

    def test_given_clue_off_board_when_applied_then_board_index_error(self):
        board = BoardShape(2, 2).new_board()
        with self.assertRaises(BoardIndexError):
            Clue(Tile(1, 1, 1, 1), Rotation.ROT0, Location(2, 0)).apply(board)


if __name__ == '__main__':
    unittest.main(verbosity=2)
