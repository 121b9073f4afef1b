import unittest

from c4solver.core.bit_board import BitBoard, has_alignment
from c4solver.core.errors import ColumnFull, InvalidColumn
from c4solver.core.grid_board import GridBoard
from c4solver.types import Piece


def bits(cells, stride=7):
    m = 0
    for col, row in cells:
        m |= 1 << (col * stride + row)
    return m


class TestBitLayout(unittest.TestCase):
    def test_column_major_with_guard_bit(self):
        b = BitBoard.from_moves("0011")
        self.assertEqual(b.stride, 7)
        self.assertEqual(b.occupied, bits([(0, 0), (0, 1), (1, 0), (1, 1)]))
        self.assertEqual(b.first, bits([(0, 0), (1, 0)]))
        self.assertEqual(b.second(), bits([(0, 1), (1, 1)]))
        self.assertEqual(b.mask_of(Piece.SECOND), b.second())

    def test_guard_bits_stay_empty(self):
        b = BitBoard()
        for _ in range(6):
            b.apply_move(2)
        guard = 1 << (2 * 7 + 6)
        self.assertFalse(b.occupied & guard)
        self.assertEqual(b.column_height(2), 6)
        with self.assertRaises(ColumnFull):
            b.apply_move(2)

    def test_undo_clears_bit(self):
        b = BitBoard.from_moves("33")
        b.undo_last_move()
        self.assertEqual(b.occupied, bits([(3, 0)]))
        self.assertEqual(b.first, bits([(3, 0)]))
        b.undo_last_move()
        self.assertEqual((b.occupied, b.first, b.num_moves), (0, 0, 0))


class TestAlignment(unittest.TestCase):
    def test_directions(self):
        self.assertTrue(has_alignment(bits([(0, 0), (0, 1), (0, 2), (0, 3)]), 7))
        self.assertTrue(has_alignment(bits([(2, 1), (3, 1), (4, 1), (5, 1)]), 7))
        self.assertTrue(has_alignment(bits([(1, 0), (2, 1), (3, 2), (4, 3)]), 7))
        self.assertTrue(has_alignment(bits([(3, 5), (4, 4), (5, 3), (6, 2)]), 7))

    def test_three_is_not_enough(self):
        self.assertFalse(has_alignment(bits([(0, 0), (0, 1), (0, 2)]), 7))
        self.assertFalse(has_alignment(bits([(0, 0), (1, 0), (2, 0), (4, 0)]), 7))

    def test_vertical_run_across_columns_is_not_a_line(self):
        # top of column 0 and bottom of column 1 are contiguous only without the guard bit
        cells = [(0, 4), (0, 5), (1, 0), (1, 1)]
        self.assertFalse(has_alignment(bits(cells), 7))
        self.assertTrue(has_alignment(bits(cells, stride=6), 6))

    def test_diagonals_across_columns_are_not_lines(self):
        up_right = [(0, 4), (1, 5), (3, 0), (4, 1)]
        self.assertFalse(has_alignment(bits(up_right), 7))
        self.assertTrue(has_alignment(bits(up_right, stride=6), 6))

        down_right = [(0, 1), (1, 0), (1, 5), (2, 4)]
        self.assertFalse(has_alignment(bits(down_right), 7))
        self.assertTrue(has_alignment(bits(down_right, stride=6), 6))


class TestWinningMove(unittest.TestCase):
    def test_matches_grid_board(self):
        for moves in ["010101", "0101012", "001122", "1122", "11223", "3324", ""]:
            bit = BitBoard.from_moves(moves)
            grid = GridBoard.from_moves(moves)
            for col in range(7):
                with self.subTest(moves=moves, col=col):
                    self.assertEqual(bit.is_winning_move(col), grid.is_winning_move(col))

    def test_does_not_mutate(self):
        b = BitBoard.from_moves("010101")
        before = (b.occupied, b.first, b.num_moves)
        self.assertTrue(b.is_winning_move(0))
        self.assertFalse(b.is_winning_move(1))
        self.assertEqual((b.occupied, b.first, b.num_moves), before)

    def test_rejects_bad_columns(self):
        b = BitBoard()
        with self.assertRaises(InvalidColumn):
            b.is_winning_move(7)
        for _ in range(6):
            b.apply_move(0)
        with self.assertRaises(ColumnFull):
            b.is_winning_move(0)


if __name__ == "__main__":
    unittest.main()
