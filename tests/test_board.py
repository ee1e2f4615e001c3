# -*-  coding: utf-8 -*-
"""
Set of test for the board primitives: shape validation, rotation and row sliding.
"""
from unittest import TestCase, main

import numpy as np

from slidemerge.core.gameboard import (
    InvalidShapeError,
    merge_row,
    rotate_counter_clockwise,
    slide_left,
    slide_row_left,
    to_board,
    to_grid,
    validate_shape,
)

N = None


class TestValidateShape(TestCase):
    """Test the rectangular shape check."""

    def test_rectangular(self):
        """Rows of equal length are valid."""
        self.assertTrue(validate_shape([[2, N, 4], [N, N, N]]))

    def test_ragged(self):
        """Rows of different length are rejected."""
        self.assertFalse(validate_shape([[1, 2], [3]]))

    def test_degenerate(self):
        """Single cells, single rows and single columns are valid."""
        self.assertTrue(validate_shape([[2]]))
        self.assertTrue(validate_shape([[2, 4, 8]]))
        self.assertTrue(validate_shape([[2], [4], [8]]))

    def test_no_rows(self):
        """A grid without rows is rejected."""
        self.assertFalse(validate_shape([]))

    def test_to_board_rejects_ragged(self):
        """Conversion to an array fails on a ragged grid."""
        with self.assertRaises(InvalidShapeError):
            to_board([[1, 2], [3]])

    def test_to_board_keeps_empty_cells(self):
        """Empty cells stay None through the array conversion."""
        grid = [[2, N], [N, 4]]
        board = to_board(grid)
        self.assertEqual(board.shape, (2, 2))
        self.assertIsNone(board[0, 1])
        self.assertEqual(to_grid(board), grid)


class TestRotation(TestCase):
    """Test the counter-clockwise rotation of boards."""

    def setUp(self):
        self.board = to_board([[1, 2, 3], [4, 5, 6]])

    def test_rotate_zero(self):
        """Rotating by 0 degrees gives an equal board."""
        np.testing.assert_array_equal(rotate_counter_clockwise(self.board, 0), self.board)

    def test_rotate_zero_is_a_copy(self):
        """The rotated board never shares memory with the input."""
        rotated = rotate_counter_clockwise(self.board, 0)
        rotated[0, 0] = 64
        self.assertEqual(self.board[0, 0], 1)

    def test_rotate_quarter(self):
        """A quarter turn brings the last column on top."""
        rotated = rotate_counter_clockwise(self.board, 90)
        self.assertEqual(to_grid(rotated), [[3, 6], [2, 5], [1, 4]])

    def test_rotate_half(self):
        """A half turn reverses rows and columns."""
        rotated = rotate_counter_clockwise(self.board, 180)
        self.assertEqual(to_grid(rotated), [[6, 5, 4], [3, 2, 1]])

    def test_rotate_three_quarters(self):
        """Three quarter turns bring the first column on top, reversed."""
        rotated = rotate_counter_clockwise(self.board, 270)
        self.assertEqual(to_grid(rotated), [[4, 1], [5, 2], [6, 3]])

    def test_round_trip(self):
        """Rotating by d then by 360 - d restores the board, whatever its shape."""
        for grid in ([[1, 2, 3], [4, 5, 6]], [[1, N, 3, 4]], [[1], [N], [3]], [[7]]):
            board = to_board(grid)
            for degree in (90, 180, 270):
                rotated = rotate_counter_clockwise(rotate_counter_clockwise(board, degree), 360 - degree)
                self.assertEqual(to_grid(rotated), grid)

    def test_two_quarters_make_a_half(self):
        """Two quarter turns equal one half turn."""
        twice = rotate_counter_clockwise(rotate_counter_clockwise(self.board, 90), 90)
        np.testing.assert_array_equal(twice, rotate_counter_clockwise(self.board, 180))

    def test_unsupported_degree(self):
        """Only multiples of 90 below 360 are accepted."""
        with self.assertRaises(ValueError):
            rotate_counter_clockwise(self.board, 45)


class TestSlideRow(TestCase):
    """Test the slide and merge of a single row."""

    def test_merge_and_compact(self):
        """Equal neighbours merge and the result is packed to the left."""
        slid = slide_row_left([2, 2, 4, N])
        self.assertEqual(slid.row, [4, 4, N, N])
        self.assertTrue(slid.changed)
        self.assertEqual(slid.score, 4)

    def test_no_chained_merge(self):
        """A merged tile does not merge again in the same move."""
        slid = slide_row_left([2, 2, 2, 2])
        self.assertEqual(slid.row, [4, 4, N, N])
        self.assertTrue(slid.changed)
        self.assertEqual(slid.score, 8)

    def test_merge_across_gap(self):
        """Tiles separated by empty cells become adjacent and merge."""
        slid = slide_row_left([2, N, 2, 4])
        self.assertEqual(slid.row, [4, 4, N, N])
        self.assertTrue(slid.changed)

    def test_first_pair_wins(self):
        """With three equal tiles, the two leftmost merge."""
        self.assertEqual(slide_row_left([4, 4, 4, N]).row, [8, 4, N, N])
        self.assertEqual(slide_row_left([N, 2, 2, 2]).row, [4, 2, N, N])

    def test_packed_row_unchanged(self):
        """A packed row without equal neighbours does not change."""
        slid = slide_row_left([4, 2, N, N])
        self.assertEqual(slid.row, [4, 2, N, N])
        self.assertFalse(slid.changed)
        self.assertEqual(slid.score, 0)

    def test_full_row_unchanged(self):
        """A full row without equal neighbours does not change."""
        slid = slide_row_left([2, 4, 8, 16])
        self.assertEqual(slid.row, [2, 4, 8, 16])
        self.assertFalse(slid.changed)

    def test_empty_row(self):
        """An empty row stays empty."""
        slid = slide_row_left([N, N, N, N])
        self.assertEqual(slid.row, [N, N, N, N])
        self.assertFalse(slid.changed)

    def test_single_tile_slides(self):
        """A lone tile slides to the left end."""
        slid = slide_row_left([N, N, 8, N])
        self.assertEqual(slid.row, [8, N, N, N])
        self.assertTrue(slid.changed)

    def test_input_not_modified(self):
        """The input row is left untouched."""
        row = [2, 2, N, 4]
        slide_row_left(row)
        self.assertEqual(row, [2, 2, N, 4])

    def test_merge_row(self):
        """Merging drops empty cells and returns the merge score."""
        merged, score = merge_row([2, 2, 4, 4])
        self.assertEqual(merged, [4, 8])
        self.assertEqual(score, 12)


class TestSlideLeft(TestCase):
    """Test the slide of a whole board to the left."""

    def test_slide_left(self):
        """Every row is slid and merged independently."""
        board = to_board([[2, 2, 4, 4], [N, 2, 2, 4], [2, N, N, 2], [2, 2, 2, 2]])
        result, moved, score = slide_left(board)
        expected = [[4, 8, N, N], [4, 4, N, N], [4, N, N, N], [4, 4, N, N]]
        self.assertEqual(to_grid(result), expected)
        self.assertTrue(moved)
        self.assertEqual(score, 28)

    def test_slide_left_no_move(self):
        """A packed board without equal neighbours does not move."""
        board = to_board([[2, 4, N], [8, N, N]])
        result, moved, score = slide_left(board)
        self.assertEqual(to_grid(result), [[2, 4, N], [8, N, N]])
        self.assertFalse(moved)
        self.assertEqual(score, 0)


if __name__ == "__main__":
    main()
