# -*- coding: utf-8 -*-
"""
This module provides the move engine of a 2048-like game.

It includes functions for validating and rotating boards, sliding and merging rows, moving a whole board in a
direction and finding which directions are still legal.
"""

from .gameboard import (
    EMPTY,
    InvalidShapeError,
    RowSlide,
    merge_row,
    rotate_counter_clockwise,
    slide_left,
    slide_row_left,
    to_board,
    to_grid,
    validate_shape,
)
from .gamemove import Direction, MoveResult, ScoredMove, is_done, legal_moves, move, scored_move

__all__ = [
    "EMPTY",
    "Direction",
    "InvalidShapeError",
    "MoveResult",
    "RowSlide",
    "ScoredMove",
    "move",
    "scored_move",
    "legal_moves",
    "is_done",
    "validate_shape",
    "rotate_counter_clockwise",
    "merge_row",
    "slide_row_left",
    "slide_left",
    "to_board",
    "to_grid",
]
