"""
Game move utilities for the 2048 game, providing the move of a whole board and the legal moves of a board.
"""

import logging
from enum import Enum
from typing import NamedTuple

from slidemerge.core.gameboard import (
    Cell,
    Grid,
    rotate_counter_clockwise,
    slide_left,
    to_board,
    to_grid,
)

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Direction in which the tiles are pushed."""

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'


# ##>: Counter-clockwise rotation that turns each direction into a move to the left.
ROTATE_DEGREES: dict[Direction, int] = {
    Direction.LEFT: 0,
    Direction.UP: 90,
    Direction.RIGHT: 180,
    Direction.DOWN: 270,
}

# ##>: Counter-clockwise rotation that restores the original orientation.
REVERT_DEGREES: dict[Direction, int] = {
    Direction.LEFT: 0,
    Direction.UP: 270,
    Direction.RIGHT: 180,
    Direction.DOWN: 90,
}


class MoveResult(NamedTuple):
    """Board after a move and whether any tile moved or merged."""

    result: list[list[Cell]]
    is_moved: bool


class ScoredMove(NamedTuple):
    """Board after a move, whether it changed and the sum of the tiles created by the merges."""

    result: list[list[Cell]]
    is_moved: bool
    score: int


def move(grid: Grid, direction: Direction | str) -> MoveResult:
    """
    Move the board in a direction following the 2048 rules.

    Parameters
    ----------
    grid : Grid
        The current game board. Empty cells are ``None``.
    direction : Direction | str
        The direction of the move, as a ``Direction`` or one of "up", "down", "left", "right".

    Returns
    -------
    MoveResult
        The new board, in the same orientation as the input, and whether it differs from the input.

    Raises
    ------
    InvalidShapeError
        If the rows of the grid do not all have the same length.
    ValueError
        If the direction is unknown.

    Notes
    -----
    - The board is rotated so that the direction becomes "left", every row is slid to the left,
      then the board is rotated back.
    - The input grid is never modified; the result is always a new list of lists.
    """
    result, is_moved, _ = scored_move(grid, direction)
    return MoveResult(result=result, is_moved=is_moved)


def scored_move(grid: Grid, direction: Direction | str) -> ScoredMove:
    """
    Move the board in a direction and compute the score of the move.

    Parameters
    ----------
    grid : Grid
        The current game board. Empty cells are ``None``.
    direction : Direction | str
        The direction of the move.

    Returns
    -------
    ScoredMove
        The new board, whether it differs from the input and the sum of the tiles created by the merges.

    Raises
    ------
    InvalidShapeError
        If the rows of the grid do not all have the same length.
    ValueError
        If the direction is unknown.
    """
    direction = Direction(direction)
    board = to_board(grid)

    rotated = rotate_counter_clockwise(board, ROTATE_DEGREES[direction])
    updated, is_moved, score = slide_left(rotated)
    result = rotate_counter_clockwise(updated, REVERT_DEGREES[direction])

    logger.debug('Move %s on %dx%d board, moved=%s, score=%d', direction.value, *board.shape, is_moved, score)
    return ScoredMove(result=to_grid(result), is_moved=is_moved, score=score)


def legal_moves(grid: Grid) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    grid : Grid
        The current game board.

    Returns
    -------
    list[Direction]
        The legal directions, in the order left, up, right, down.
    """
    return [direction for direction in Direction if move(grid, direction).is_moved]


def is_done(grid: Grid) -> bool:
    """
    Check if no move can change the board anymore.

    Parameters
    ----------
    grid : Grid
        The current game board.

    Returns
    -------
    bool
        True if the board is stuck in every direction, False otherwise.
    """
    return not legal_moves(grid)
