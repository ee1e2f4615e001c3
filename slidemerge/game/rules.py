"""
Game rules applied around a move: tile spawning, target detection and score.
"""

import logging

from numpy.random import Generator

from slidemerge.core.gameboard import EMPTY, Cell, Grid

logger = logging.getLogger(__name__)

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def create_empty_grid(rows: int, columns: int) -> list[list[Cell]]:
    """Create a board of the given size with only empty cells."""
    return [[EMPTY] * columns for _ in range(rows)]


def empty_cells(grid: Grid) -> list[tuple[int, int]]:
    """
    List the positions of the empty cells.

    Parameters
    ----------
    grid : Grid
        The current game board.

    Returns
    -------
    list[tuple[int, int]]
        The (row, column) of each empty cell, in reading order.
    """
    return [(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell is EMPTY]


def spawn_tile(grid: Grid, rng: Generator, probabilities: dict[int, float] | None = None) -> list[list[Cell]]:
    """
    Place a new tile on a random empty cell.

    Parameters
    ----------
    grid : Grid
        The current game board. It is not modified.
    rng : Generator
        Random number generator used to pick the cell and the tile.
    probabilities : dict[int, float], optional
        Probability of each tile value, by default ``TILE_SPAWN_PROBS``.

    Returns
    -------
    list[list[Cell]]
        A new board with one more tile, or an unchanged copy if the board is full.

    Notes
    -----
    - The cell is chosen uniformly among the empty cells.
    """
    probabilities = probabilities or TILE_SPAWN_PROBS
    board = [list(row) for row in grid]

    # ##: Only if there are still available places.
    available = empty_cells(board)
    if not available:
        logger.debug('No empty cell left, no tile spawned')
        return board

    i, j = available[rng.integers(len(available))]
    board[i][j] = int(rng.choice(list(probabilities), p=list(probabilities.values())))
    return board


def has_reached_target(grid: Grid, target: int) -> bool:
    """Check if any tile is at least the target value."""
    return any(cell is not EMPTY and cell >= target for row in grid for cell in row)


def grid_sum(grid: Grid) -> int:
    """Sum the values of all the tiles of the board."""
    return sum(cell for row in grid for cell in row if cell is not EMPTY)
