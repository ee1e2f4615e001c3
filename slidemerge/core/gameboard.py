"""
Core functionality for moving the 2048 game board: shape validation, rotation and the slide-and-merge of rows.
"""

from typing import NamedTuple, Sequence

from numpy import empty, empty_like, ndarray, rot90

# ##>: Marker of an empty cell.
EMPTY = None

# ##>: Rotations supported by the board, in degrees counter-clockwise.
ROTATIONS = (0, 90, 180, 270)

Cell = int | None
Grid = Sequence[Sequence[Cell]]


class InvalidShapeError(ValueError):
    """Raised when the rows of a grid do not all have the same length."""


class RowSlide(NamedTuple):
    """Outcome of sliding a single row to the left."""

    row: list[Cell]
    changed: bool
    score: int = 0


def validate_shape(grid: Grid) -> bool:
    """
    Check that every row of the grid has the length of the first one.

    Parameters
    ----------
    grid : Grid
        The game board as a sequence of rows.

    Returns
    -------
    bool
        True if the grid is rectangular, False otherwise.

    Notes
    -----
    A grid without any row has no first row to compare with and is not considered valid.
    """
    if len(grid) == 0:
        return False
    first_length = len(grid[0])
    return all(len(row) == first_length for row in grid)


def to_board(grid: Grid) -> ndarray:
    """
    Copy a grid into a 2D object array.

    Parameters
    ----------
    grid : Grid
        The game board as a sequence of rows.

    Returns
    -------
    ndarray
        A fresh array of shape (rows, columns) holding the cells as they are.

    Raises
    ------
    InvalidShapeError
        If the rows of the grid do not all have the same length.
    """
    if not validate_shape(grid):
        raise InvalidShapeError(f'Grid is not rectangular, row lengths: {[len(row) for row in grid]}')

    # ##: Fill row by row so that empty markers stay objects.
    board = empty((len(grid), len(grid[0])), dtype=object)
    for index, row in enumerate(grid):
        board[index, :] = list(row)
    return board


def to_grid(board: ndarray) -> list[list[Cell]]:
    """Convert a board array back into nested lists of cells."""
    return [list(row) for row in board]


def rotate_counter_clockwise(board: ndarray, degree: int) -> ndarray:
    """
    Rotate the board counter-clockwise by a multiple of 90 degrees.

    Parameters
    ----------
    board : ndarray
        The game board, of shape (rows, columns).
    degree : int
        The rotation, one of 0, 90, 180 or 270.

    Returns
    -------
    ndarray
        A new board. Its shape is (columns, rows) for 90 and 270 degrees, unchanged otherwise.

    Raises
    ------
    ValueError
        If the degree is not one of the supported rotations.
    """
    if degree not in ROTATIONS:
        raise ValueError(f'Unsupported rotation: {degree}, expected one of {ROTATIONS}')
    return rot90(board, k=degree // 90).copy()


def merge_row(row: Sequence[Cell]) -> tuple[list[Cell], int]:
    """
    Merge adjacent equal tiles of a row, ignoring empty cells.

    Parameters
    ----------
    row : Sequence[Cell]
        One row of the game board.

    Returns
    -------
    merged_row : list[Cell]
        The tiles after merging, without any empty cell.
    score : int
        The sum of the tiles created by the merges.

    Notes
    -----
    - Empty cells are skipped, so tiles separated only by empty cells become adjacent.
    - The scan keeps at most one pending tile. A tile equal to the pending one merges with it
      and clears the slot, so a merged tile never merges again during the same move.
    """
    merged: list[Cell] = []
    pending: Cell = EMPTY
    score = 0

    for cell in row:
        if cell is EMPTY:
            continue
        if pending is EMPTY:
            pending = cell
        elif cell == pending:
            merged.append(pending * 2)
            score += pending * 2
            pending = EMPTY
        else:
            merged.append(pending)
            pending = cell

    if pending is not EMPTY:
        merged.append(pending)

    return merged, score


def slide_row_left(row: Sequence[Cell]) -> RowSlide:
    """
    Slide a row to the left and merge adjacent equal tiles.

    Parameters
    ----------
    row : Sequence[Cell]
        One row of the game board.

    Returns
    -------
    RowSlide
        The new row, padded on the right with empty cells, whether any position changed and the score of the
        merges.

    Example
    -------
    >>> slide_row_left([2, 2, 2, 2])
    RowSlide(row=[4, 4, None, None], changed=True, score=8)
    """
    merged, score = merge_row(row)
    result = merged + [EMPTY] * (len(row) - len(merged))
    changed = any(before != after for before, after in zip(row, result))
    return RowSlide(row=result, changed=changed, score=score)


def slide_left(board: ndarray) -> tuple[ndarray, bool, int]:
    """
    Slide every row of the board to the left and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board, of shape (rows, columns).

    Returns
    -------
    updated_board : ndarray
        A new board after sliding and merging each row.
    moved : bool
        True if at least one row changed.
    score : int
        The total score obtained from all merges.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    """
    result = empty_like(board)
    moved = False
    score = 0

    for i, row in enumerate(board):
        slid = slide_row_left(list(row))
        result[i, :] = slid.row
        moved = moved or slid.changed
        score += slid.score

    return result, moved, score
