"""
Snapshot of a game, as saved to and restored from storage.
"""

from dataclasses import dataclass, field
from typing import Any

from slidemerge.core.gameboard import Cell, InvalidShapeError, validate_shape


@dataclass
class GameState:
    """
    State of a game: the board, the score and whether the target tile has been reached.
    """

    grid: list[list[Cell]] = field(default_factory=list)
    score: int = 0
    finished: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert the state into plain JSON types. Empty cells become ``None``."""
        return {
            'grid': [[None if cell is None else int(cell) for cell in row] for row in self.grid],
            'score': int(self.score),
            'finished': bool(self.finished),
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> 'GameState':
        """
        Build a state from a decoded JSON payload.

        Raises
        ------
        ValueError
            If a field is missing or has the wrong type.
        InvalidShapeError
            If the stored grid is not rectangular.
        """
        try:
            grid = payload['grid']
            score = payload['score']
            finished = payload['finished']
        except (KeyError, TypeError) as exc:
            raise ValueError(f'Malformed game state: {exc!r}') from exc

        if not isinstance(grid, list) or not all(isinstance(row, list) for row in grid):
            raise ValueError('Malformed game state: grid must be a list of rows')
        if not validate_shape(grid):
            raise InvalidShapeError('Malformed game state: grid is not rectangular')
        for row in grid:
            for cell in row:
                if cell is not None and (isinstance(cell, bool) or not isinstance(cell, int)):
                    raise ValueError(f'Malformed game state: invalid cell {cell!r}')
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValueError(f'Malformed game state: invalid score {score!r}')
        if not isinstance(finished, bool):
            raise ValueError(f'Malformed game state: invalid finished flag {finished!r}')

        return cls(grid=[list(row) for row in grid], score=score, finished=finished)
