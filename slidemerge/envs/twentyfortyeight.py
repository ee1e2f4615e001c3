"""2048 game played move after move, with score, target tile and saved progress."""

import logging

from numpy.random import Generator, SeedSequence, default_rng

from slidemerge.core.gameboard import Cell
from slidemerge.core.gamemove import Direction, is_done, scored_move
from slidemerge.game.config import GameConfig
from slidemerge.game.rules import create_empty_grid, has_reached_target, spawn_tile
from slidemerge.game.state import GameState
from slidemerge.storage.store import JsonStateStore

logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    2048 game.

    This class keeps the state of one game (board, score and finished flag), applies moves to it, spawns new tiles
    and saves the state after every change when a store is given.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: JsonStateStore | None = None,
        seed: int | SeedSequence | None = None,
    ):
        """
        Initialize the game, resuming the stored game if there is one.

        Parameters
        ----------
        config : GameConfig, optional
            The game configuration (default is a 4x4 board with a target of 128).
        store : JsonStateStore, optional
            Where to save the game state. Without store, nothing is saved.
        seed : int | SeedSequence, optional
            Random number generator seed for reproducibility.
        """
        self.config = config or GameConfig()
        self._store = store
        self._rng: Generator = default_rng(seed)
        self._state = GameState()

        saved = store.load() if store is not None else None
        if saved is not None:
            logger.info('Resuming saved game, score %d', saved.score)
            self._state = saved
        else:
            self.reset()

    @property
    def board(self) -> list[list[Cell]]:
        """Copy of the current board."""
        return [list(row) for row in self._state.grid]

    @property
    def score(self) -> int:
        """Sum of the values of all the merges since the start of the game."""
        return self._state.score

    @property
    def is_finished(self) -> bool:
        """True once a tile has reached the target value."""
        return self._state.finished

    @property
    def is_over(self) -> bool:
        """True if no move can change the board anymore."""
        return is_done(self._state.grid)

    @property
    def state(self) -> GameState:
        """Snapshot of the current game state."""
        return GameState(grid=self.board, score=self.score, finished=self.is_finished)

    def reset(self) -> list[list[Cell]]:
        """
        Start a new game on an empty board with the initial tiles.

        Returns
        -------
        list[list[Cell]]
            The new game board.
        """
        grid = create_empty_grid(self.config.rows, self.config.columns)
        for _ in range(self.config.initial_tiles):
            grid = spawn_tile(grid, self._rng, self.config.tile_spawn_probs)

        self._state = GameState(grid=grid, score=0, finished=False)
        logger.info('New game on a %dx%d board', self.config.rows, self.config.columns)
        self._save()
        return self.board

    def step(self, direction: Direction | str) -> tuple[list[list[Cell]], int, bool]:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction | str
            The direction of the move.

        Returns
        -------
        tuple[list[list[Cell]], int, bool]
            A tuple containing:
            - The updated game board
            - The score gained by this move
            - Whether the game is finished

        Notes
        -----
        - Once the game is finished, moves are ignored.
        - A move that changes nothing is ignored: no tile is added and nothing is saved.
        - The score gained is the sum of the tiles created by the merges of this move.
        """
        if self.is_finished:
            return self.board, 0, True

        result, is_moved, reward = scored_move(self._state.grid, direction)
        if not is_moved:
            return self.board, 0, False

        grid = spawn_tile(result, self._rng, self.config.tile_spawn_probs)
        finished = has_reached_target(grid, self.config.target_tile)
        self._state = GameState(grid=grid, score=self._state.score + reward, finished=finished)

        if finished:
            logger.info('Target tile %d reached, score %d', self.config.target_tile, self._state.score)
        self._save()
        return self.board, reward, finished

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(f'Score: {self.score}')
        for row in self._state.grid:
            print(' \t'.join('.' if cell is None else str(cell) for cell in row))

    def _save(self) -> None:
        if self._store is not None:
            self._store.save(self._state)
