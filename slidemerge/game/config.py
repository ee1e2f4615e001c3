"""
Configuration of a 2048 game.
"""

from dataclasses import dataclass, field
from pathlib import Path

from slidemerge.game.rules import TILE_SPAWN_PROBS

# ##: Key under which the game state is stored.
STORAGE_KEY = 'hw-2048-state-v1'


@dataclass
class GameConfig:
    """
    Configuration of a 2048 game.

    The board size is fixed for a game; the move engine itself works on any rectangular board.
    """

    # ##>: Board parameters.
    rows: int = 4
    columns: int = 4

    # ##>: The game ends as soon as a tile reaches this value.
    target_tile: int = 128

    # ##>: Tile spawn probabilities.
    tile_spawn_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))
    initial_tiles: int = 2

    # ##>: Persistence.
    storage_dir: Path = field(default_factory=lambda: Path.home() / '.slidemerge')
    storage_key: str = STORAGE_KEY
