# -*- coding: utf-8 -*-
"""
This module provides the rules applied around a move in a 2048 game.

It includes the game configuration, the spawning of new tiles, the detection of the target tile, the score, the
saved game state and the keyboard mapping.
"""

from .config import STORAGE_KEY, GameConfig
from .keys import KEY_BINDINGS, key_to_direction
from .rules import (
    TILE_SPAWN_PROBS,
    create_empty_grid,
    empty_cells,
    grid_sum,
    has_reached_target,
    spawn_tile,
)
from .state import GameState

__all__ = [
    "GameConfig",
    "GameState",
    "STORAGE_KEY",
    "TILE_SPAWN_PROBS",
    "KEY_BINDINGS",
    "key_to_direction",
    "create_empty_grid",
    "empty_cells",
    "spawn_tile",
    "has_reached_target",
    "grid_sum",
]
