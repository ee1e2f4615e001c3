# -*- coding: utf-8 -*-
"""
Move engine of the 2048 game, with the game rules around it.
"""

from .core import Direction, InvalidShapeError, MoveResult, move

__all__ = ["Direction", "InvalidShapeError", "MoveResult", "move"]
