# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `TwentyFortyEight` class, which keeps the state of a game and applies the moves to it.
"""

from .twentyfortyeight import TwentyFortyEight

__all__ = ["TwentyFortyEight"]
