# -*- coding: utf-8 -*-
"""
This module provides the graphical window used to play the game.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
