"""Persistence of the game state."""

from .store import JsonStateStore

__all__ = ["JsonStateStore"]
