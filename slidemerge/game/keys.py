"""Keyboard mapping of the game."""

from slidemerge.core.gamemove import Direction

# ##: Matplotlib key names and browser key names.
KEY_BINDINGS: dict[str, Direction] = {
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'ArrowUp': Direction.UP,
    'ArrowRight': Direction.RIGHT,
    'ArrowDown': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
}


def key_to_direction(key: str | None) -> Direction | None:
    """Return the direction bound to a key, or None if the key is not an arrow."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)
