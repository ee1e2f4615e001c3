"""
JSON storage of the game state.

Each state is written to ``<directory>/<key>.json``. Storage problems are logged and never interrupt the game:
a failed save keeps the game running, a failed load starts a new game.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from slidemerge.game.config import STORAGE_KEY
from slidemerge.game.state import GameState

logger = logging.getLogger(__name__)


class JsonStateStore:
    """
    Save and restore a game state as a JSON file.

    Parameters
    ----------
    directory : Path
        Directory holding the state files. Created on first save.
    key : str
        Identifier of the stored state.
    """

    def __init__(self, directory: Path | str, key: str = STORAGE_KEY):
        self.directory = Path(directory)
        self.key = key

    @property
    def path(self) -> Path:
        """Path of the file holding the state."""
        return self.directory / f'{self.key}.json'

    def save(self, state: GameState) -> bool:
        """
        Write the state to storage.

        Returns
        -------
        bool
            True if the state was written, False if storage is unavailable.
        """
        temporary = self.path.with_suffix('.tmp')
        try:
            self.directory.mkdir(parents=True, exist_ok=True)

            # ##: The previous save stays intact until the new one is complete.
            temporary.write_text(json.dumps(state.to_dict()), encoding='utf-8')
            temporary.replace(self.path)
        except OSError as exc:
            temporary.unlink(missing_ok=True)
            logger.warning('Failed to save game state to %s: %s', self.path, exc)
            return False
        logger.debug('Saved game state to %s', self.path)
        return True

    def load(self) -> GameState | None:
        """
        Read the state from storage.

        Returns
        -------
        GameState | None
            The stored state, or None if nothing is stored or the stored state cannot be read.
        """
        if not self.path.exists():
            return None

        try:
            payload = json.loads(self.path.read_text(encoding='utf-8'))
            return GameState.from_dict(payload)
        except (OSError, ValueError) as exc:
            logger.warning('Ignoring unreadable game state in %s: %s', self.path, exc)
            return None

    def clear(self) -> None:
        """Remove the stored state, if any."""
        self.path.unlink(missing_ok=True)
