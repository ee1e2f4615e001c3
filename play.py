# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from pathlib import Path
from typing import Any

from slidemerge.envs import TwentyFortyEight
from slidemerge.game import GameConfig, key_to_direction
from slidemerge.storage import JsonStateStore
from slidemerge.utils import WindowBoard


def redraw(envs: TwentyFortyEight, window: WindowBoard):
    """
    Redraw the game board.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment

    window: WindowBoard
        Class to draw the game board
    """
    window.show_image(envs.board, envs.score)
    window.show_overlay(envs.is_finished)


def reset(envs: TwentyFortyEight, window: WindowBoard):
    """
    Start a new game and redraw the game board.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment

    window: WindowBoard
        Class to draw the game board
    """
    envs.reset()
    redraw(envs, window)


def step(envs: TwentyFortyEight, window: WindowBoard, key: str):
    """
    Apply the move bound to a key.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment

    window: WindowBoard
        Class to draw the game board

    key: str
        Pressed key
    """
    direction = key_to_direction(key)
    if direction is None or envs.is_finished:
        return None

    _, reward, finished = envs.step(direction)
    print(f"reward={reward}")

    redraw(envs, window)
    if finished:
        print("target reached!")
    elif envs.is_over:
        print("no move left!")


def key_handler(envs: TwentyFortyEight, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key in ("backspace", "n"):
        reset(envs, window)
        return None

    step(envs, window, event.key)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--storage-dir", type=Path, default=None)
    parser.add_argument("--new-game", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = GameConfig()
    if args.storage_dir is not None:
        config.storage_dir = args.storage_dir

    env = TwentyFortyEight(config=config, store=JsonStateStore(config.storage_dir, config.storage_key))
    if args.new_game:
        env.reset()

    window_board = WindowBoard(title="2048 Game", rows=config.rows, columns=config.columns)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    redraw(env, window_board)

    # Blocking event loop
    window_board.show(block=True)
