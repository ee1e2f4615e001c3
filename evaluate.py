# -*- coding: utf-8 -*-
"""
Play games with random legal moves and count the final maximum tiles.
"""
import logging
from collections import Counter
from typing import Dict

from numpy.random import Generator, SeedSequence, default_rng
from tqdm import trange

from slidemerge.core import legal_moves
from slidemerge.envs import TwentyFortyEight
from slidemerge.game import GameConfig


def random_streams(seed: int | None = None) -> tuple[Generator, SeedSequence]:
    """
    Split a seed into independent streams for the move choices and for the tile spawns.

    Parameters
    ----------
    seed : int, optional
        Random number generator seed for reproducibility.

    Returns
    -------
    tuple[Generator, SeedSequence]
        The generator choosing the moves and the seed of the game.
    """
    move_seed, game_seed = SeedSequence(seed).spawn(2)
    return default_rng(move_seed), game_seed


def evaluate(length: int = 10, target_tile: int = 2048, seed: int | None = None) -> Dict[int, int]:
    """
    Play random games until no move is left or the target tile is reached.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    target_tile : int, optional
        The tile that ends a game (default is 2048).
    seed : int, optional
        Random number generator seed for reproducibility.

    Returns
    -------
    Dict[int, int]
        How many games ended with each maximum tile.
    """
    rng, game_seed = random_streams(seed)
    env = TwentyFortyEight(config=GameConfig(target_tile=target_tile), seed=game_seed)
    score = []

    with trange(length) as period:
        for num in period:
            env.reset()
            done = False

            # ##: Play a game.
            while not done:
                moves = legal_moves(env.board)
                if not moves:
                    break
                _, _, done = env.step(moves[rng.integers(len(moves))])

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=env.score)

            # ##: Save max cells.
            score.append(max(cell for row in env.board for cell in row if cell is not None))

    # ##: Final log.
    frequency = Counter(score)
    return dict(frequency)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--target", type=int, default=2048)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)

    result = evaluate(length=args.games, target_tile=args.target, seed=args.seed)
    print(f"Random play over {args.games} games, max tiles: {result}")
