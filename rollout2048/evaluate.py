# -*- coding: utf-8 -*-
"""
Evaluate the Monte Carlo rollout agent over several games.
"""
import logging
from collections import Counter
from typing import Dict

from numpy.random import SeedSequence
from tqdm import trange

from rollout2048.config import SearchConfig
from rollout2048.envs import TwentyFortyEight


def evaluate(config: SearchConfig, length: int = 10, seed: int | None = None) -> Dict[int, int]:
    """
    Play several games and count the highest tile reached in each.

    Parameters
    ----------
    config : SearchConfig
        Search parameters of the agent.
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Root seed; every game gets its own derived seed.

    Returns
    -------
    Dict[int, int]
        Frequency of each highest tile.
    """
    seeds = SeedSequence(seed).spawn(length)
    score = []

    with trange(length) as period:
        for num in period:
            game = TwentyFortyEight(config=config, seed=seeds[num])
            period.set_description(f'Evaluation: {num + 1}')

            # ##: Play a game.
            while not game.finished:
                game.step()
                period.set_postfix(score=game.score, max=game.grid.max_tile())

            # ##: Save max cells.
            score.append(game.grid.max_tile())

    return dict(Counter(score))


def main(argv: list[str] | None = None) -> None:
    from argparse import ArgumentParser

    parser = ArgumentParser(description='Evaluate the Monte Carlo rollout agent')
    parser.add_argument('--games', type=int, default=10, help='Number of games to play')
    parser.add_argument('--trials', type=int, default=500, help='Rollouts per legal direction')
    parser.add_argument('--workers', type=int, default=1, help='Processes used to evaluate directions')
    parser.add_argument('--seed', type=int, default=None, help='Root seed for reproducible runs')
    parser.add_argument('--verbose', action='store_true', help='Log every move')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    config = SearchConfig(trials_per_move=args.trials, num_workers=args.workers)
    result = evaluate(config, length=args.games, seed=args.seed)
    for tile, count in sorted(result.items()):
        print(f'{tile}\t{count}')


if __name__ == '__main__':
    main()
