"""
Move evaluation by Monte Carlo rollouts.

Every legal direction is applied to a copy of the grid and scored by running a fixed number
of random playouts from the resulting position. The direction with the highest accumulated
score is chosen.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass

from numpy.random import Generator

from rollout2048.core.gamemove import Direction, legal_moves, swipe
from rollout2048.core.grid import Grid

from .rollout import rollout

# ##>: Module logger.
_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveEvaluation:
    """
    Outcome of the rollouts run for one direction.

    Attributes
    ----------
    direction : Direction
        The evaluated direction.
    base_score : int
        Score of the move itself.
    total : int
        Sum over trials of ``base_score + rollout score``.
    trials : int
        Number of rollouts.
    """

    direction: Direction
    base_score: int
    total: int
    trials: int

    @property
    def mean(self) -> float:
        """Expected score of the direction: the total divided by the number of trials."""
        return self.total / self.trials


def evaluate_direction(
    grid: Grid, direction: Direction, rng: Generator, trials_per_move: int
) -> MoveEvaluation | None:
    """
    Score one direction with random rollouts.

    Parameters
    ----------
    grid : Grid
        Current position. Left untouched.
    direction : Direction
        Direction to evaluate.
    rng : Generator
        Source of randomness for the rollouts.
    trials_per_move : int
        Number of rollouts.

    Returns
    -------
    MoveEvaluation or None
        The evaluation, or None if the direction does not change the grid.
    """
    after = grid.clone()
    base_score = swipe(after, direction)
    if base_score is None:
        return None

    total = 0
    for _ in range(trials_per_move):
        total += base_score + rollout(after.clone(), rng)
    return MoveEvaluation(direction=direction, base_score=base_score, total=total, trials=trials_per_move)


def _evaluate_direction_worker(args: tuple) -> MoveEvaluation | None:
    """Process-pool entry point, the grid travels as its cell vector."""
    cells, direction, rng, trials_per_move = args
    return evaluate_direction(Grid(cells), direction, rng, trials_per_move)


def _evaluate_parallel(
    grid: Grid, directions: list[Direction], rng: Generator, trials_per_move: int, num_workers: int
) -> list[MoveEvaluation | None]:
    # ##>: One independent child generator per direction, workers never share a stream.
    children = rng.spawn(len(directions))
    worker_args = [
        (grid.cells.copy(), direction, child, trials_per_move) for direction, child in zip(directions, children)
    ]
    with ProcessPoolExecutor(max_workers=num_workers) as executor:
        return list(executor.map(_evaluate_direction_worker, worker_args))


def evaluate_moves(
    grid: Grid, rng: Generator, trials_per_move: int, num_workers: int = 1
) -> list[MoveEvaluation]:
    """
    Evaluate every legal direction.

    Parameters
    ----------
    grid : Grid
        Current position. Left untouched.
    rng : Generator
        Source of randomness.
    trials_per_move : int
        Rollouts per legal direction.
    num_workers : int, optional
        Processes used for the evaluation (default is 1, no process pool).

    Returns
    -------
    list[MoveEvaluation]
        Evaluations of the legal directions, in the order UP, DOWN, LEFT, RIGHT.

    Notes
    -----
    - Sequential evaluation draws every value from ``rng`` itself.
    - Parallel evaluation spawns one child generator per legal direction from ``rng``, so results
      are reproducible for a seeded generator but differ from the sequential ones.
    """
    # ##: Directions that cannot change the grid are never cloned nor sampled.
    directions = legal_moves(grid)
    if num_workers > 1 and len(directions) > 1:
        evaluations = _evaluate_parallel(grid, directions, rng, trials_per_move, num_workers)
    else:
        evaluations = [evaluate_direction(grid, direction, rng, trials_per_move) for direction in directions]

    legal = [evaluation for evaluation in evaluations if evaluation is not None]
    for evaluation in legal:
        _logger.debug(
            '%s: total=%d mean=%.1f base=%d',
            evaluation.direction.name,
            evaluation.total,
            evaluation.mean,
            evaluation.base_score,
        )
    return legal


def best_move(grid: Grid, rng: Generator, trials_per_move: int, num_workers: int = 1) -> Direction | None:
    """
    Choose the direction with the highest accumulated rollout score.

    Parameters
    ----------
    grid : Grid
        Current position. Left untouched.
    rng : Generator
        Source of randomness.
    trials_per_move : int
        Rollouts per legal direction.
    num_workers : int, optional
        Processes used for the evaluation (default is 1).

    Returns
    -------
    Direction or None
        The best direction, or None if no direction is legal.

    Notes
    -----
    Directions are compared on the summed totals. Every direction runs the same number
    of trials, so this ranks them exactly like the means would. On a tie the earlier
    direction in the order UP, DOWN, LEFT, RIGHT is kept.
    """
    best_total = -1
    best_direction = None
    for evaluation in evaluate_moves(grid, rng, trials_per_move, num_workers):
        if evaluation.total > best_total:
            best_total = evaluation.total
            best_direction = evaluation.direction
    return best_direction
