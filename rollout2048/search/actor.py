# -*- coding: utf-8 -*-
"""
Monte Carlo rollout agent for 2048.
"""
from numpy.random import Generator

from rollout2048.config import SearchConfig
from rollout2048.core.gamemove import Direction
from rollout2048.core.grid import Grid

from .evaluator import best_move


class MonteCarloAgent:
    """
    An agent that picks its moves with Monte Carlo rollouts.

    For each legal direction the agent plays ``trials_per_move`` random games from the
    resulting position and keeps the direction with the highest accumulated score.

    Methods
    -------
    choose_action(grid: Grid, rng: Generator)
        Choose the best direction for the given grid.
    """

    def __init__(self, config: SearchConfig | None = None):
        """
        Initialize the Monte Carlo agent.

        Parameters
        ----------
        config : SearchConfig, optional
            Search parameters (default is ``SearchConfig()``).
        """
        self._config = config or SearchConfig()

    @property
    def config(self) -> SearchConfig:
        """Search parameters used by the agent."""
        return self._config

    def choose_action(self, grid: Grid, rng: Generator) -> Direction | None:
        """
        Choose the best direction using Monte Carlo rollouts.

        Parameters
        ----------
        grid : Grid
            The current position. Left untouched.
        rng : Generator
            Source of randomness for the rollouts.

        Returns
        -------
        Direction or None
            The chosen direction, or None if the game is over.
        """
        return best_move(
            grid, rng, trials_per_move=self._config.trials_per_move, num_workers=self._config.num_workers
        )
