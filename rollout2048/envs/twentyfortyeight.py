"""2048 game driven by the Monte Carlo rollout agent."""

import logging
from dataclasses import dataclass

from numpy.random import SeedSequence, default_rng

from rollout2048.config import SearchConfig
from rollout2048.core.gameboard import spawn
from rollout2048.core.gamemove import Direction, swipe
from rollout2048.core.grid import Grid
from rollout2048.search.actor import MonteCarloAgent

# ##>: Module logger.
_logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Summary of a finished game."""

    score: int
    max_tile: int
    moves: int


class TwentyFortyEight:
    """
    2048 game played by a Monte Carlo agent.

    The game owns the canonical grid and the random generator used for every spawn and every
    rollout. Each turn spawns a tile, asks the agent for a direction and commits it.
    """

    def __init__(self, config: SearchConfig | None = None, seed: int | SeedSequence | None = None):
        """
        Initialize the game.

        Parameters
        ----------
        config : SearchConfig, optional
            Search parameters of the agent (default is ``SearchConfig()``).
        seed : int or SeedSequence, optional
            Seed of the random generator, for reproducible games.
        """
        self._agent = MonteCarloAgent(config)
        self._rng = default_rng(seed)
        self.grid = Grid()
        self.score = 0
        self.moves = 0
        self.finished = False

        self.reset()

    def reset(self) -> Grid:
        """
        Empty the grid and place the first tile.

        Returns
        -------
        Grid
            The new grid. The first turn adds a second tile before moving.
        """
        self.grid = Grid()
        spawn(self.grid, self._rng)
        self.score = 0
        self.moves = 0
        self.finished = False
        return self.grid

    def step(self) -> tuple[Direction | None, int]:
        """
        Play one turn.

        Returns
        -------
        tuple[Direction | None, int]
            The direction played and the score it gained. The direction is None when the
            game is over, in which case the score is 0.
        """
        if self.finished:
            return None, 0

        spawn(self.grid, self._rng)
        direction = self._agent.choose_action(self.grid, self._rng)
        if direction is None:
            self.finished = True
            return None, 0

        score = swipe(self.grid, direction)
        self.score += score
        self.moves += 1
        _logger.debug('move %d: %s (+%d)\n%s', self.moves, direction.name, score, self.grid)
        return direction, score

    def play(self) -> GameResult:
        """
        Play turns until no move remains.

        Returns
        -------
        GameResult
            Final score, highest tile and number of moves.
        """
        while not self.finished:
            self.step()

        result = GameResult(score=self.score, max_tile=self.grid.max_tile(), moves=self.moves)
        _logger.info('game over after %d moves: score=%d max_tile=%d', result.moves, result.score, result.max_tile)
        return result
