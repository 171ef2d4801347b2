"""
Tests for MonteCarloAgent and its configuration.
"""

from unittest import TestCase, main

from numpy.random import default_rng

from rollout2048.config import SearchConfig
from rollout2048.core.gamemove import Direction, legal_moves
from rollout2048.core.grid import Grid
from rollout2048.search.actor import MonteCarloAgent


class TestSearchConfig(TestCase):
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """500 trials per move in a single process."""
        config = SearchConfig()
        self.assertEqual(config.trials_per_move, 500)
        self.assertEqual(config.num_workers, 1)

    def test_invalid_values(self):
        """Non-positive values are rejected."""
        with self.assertRaises(ValueError):
            SearchConfig(trials_per_move=0)
        with self.assertRaises(ValueError):
            SearchConfig(num_workers=0)


class TestMonteCarloAgent(TestCase):
    """Test MonteCarloAgent action selection."""

    def setUp(self):
        """Create agent with a small trial count for fast tests."""
        self.agent = MonteCarloAgent(SearchConfig(trials_per_move=5))

    def test_default_config(self):
        """Without configuration the agent uses the defaults."""
        self.assertEqual(MonteCarloAgent().config, SearchConfig())

    def test_choose_action_returns_legal_direction(self):
        """Agent returns one of the legal directions."""
        grid = Grid.from_rows([[2, 0, 0, 0], [0, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])

        action = self.agent.choose_action(grid, default_rng(0))

        self.assertIsInstance(action, Direction)
        self.assertIn(action, legal_moves(grid))

    def test_choose_action_game_over(self):
        """Agent returns None when no move is left."""
        grid = Grid.from_rows([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertIsNone(self.agent.choose_action(grid, default_rng(0)))


if __name__ == '__main__':
    main()
