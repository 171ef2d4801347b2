"""
Tests for the random playouts (random move selection, playout loop, evaluation trial).
"""

from unittest import TestCase, main

from numpy.random import default_rng

from rollout2048.core.gamemove import is_terminal
from rollout2048.core.grid import Grid
from rollout2048.search.rollout import random_move, rollout, run_playout

TERMINAL = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]


class TestRandomMove(TestCase):
    """Test the random move of the playout agent."""

    def test_terminal_grid(self):
        """No move is played on a terminal grid."""
        grid = Grid.from_rows(TERMINAL)
        self.assertIsNone(random_move(grid, default_rng(0)))
        self.assertEqual(grid, Grid.from_rows(TERMINAL))

    def test_any_permutation_plays_the_merge(self):
        """Whatever the permutation, the move played merges the two 4s."""
        rows = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 4]]
        for seed in range(10):
            grid = Grid.from_rows(rows)
            self.assertEqual(random_move(grid, default_rng(seed)), 8)
            self.assertEqual(grid.count_empty(), 1)

    def test_move_changes_grid(self):
        """A played move always changes the grid."""
        rng = default_rng(5)
        grid = Grid.from_rows([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 4, 0], [0, 0, 0, 0]])
        before = grid.clone()
        self.assertEqual(random_move(grid, rng), 0)
        self.assertNotEqual(grid, before)


class TestPlayout(TestCase):
    """Test the playout loop."""

    def test_playout_ends_on_terminal_grid(self):
        """The playout stops only when no move is left."""
        grid = Grid.from_rows([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 2]])
        score = run_playout(grid, default_rng(11))

        self.assertTrue(is_terminal(grid))
        self.assertGreater(score, 0)
        self.assertEqual(score % 2, 0)

    def test_playout_from_terminal_grid(self):
        """A finished game scores nothing more."""
        self.assertEqual(run_playout(Grid.from_rows(TERMINAL), default_rng(0)), 0)

    def test_playout_is_reproducible(self):
        """The same generator state gives the same playout."""
        start = Grid.from_rows([[2, 2, 0, 0], [0, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        first, second = start.clone(), start.clone()
        self.assertEqual(run_playout(first, default_rng(42)), run_playout(second, default_rng(42)))
        self.assertEqual(first, second)


class TestRollout(TestCase):
    """Test the evaluation trial."""

    def test_rollout_spawns_before_playing(self):
        """The last empty cell is filled before the playout starts."""
        grid = Grid.from_rows([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 16], [4, 2, 8, 0]])

        # ##>: Neither a 2 nor a 4 can merge with the 8 or the 16 next to the empty cell.
        score = rollout(grid, default_rng(0))

        self.assertEqual(grid.count_empty(), 0)
        self.assertIn(grid.get(3, 3), (2, 4))
        self.assertEqual(score, 0)

    def test_rollout_on_full_grid(self):
        """A full grid is played out without spawning."""
        grid = Grid.from_rows([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 4]])
        self.assertGreaterEqual(rollout(grid, default_rng(0)), 8)


if __name__ == '__main__':
    main()
