"""
Random playouts for the 2048 game.

A playout continues a game with an uninformed agent: at every turn the four directions are
tried in a random order and the first one that changes the grid is played, then a tile is
spawned. The total score collected until no move remains is the signal used to rank moves.
"""

from numpy.random import Generator

from rollout2048.core.gameboard import spawn
from rollout2048.core.gamemove import Direction, swipe
from rollout2048.core.grid import Grid

_DIRECTIONS = tuple(Direction)


def random_move(grid: Grid, rng: Generator) -> int | None:
    """
    Play the first legal direction of a random permutation.

    Parameters
    ----------
    grid : Grid
        The grid to move. **Modified in-place.**
    rng : Generator
        Source of randomness for the permutation.

    Returns
    -------
    int or None
        Score of the move played, or None if no direction is legal.
    """
    for position in rng.permutation(len(_DIRECTIONS)):
        score = swipe(grid, _DIRECTIONS[position])
        if score is not None:
            return score
    return None


def run_playout(grid: Grid, rng: Generator) -> int:
    """
    Play random moves until the game is over.

    Parameters
    ----------
    grid : Grid
        Starting position. **Consumed:** the grid holds the final position afterwards.
    rng : Generator
        Source of randomness for moves and spawns.

    Returns
    -------
    int
        Total score of the moves played.
    """
    total_score = 0
    while True:
        score = random_move(grid, rng)
        if score is None:
            return total_score
        total_score += score

        # ##: A full grid after a move means the game is over.
        if grid.count_empty() == 0:
            return total_score
        spawn(grid, rng)


def rollout(grid: Grid, rng: Generator) -> int:
    """
    Run one evaluation trial from the position right after a move.

    The tile the game adds after every move is spawned first, then the game is played out.

    Parameters
    ----------
    grid : Grid
        Position after a move, before its spawn. **Consumed.**
    rng : Generator
        Source of randomness.

    Returns
    -------
    int
        Total score of the playout.
    """
    if grid.count_empty():
        spawn(grid, rng)
    return run_playout(grid, rng)
