"""
Tile spawning for the 2048 game.
"""

from numpy.random import Generator

from rollout2048.core.grid import Grid

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def spawn(grid: Grid, rng: Generator) -> int:
    """
    Place one new tile in a uniformly chosen empty cell.

    Parameters
    ----------
    grid : Grid
        The grid receiving the tile. **Modified in-place.**
    rng : Generator
        Source of randomness. Two draws are taken: the cell, then the tile value.

    Returns
    -------
    int
        Linear index of the cell that received the tile.

    Raises
    ------
    ValueError
        If the grid has no empty cell.
    """
    empty = grid.empty_cells()
    if len(empty) == 0:
        raise ValueError('cannot spawn a tile on a full grid')

    index = int(empty[rng.integers(len(empty))])
    grid.cells[index] = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4
    return index
