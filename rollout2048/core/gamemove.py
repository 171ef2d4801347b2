"""
Swipe moves for the 2048 game: direction to lane mapping, sliding and merging of tiles,
and detection of legal moves.
"""

from enum import IntEnum

from numpy import array, intp, ndarray

from rollout2048.core.grid import SIZE, Grid


class Direction(IntEnum):
    """The four swipe directions, in the order the evaluator tries them."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def cell_index(direction: Direction, lane: int, offset: int) -> int:
    """
    Map a position inside a lane to a linear cell index.

    Parameters
    ----------
    direction : Direction
        Direction of the swipe.
    lane : int
        Row (LEFT, RIGHT) or column (UP, DOWN) being traversed.
    offset : int
        Distance from the leading edge, i.e. the side tiles move towards.

    Returns
    -------
    int
        Linear index ``row * 4 + column`` of the cell.
    """
    if direction == Direction.LEFT:
        return lane * SIZE + offset
    if direction == Direction.RIGHT:
        return lane * SIZE + SIZE - 1 - offset
    if direction == Direction.UP:
        return offset * SIZE + lane
    return (SIZE - 1 - offset) * SIZE + lane


# ##>: Lane tables derived once from cell_index, LANES[direction][lane] lists the lane's cells from the leading edge.
LANES: dict[Direction, ndarray] = {
    direction: array(
        [[cell_index(direction, lane, offset) for offset in range(SIZE)] for lane in range(SIZE)], dtype=intp
    )
    for direction in Direction
}


def merge_lane(lane: list[int]) -> tuple[int, bool]:
    """
    Slide and merge one lane towards its leading edge, in place.

    Parameters
    ----------
    lane : list[int]
        Cell values ordered from the leading edge. **Modified in-place.**

    Returns
    -------
    score : int
        Sum of the tiles created by merges: merging two 2s scores 4, the value of the new tile.
    moved : bool
        Whether any tile changed position.

    Notes
    -----
    - ``edge`` is the first position that can still receive a merge. It moves past every
      merged destination, so a tile takes part in at most one merge per swipe.
    - Merges happen from the leading edge inwards: ``[2, 2, 2, 0]`` gives ``[4, 2, 0, 0]``.
    """
    edge = 0
    score = 0
    moved = False

    for j in range(len(lane)):
        value = lane[j]
        if value == 0:
            continue

        # ##: Find the destination, looking back for the nearest tile not yet settled.
        target = edge
        for k in range(j - 1, edge - 1, -1):
            neighbour = lane[k]
            if neighbour == 0:
                continue
            if neighbour == value:
                edge = k + 1
                target = k
            else:
                target = k + 1
            break

        if target != j:
            lane[j] = 0
            if lane[target]:
                score += lane[target] + value
            lane[target] += value
            moved = True

    return score, moved


def swipe(grid: Grid, direction: Direction) -> int | None:
    """
    Apply a swipe to the grid.

    Parameters
    ----------
    grid : Grid
        The grid to move. **Modified in-place.**
    direction : Direction
        Direction of the swipe.

    Returns
    -------
    int or None
        The score gained by merges, or None if no tile moved (illegal move).
    """
    cells = grid.cells
    score = 0
    moved = False

    for indices in LANES[direction]:
        lane = cells[indices].tolist()
        lane_score, lane_moved = merge_lane(lane)
        if lane_moved:
            cells[indices] = lane
            score += lane_score
            moved = True

    return score if moved else None


def can_swipe(grid: Grid, direction: Direction) -> bool:
    """
    Check whether a swipe would change the grid, without moving any tile.

    Parameters
    ----------
    grid : Grid
        The grid to inspect.
    direction : Direction
        Direction of the swipe.

    Returns
    -------
    bool
        True if ``swipe(grid, direction)`` would return a score.

    Notes
    -----
    Lanes are read through ``LANES``, so each pair ``(leading, trailing)`` holds neighbours
    along the swipe with ``leading`` closer to the edge. The swipe changes the lane when a
    tile trails an empty cell, or when two neighbours hold the same value.
    """
    lanes = grid.cells[LANES[direction]]
    leading, trailing = lanes[:, :-1], lanes[:, 1:]
    can_slide = (leading == 0) & (trailing != 0)
    can_merge = (leading != 0) & (leading == trailing)
    return bool(can_slide.any() or can_merge.any())


def legal_moves(grid: Grid) -> list[Direction]:
    """Directions whose swipe would change the grid, in evaluation order."""
    return [direction for direction in Direction if can_swipe(grid, direction)]


def is_terminal(grid: Grid) -> bool:
    """True when no swipe can change the grid."""
    return not legal_moves(grid)
