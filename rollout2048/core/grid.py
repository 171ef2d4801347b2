"""
The 4x4 grid holding the tiles of a 2048 game.
"""

from __future__ import annotations

from typing import Sequence

from numpy import array, count_nonzero, flatnonzero, int64, ndarray, zeros

# ##>: Board geometry, linear index = row * SIZE + column.
SIZE = 4
CELLS = SIZE * SIZE


def _check_coordinates(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise IndexError(f'cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid')


class Grid:
    """
    A 4x4 grid of tiles stored as a flat vector of 16 cells.

    A cell is either 0 (empty) or a power of two greater or equal to 2. The grid is
    mutated in place by moves and spawns; any hypothetical continuation works on a
    copy obtained with ``clone``.

    Parameters
    ----------
    cells : ndarray, optional
        Initial cell values in linear order. An empty grid is created when omitted.
    """

    __slots__ = ('cells',)

    def __init__(self, cells: ndarray | None = None):
        if cells is None:
            cells = zeros(CELLS, dtype=int64)
        self.cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """
        Build a grid from four rows of four values.

        Parameters
        ----------
        rows : Sequence[Sequence[int]]
            Cell values, row by row.

        Returns
        -------
        Grid
            A new grid owning a copy of the values.

        Raises
        ------
        ValueError
            If the rows do not describe a 4x4 board.
        """
        board = array(rows, dtype=int64)
        if board.shape != (SIZE, SIZE):
            raise ValueError(f'expected a {SIZE}x{SIZE} board, got shape {board.shape}')
        return cls(board.ravel().copy())

    @property
    def board(self) -> ndarray:
        """4x4 view over the cells; writes through to the grid."""
        return self.cells.reshape(SIZE, SIZE)

    def get(self, row: int, col: int) -> int:
        _check_coordinates(row, col)
        return int(self.cells[row * SIZE + col])

    def set(self, row: int, col: int, value: int) -> None:
        _check_coordinates(row, col)
        self.cells[row * SIZE + col] = value

    def clone(self) -> Grid:
        return Grid(self.cells.copy())

    def count_empty(self) -> int:
        return CELLS - int(count_nonzero(self.cells))

    def empty_cells(self) -> ndarray:
        """Linear indices of the empty cells, in index order."""
        return flatnonzero(self.cells == 0)

    def max_tile(self) -> int:
        return int(self.cells.max())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool((self.cells == other.cells).all())

    __hash__ = None

    def __repr__(self) -> str:
        return f'Grid({self.board.tolist()})'

    def __str__(self) -> str:
        return '\n'.join(' '.join(str(value) for value in row) for row in self.board.tolist())
