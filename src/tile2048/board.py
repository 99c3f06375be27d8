"""Tile grid representation and end-of-game rules."""

from __future__ import annotations

import random
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray


# Width and height of the square playing grid.
GRID_SIZE = 4

Grid = NDArray[np.uint32]

# Values a freshly spawned tile may take, chosen with equal probability.
SPAWN_VALUES = (2, 4)


def create_empty_grid() -> Grid:
    """Return a new empty tile grid filled with zeros."""

    return np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.uint32)


def add_random_tile(grid: Grid, rng: Optional[random.Random] = None) -> Optional[Tuple[int, int]]:
    """Drop a 2 or a 4 into a random empty cell of ``grid``.

    Returns the ``(row, col)`` that received the tile, or ``None`` when the
    grid has no empty cell left (the grid is then left untouched).
    """

    rng = rng or random
    empty = [(int(r), int(c)) for r, c in np.argwhere(grid == 0)]
    if not empty:
        return None
    value = rng.choice(SPAWN_VALUES)
    row, col = rng.choice(empty)
    grid[row, col] = value
    return row, col


def can_move(grid: Grid, row: int, col: int) -> bool:
    """Return ``True`` if the tile at ``(row, col)`` could move.

    A tile can move when one of its four neighbours is empty or holds the same
    value.  Empty cells never move.  This says nothing about which direction
    the player would have to choose.
    """

    value = int(grid[row, col])
    if value == 0:
        return False
    size = grid.shape[0]
    for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        r, c = row + d_row, col + d_col
        if 0 <= r < size and 0 <= c < size:
            other = int(grid[r, c])
            if other == 0 or other == value:
                return True
    return False


def is_won(grid: Grid, target: int) -> bool:
    """Return ``True`` once a tile equal to ``target`` is on the grid."""

    return bool(np.any(grid == target))


def is_lost(grid: Grid) -> bool:
    """Return ``True`` if the grid is full and no tile can move."""

    size = grid.shape[0]
    for row in range(size):
        for col in range(size):
            if grid[row, col] == 0 or can_move(grid, row, col):
                return False
    return True


class Board:
    """Playing grid holding the tile values."""

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def clear(self) -> None:
        self.grid.fill(0)

    def add_random_tile(self, rng: Optional[random.Random] = None) -> Optional[Tuple[int, int]]:
        return add_random_tile(self.grid, rng)

    def is_won(self, target: int) -> bool:
        return is_won(self.grid, target)

    def is_lost(self) -> bool:
        return is_lost(self.grid)
