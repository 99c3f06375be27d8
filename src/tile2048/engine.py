"""Shift and merge rules of 2048.

Only one real algorithm lives here: :func:`shift_grid_left`.  The other three
directions rotate or mirror the grid so that the wanted direction becomes
"left", shift, and undo the transformation.  Recorded motions are mapped back
through the same transformation so they describe the real board.

Example usage
-------------

>>> import numpy as np
>>> from tile2048.engine import Direction, shift
>>> grid = np.array([[2, 2, 4, 0]] + [[0] * 4] * 3, dtype=np.uint32)
>>> result = shift(grid, Direction.LEFT)
>>> grid[0].tolist(), result.score_delta
([4, 4, 0, 0], 4)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .animation import AnimationPool, Position
from .board import Grid
from .transform import Transform


Projection = Callable[[Position], Position]


class Direction(str, Enum):
    """Direction the tiles are pushed towards."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# The transformation that turns each direction into a left shift.
DIRECTION_TRANSFORMS: Dict[Direction, Transform] = {
    Direction.LEFT: Transform.IDENTITY,
    Direction.RIGHT: Transform.MIRROR,
    Direction.DOWN: Transform.ROTATE_RIGHT,
    Direction.UP: Transform.ROTATE_LEFT,
}


@dataclass(frozen=True)
class Move:
    """A tile travelling from ``start`` to ``dest`` in grid coordinates."""

    start: Position
    dest: Position
    moving_value: int
    idle_value: int

    @property
    def merged(self) -> bool:
        return self.idle_value != self.moving_value


@dataclass
class ShiftResult:
    """Outcome of a single shift."""

    changed: bool
    score_delta: int
    moves: Tuple[Move, ...]
    background: Grid


def shift_grid_left(grid: Grid) -> ShiftResult:
    """Shift and merge every row of ``grid`` to the left, in place.

    For each row a *settled* index trails a *scan* index.  A scanned tile
    either merges into the settled tile (equal values), slides up against it
    (different values), or slides into it when the settled cell is still
    empty.  The settled index only moves forward after a merge or a collision,
    so a merged tile is never merged a second time within the same shift.

    The returned background is the grid as it was before the shift with every
    tile that moved removed; it is drawn underneath the animated tiles.
    """

    background = grid.copy()
    moves: List[Move] = []
    score = 0
    rows, cols = grid.shape
    for row in range(rows):
        settled = 0
        settled_value = int(grid[row, settled])
        for scan in range(1, cols):
            value = int(grid[row, scan])
            if value == 0:
                continue

            if settled_value == 0:
                grid[row, settled] = value
                grid[row, scan] = 0
                background[row, scan] = 0
                moves.append(Move((row, scan), (row, settled), value, value))
                settled_value = value
                continue

            if value == settled_value:
                merged = value * 2
                grid[row, settled] = merged
                grid[row, scan] = 0
                background[row, scan] = 0
                score += merged
                moves.append(Move((row, scan), (row, settled), value, merged))
            elif settled + 1 < scan:
                grid[row, settled + 1] = value
                grid[row, scan] = 0
                background[row, scan] = 0
                moves.append(Move((row, scan), (row, settled + 1), value, value))

            settled += 1
            settled_value = int(grid[row, settled])

    return ShiftResult(
        changed=bool(moves),
        score_delta=score,
        moves=tuple(moves),
        background=background,
    )


def shift(
    grid: Grid,
    direction: Direction,
    pool: Optional[AnimationPool] = None,
    project: Optional[Projection] = None,
) -> ShiftResult:
    """Shift ``grid`` towards ``direction`` in place.

    Moves in the result are expressed in the coordinates of the real grid.
    When ``pool`` is given every move is also started as an animation there,
    after passing its endpoints through ``project`` (for instance to turn grid
    cells into console positions).  Moves that do not fit into the pool are
    dropped from the animation but still applied to the grid.
    """

    transform = DIRECTION_TRANSFORMS[Direction(direction)]
    size = grid.shape[0]

    transform.apply(grid)
    result = shift_grid_left(grid)
    transform.invert(grid)
    transform.invert(result.background)

    moves = tuple(
        Move(
            start=transform.to_original(move.start, size),
            dest=transform.to_original(move.dest, size),
            moving_value=move.moving_value,
            idle_value=move.idle_value,
        )
        for move in result.moves
    )
    result.moves = moves

    if pool is not None:
        for move in moves:
            start, dest = move.start, move.dest
            if project is not None:
                start, dest = project(start), project(dest)
            pool.add(start, dest, move.moving_value, move.idle_value)
    return result


def shift_left(grid: Grid, pool: Optional[AnimationPool] = None, project: Optional[Projection] = None) -> ShiftResult:
    return shift(grid, Direction.LEFT, pool, project)


def shift_right(grid: Grid, pool: Optional[AnimationPool] = None, project: Optional[Projection] = None) -> ShiftResult:
    return shift(grid, Direction.RIGHT, pool, project)


def shift_up(grid: Grid, pool: Optional[AnimationPool] = None, project: Optional[Projection] = None) -> ShiftResult:
    return shift(grid, Direction.UP, pool, project)


def shift_down(grid: Grid, pool: Optional[AnimationPool] = None, project: Optional[Projection] = None) -> ShiftResult:
    return shift(grid, Direction.DOWN, pool, project)


__all__ = [
    "DIRECTION_TRANSFORMS",
    "Direction",
    "Move",
    "ShiftResult",
    "shift",
    "shift_down",
    "shift_grid_left",
    "shift_left",
    "shift_right",
    "shift_up",
]
