"""Rotations and reflections of the square tile grid.

Shifting in any direction is implemented as "transform, shift left, undo the
transform".  The primitives below work in place on a square numpy array; the
:class:`Transform` enum bundles them with the matching coordinate mapping so
that motions recorded in the transformed frame can be moved back onto the
real board.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

import numpy as np


Coord = Tuple[int, int]  # (row, col)


def transpose(grid: np.ndarray) -> None:
    """Swap ``grid`` across its main diagonal, in place."""

    grid[...] = grid.T.copy()


def reverse_rows(grid: np.ndarray) -> None:
    """Reverse the order of the cells within every row, in place."""

    grid[...] = grid[:, ::-1].copy()


def reverse_cols(grid: np.ndarray) -> None:
    """Reverse the order of the cells within every column, in place."""

    grid[...] = grid[::-1, :].copy()


def rotate_left(grid: np.ndarray) -> None:
    """Rotate ``grid`` 90 degrees counter-clockwise, in place."""

    transpose(grid)
    reverse_cols(grid)


def rotate_right(grid: np.ndarray) -> None:
    """Rotate ``grid`` 90 degrees clockwise, in place."""

    transpose(grid)
    reverse_rows(grid)


class Transform(str, Enum):
    """Orientation change applied to the grid before a left shift."""

    IDENTITY = "identity"
    MIRROR = "mirror"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"

    def apply(self, grid: np.ndarray) -> None:
        """Transform ``grid`` in place."""

        if self is Transform.MIRROR:
            reverse_rows(grid)
        elif self is Transform.ROTATE_LEFT:
            rotate_left(grid)
        elif self is Transform.ROTATE_RIGHT:
            rotate_right(grid)

    def invert(self, grid: np.ndarray) -> None:
        """Undo :meth:`apply` on ``grid`` in place."""

        if self is Transform.MIRROR:
            reverse_rows(grid)
        elif self is Transform.ROTATE_LEFT:
            rotate_right(grid)
        elif self is Transform.ROTATE_RIGHT:
            rotate_left(grid)

    def to_original(self, coord: Coord, size: int) -> Coord:
        """Map ``coord`` in the transformed grid back to the original grid.

        ``size`` is the side length of the square grid.
        """

        row, col = coord
        last = size - 1
        if self is Transform.MIRROR:
            return row, last - col
        if self is Transform.ROTATE_LEFT:
            return col, last - row
        if self is Transform.ROTATE_RIGHT:
            return last - col, row
        return row, col


__all__ = [
    "Coord",
    "Transform",
    "reverse_cols",
    "reverse_rows",
    "rotate_left",
    "rotate_right",
    "transpose",
]
