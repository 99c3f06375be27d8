import numpy as np
import pytest

from tile2048.transform import (
    Transform,
    reverse_cols,
    reverse_rows,
    rotate_left,
    rotate_right,
    transpose,
)


def _sample() -> np.ndarray:
    return np.arange(16, dtype=np.uint32).reshape(4, 4)


def test_primitives_match_numpy() -> None:
    grid = _sample()
    transpose(grid)
    assert np.array_equal(grid, _sample().T)

    grid = _sample()
    reverse_rows(grid)
    assert np.array_equal(grid, np.fliplr(_sample()))

    grid = _sample()
    reverse_cols(grid)
    assert np.array_equal(grid, np.flipud(_sample()))


def test_rotations_match_numpy() -> None:
    grid = _sample()
    rotate_left(grid)
    assert np.array_equal(grid, np.rot90(_sample(), 1))

    grid = _sample()
    rotate_right(grid)
    assert np.array_equal(grid, np.rot90(_sample(), -1))


@pytest.mark.parametrize("transform", list(Transform))
def test_invert_undoes_apply(transform: Transform) -> None:
    grid = _sample()
    transform.apply(grid)
    transform.invert(grid)
    assert np.array_equal(grid, _sample())


@pytest.mark.parametrize("transform", list(Transform))
def test_to_original_locates_values(transform: Transform) -> None:
    original = _sample()
    transformed = original.copy()
    transform.apply(transformed)
    for row in range(4):
        for col in range(4):
            r, c = transform.to_original((row, col), 4)
            assert transformed[row, col] == original[r, c]
