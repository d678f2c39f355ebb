"""Tests for utils/grid.py"""

import numpy as np
import pytest

from errors import InputError
from utils.grid import Grid, make_square, next_power_of_two


class TestGrid:
    def test_empty_grid_is_rejected(self):
        with pytest.raises(InputError):
            Grid(0, 5)
        with pytest.raises(InputError):
            Grid(5, 0)

    def test_starts_zeroed(self):
        grid = Grid(3, 2)
        assert grid.proportions == (3, 2)
        assert all(grid[x, y] == 0 for x in range(3) for y in range(2))

    def test_indexing_is_x_then_y(self):
        grid = Grid(3, 2)
        grid[2, 1] = 7
        assert grid[2, 1] == 7
        assert grid.array[1, 2] == 7

    def test_out_of_range_access(self):
        grid = Grid(3, 2)
        with pytest.raises(IndexError):
            grid[3, 0]
        with pytest.raises(IndexError):
            grid[0, 2]
        with pytest.raises(IndexError):
            grid[-1, 0]

    def test_sample_range(self):
        grid = Grid(1, 1)
        with pytest.raises(ValueError):
            grid[0, 0] = 256

    def test_from_rows(self):
        grid = Grid.from_rows([[1, 2, 3], [4, 5, 6]])
        assert grid.width == 3
        assert grid.height == 2
        assert grid[0, 1] == 4
        assert grid[2, 0] == 3

    def test_array_view_is_read_only(self):
        grid = Grid(2, 2)
        with pytest.raises(ValueError):
            grid.array[0, 0] = 1


class TestNextPowerOfTwo:
    @pytest.mark.parametrize(
        "n, expected",
        [(1, 1), (2, 2), (3, 4), (64, 64), (65, 128), (1000, 1024)],
    )
    def test_values(self, n, expected):
        assert next_power_of_two(n) == expected

    def test_zero_is_rejected(self):
        with pytest.raises(InputError):
            next_power_of_two(0)


class TestMakeSquare:
    def test_power_of_two_square_is_unchanged(self):
        rng = np.random.default_rng(3)
        grid = Grid.from_array(rng.integers(0, 256, (8, 8)))
        assert make_square(grid) == grid

    def test_single_sample(self):
        grid = Grid.from_rows([[200]])
        square = make_square(grid)
        assert square.proportions == (1, 1)
        assert square[0, 0] == 200

    def test_output_is_power_of_two_square(self):
        square = make_square(Grid(100, 50))
        assert square.proportions == (128, 128)

    def test_nearest_neighbour_fill_and_zero_padding(self):
        grid = Grid.from_rows([[10, 20, 30], [40, 50, 60]])
        square = make_square(grid)
        # 3x2 is resampled to 4x2, the two bottom rows stay at zero
        expected = np.array(
            [
                [10, 10, 20, 30],
                [40, 40, 50, 60],
                [0, 0, 0, 0],
                [0, 0, 0, 0],
            ]
        )
        assert np.array_equal(square.array, expected)

    def test_tall_grid_pads_right(self):
        grid = Grid.from_rows([[255], [255]])
        square = make_square(grid)
        assert square.proportions == (2, 2)
        assert square[0, 0] == 255 and square[0, 1] == 255
        assert square[1, 0] == 0 and square[1, 1] == 0
