r"""
Grid Processing Library

Sample grids and the square padding applied before building a quad tree.

    1\ Grid             - Bounds-checked 2D buffer of 8-bit samples
    2\ next_power_of_two - Smallest power of two not below n
    3\ make_square      - Pad/resample a grid to a power-of-two square
"""

from __future__ import annotations

import numpy as np

from errors import InputError
from localtypes import Coord, Proportions, Sample


class Grid:
    """
    Rectangular buffer of samples addressed as grid[x, y].

    Backed by a uint8 array of shape (height, width), row-major. Accesses
    outside the bounds raise IndexError; negative indices are not wrapped.
    """

    __slots__ = ("_data",)

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InputError(f"Grid must not be empty, got {width}x{height}")
        self._data = np.zeros((height, width), dtype=np.uint8)

    @classmethod
    def from_array(cls, array: np.ndarray) -> Grid:
        """Wraps a copy of a 2D array of samples (indexed [row][col])."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise InputError(f"Expected a 2D array of samples, got shape {array.shape}")
        height, width = array.shape
        grid = cls(width, height)
        grid._data[:, :] = np.clip(array, 0, 255).astype(np.uint8)
        return grid

    @classmethod
    def from_rows(cls, rows: list[list[Sample]]) -> Grid:
        """Builds a grid from a list of rows, grid[x, y] == rows[y][x]."""
        if not rows or not rows[0]:
            raise InputError("Grid must not be empty")
        return cls.from_array(np.array(rows, dtype=np.int64))

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def proportions(self) -> Proportions:
        return Proportions(self.width, self.height)

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the underlying buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def _check(self, coord: tuple[int, int]) -> Coord:
        x, y = coord
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"({x}, {y}) is outside of a {self.width}x{self.height} grid"
            )
        return Coord(x, y)

    def __getitem__(self, coord: tuple[int, int]) -> Sample:
        x, y = self._check(coord)
        return int(self._data[y, x])

    def __setitem__(self, coord: tuple[int, int], value: Sample) -> None:
        x, y = self._check(coord)
        if not 0 <= value <= 255:
            raise ValueError(f"Sample {value} is outside of [0, 255]")
        self._data[y, x] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"


def next_power_of_two(n: int) -> int:
    """Smallest power of two greater than or equal to n (n >= 1)."""
    if n < 1:
        raise InputError(f"Cannot size an empty dimension: {n}")
    return 1 << (n - 1).bit_length()


def make_square(grid: Grid) -> Grid:
    """
    Maps a grid to a power-of-two square by nearest-neighbour resampling.

    With W' and H' the powers of two bounding the width and height, the result
    is S x S with S = max(W', H'). Its top-left W' x H' region is the source
    resampled to that size; the remaining cells stay at zero.
    """
    width, height = grid.proportions
    padded_width = next_power_of_two(width)
    padded_height = next_power_of_two(height)
    size = max(padded_width, padded_height)

    xs = np.arange(padded_width) * width // padded_width
    ys = np.arange(padded_height) * height // padded_height

    square = Grid(size, size)
    square._data[:padded_height, :padded_width] = grid._data[np.ix_(ys, xs)]
    return square


__all__ = [
    "Grid",
    "next_power_of_two",
    "make_square",
]
