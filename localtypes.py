"""
Type definitions shared by the grid utilities and the quad tree.

Coordinate Convention:
    All coordinates use (x, y) order, where:
    - x: column, increases rightward (0 to width-1)
    - y: row, increases downward (0 to height-1)
"""

from __future__ import annotations

from typing import NamedTuple, Protocol, Sequence, TypeAlias, TypeVar, runtime_checkable

T = TypeVar("T")

# Samples
Sample: TypeAlias = int  # 8-bit intensity, 0-255


class Coord(NamedTuple):
    x: int
    y: int


class Proportions(NamedTuple):
    """Grid dimensions."""

    width: int
    height: int


@runtime_checkable
class RandomSource(Protocol):
    """Anything able to pick an element uniformly, such as `random.Random`."""

    def choice(self, seq: Sequence[T]) -> T: ...


__all__ = [
    "T",
    "Sample",
    "Coord",
    "Proportions",
    "RandomSource",
]
