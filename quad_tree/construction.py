"""
Construction of a quad tree over a square grid.

Regions are split into four equal quadrants while their side is larger than the
minimum cell size. A leaf is classified from the single sample at its top-left
corner; the region is not averaged.
"""

from __future__ import annotations

import logging

from constants import DEFAULT_MINIMUM_CELL_SIZE
from errors import InputError, UsageError
from quad_tree.nodes import QuadNode
from quad_tree.types import Kind
from utils.grid import Grid

logger = logging.getLogger(__name__)


def build_quadtree(grid: Grid, minimum_cell_size: int = DEFAULT_MINIMUM_CELL_SIZE) -> QuadNode:
    """
    Partitions a square grid into a fully classified quad tree.

    Args:
        grid: Square grid, normally the output of `make_square`.
        minimum_cell_size: Regions whose side is at most this size become leaves.

    Returns:
        The root node.
    """
    if isinstance(minimum_cell_size, bool) or not isinstance(minimum_cell_size, int):
        raise UsageError(f"Minimum cell size must be an int, got {minimum_cell_size!r}")
    if minimum_cell_size < 1:
        raise UsageError(f"Minimum cell size must be positive, got {minimum_cell_size}")
    if grid.width != grid.height:
        raise InputError(f"Quad trees need a square grid, got {grid.width}x{grid.height}")

    root = QuadNode(0, 0, grid.width)
    _partition(grid, root, minimum_cell_size)
    logger.debug(f"Built quad tree over {grid.width}x{grid.height} with cells <= {minimum_cell_size}")
    return root


def _partition(grid: Grid, node: QuadNode, minimum_cell_size: int) -> None:
    if node.size <= minimum_cell_size:
        node.kind = Kind.from_sample(grid[node.x, node.y])
        return

    half = node.size // 2
    node.split(
        (
            QuadNode(node.x, node.y, half),
            QuadNode(node.x + half, node.y, half),
            QuadNode(node.x, node.y + half, half),
            QuadNode(node.x + half, node.y + half, half),
        )
    )
    for child in node.children:
        _partition(grid, child, minimum_cell_size)


__all__ = ["build_quadtree"]
