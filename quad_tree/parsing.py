"""
Parsing utilities for the textual quad tree encoding.

This module reads back the text written by `serialize`:
- parse_shape: Convert the text to nested tuples of kinds
- parse_encoding: Convert the text to a QuadNode tree

The encoding carries no sizes, so parsed regions are expressed in units of the
deepest leaf: the root covers 2**(depth - 1) cells per side.
"""

from __future__ import annotations

from typing import TypeAlias

from constants import CLOSE_SPLIT, GLYPHS, MAXIMUM_NESTING, OPEN_SPLIT
from quad_tree.nodes import QuadNode
from quad_tree.types import Kind

Shape: TypeAlias = "Kind | tuple[Shape, Shape, Shape, Shape]"

KIND_BY_GLYPH = {glyph: Kind(value) for value, glyph in GLYPHS.items()}


def parse_shape(text: str) -> Shape:
    """Parses an encoding into a leaf kind or nested 4-tuples of shapes."""
    stack: list[list[Shape]] = [[]]
    for position, char in enumerate(text.strip()):
        if char == OPEN_SPLIT:
            if len(stack) > MAXIMUM_NESTING:
                raise ValueError(
                    f"Split at position {position} nests deeper than {MAXIMUM_NESTING} levels"
                )
            stack.append([])
        elif char == CLOSE_SPLIT:
            if len(stack) == 1:
                raise ValueError(f"Unbalanced '{CLOSE_SPLIT}' at position {position}")
            group = stack.pop()
            if len(group) != 4:
                raise ValueError(
                    f"Split closed at position {position} has {len(group)} children, expected 4"
                )
            stack[-1].append(tuple(group))
        elif char in KIND_BY_GLYPH:
            stack[-1].append(KIND_BY_GLYPH[char])
        else:
            raise ValueError(f"Unexpected character {char!r} at position {position}")

    if len(stack) != 1:
        raise ValueError(f"{len(stack) - 1} split(s) left open")
    (top,) = stack
    if len(top) != 1:
        raise ValueError(f"Expected a single tree, got {len(top)} top-level nodes")
    return top[0]


def _shape_depth(shape: Shape) -> int:
    if isinstance(shape, Kind):
        return 1
    return 1 + max(_shape_depth(child) for child in shape)


def _build(shape: Shape, x: int, y: int, size: int) -> QuadNode:
    if isinstance(shape, Kind):
        return QuadNode(x, y, size, shape)
    node = QuadNode(x, y, size)
    half = size // 2
    offsets = ((0, 0), (half, 0), (0, half), (half, half))
    node.split(
        [_build(child, x + dx, y + dy, half) for child, (dx, dy) in zip(shape, offsets)]
    )
    return node


def parse_encoding(text: str) -> QuadNode:
    """Converts an encoding back into a tree of the same shape and kinds."""
    shape = parse_shape(text)
    return _build(shape, 0, 0, 2 ** (_shape_depth(shape) - 1))


__all__ = [
    "KIND_BY_GLYPH",
    "parse_shape",
    "parse_encoding",
]
