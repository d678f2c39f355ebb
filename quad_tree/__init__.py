"""
Quad Tree: a size-aware partition of a square grid into black, grey and white cells.

The tree structure consists of:
- Leaves, classified BLACK, GREY or WHITE from one sample of their region
- Split nodes with exactly four children (top-left, top-right, bottom-left, bottom-right)

Pipeline:
    build_quadtree -> merge_leaves -> simplify -> serialize

Key Features:
- Encoded size model charging 2 units per leaf and nothing per split
- Lossless collapse of uniform quadrants
- Randomized lossy merging until the encoding fits a 903 unit budget

Example Usage:
    >>> from utils.grid import Grid, make_square
    >>> from quad_tree import build_quadtree, merge_leaves, simplify, serialize
    >>> root = build_quadtree(make_square(Grid(128, 128)), minimum_cell_size=64)
    >>> serialize(root)
    '(....)'
    >>> merge_leaves(root)
    1
    >>> serialize(root)
    '.'
"""

from __future__ import annotations

# Kinds
from quad_tree.types import LEAF_KINDS, Kind

# Node class
from quad_tree.nodes import QuadNode

# Construction
from quad_tree.construction import build_quadtree

# Traversal utilities
from quad_tree.traversal import count_leaves, depth, leaves, postorder, preorder

# Encoder
from quad_tree.encoding import encoded_size, serialize

# Parsing utilities
from quad_tree.parsing import parse_encoding, parse_shape

# Merging
from quad_tree.merging import mean_kind, merge_leaves, merge_with_siblings

# Search
from quad_tree.search import simplify

__all__ = [
    # Kinds
    "Kind",
    "LEAF_KINDS",
    # Nodes
    "QuadNode",
    # Construction
    "build_quadtree",
    # Traversal
    "preorder",
    "postorder",
    "leaves",
    "count_leaves",
    "depth",
    # Encoder
    "encoded_size",
    "serialize",
    # Parsing
    "parse_shape",
    "parse_encoding",
    # Merging
    "merge_leaves",
    "mean_kind",
    "merge_with_siblings",
    # Search
    "simplify",
]
