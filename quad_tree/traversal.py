"""
Traversal utilities for quad trees.

Only the live tree is visited: the children of a demoted node are skipped.

Functions:
    preorder(root)     - DFS preorder iterator over live nodes
    postorder(root)    - DFS postorder iterator over live nodes
    leaves(root)       - Live leaves, left to right
    count_leaves(root) - Number of live leaves
    depth(root)        - Number of levels of the live tree (root = 1)
"""

from __future__ import annotations

from collections.abc import Iterator

from quad_tree.nodes import QuadNode
from utils.algorithms.tree import depth_first_postorder, depth_first_preorder


def _after(node: QuadNode) -> tuple[QuadNode, ...]:
    return node.live_children()


def preorder(root: QuadNode) -> Iterator[QuadNode]:
    return depth_first_preorder(_after, root)


def postorder(root: QuadNode) -> Iterator[QuadNode]:
    return depth_first_postorder(_after, root)


def leaves(root: QuadNode) -> list[QuadNode]:
    """Live leaves in preorder; the root itself when it is a leaf."""
    return [node for node in preorder(root) if node.is_leaf]


def count_leaves(root: QuadNode) -> int:
    return sum(1 for node in preorder(root) if node.is_leaf)


def depth(root: QuadNode) -> int:
    current_depth = 0
    layer: tuple[QuadNode, ...] = (root,)
    while layer:
        current_depth += 1
        layer = tuple(child for node in layer for child in node.live_children())
    return current_depth


__all__ = [
    "preorder",
    "postorder",
    "leaves",
    "count_leaves",
    "depth",
]
