"""
Encoder of quad trees.

Textual form: one glyph per leaf (`.` black, `/` grey, `#` white) and
`(` + the four children + `)` for a split node.

Size model: every leaf costs LEAF_COST units, split nodes cost nothing beyond
their children. The parentheses are not charged; this is the size the merge
search works against, not the length of the text.
"""

from __future__ import annotations

from constants import CLOSE_SPLIT, LEAF_COST, OPEN_SPLIT
from quad_tree.nodes import QuadNode
from quad_tree.traversal import preorder


def encoded_size(node: QuadNode) -> int:
    """Abstract size of the live tree below (and including) node."""
    return sum(LEAF_COST for current in preorder(node) if current.is_leaf)


def serialize(node: QuadNode) -> str:
    """Textual encoding of the live tree below (and including) node."""
    if node.is_leaf:
        return node.classified_kind.glyph
    return OPEN_SPLIT + "".join(serialize(child) for child in node.children) + CLOSE_SPLIT


__all__ = [
    "encoded_size",
    "serialize",
]
