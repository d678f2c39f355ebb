"""
Node type of the quad tree.

A QuadNode covers a square region of the padded grid. Every classified node is
either a leaf (BLACK, GREY or WHITE) or SPLIT with exactly four children, in
the order top-left, top-right, bottom-left, bottom-right.

Nodes are mutable: the collapse pass and the merge search demote split nodes
to leaves in place. A demoted node keeps its children tuple, but nothing
visits the children of a node whose kind is not SPLIT (see `live_children`).
The link to the parent is a weak reference, so the tree holds no cycles.
"""

from __future__ import annotations

import weakref
from collections.abc import Sequence
from dataclasses import dataclass, field

from errors import InternalConsistencyError, UnclassifiedNodeError
from quad_tree.types import Kind


@dataclass(eq=False)
class QuadNode:
    x: int
    y: int
    size: int
    kind: Kind | None = None
    children: tuple[QuadNode, ...] = field(default=(), repr=False)
    _parent: weakref.ref[QuadNode] | None = field(default=None, repr=False)

    @property
    def parent(self) -> QuadNode | None:
        """Parent node, None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def classified_kind(self) -> Kind:
        """The kind, raising if the node was never classified."""
        if self.kind is None:
            raise UnclassifiedNodeError(
                f"Node at ({self.x}, {self.y}) of size {self.size} is unclassified"
            )
        return self.kind

    @property
    def is_split(self) -> bool:
        return self.classified_kind is Kind.SPLIT

    @property
    def is_leaf(self) -> bool:
        return not self.is_split

    def split(self, children: Sequence[QuadNode]) -> None:
        """Marks the node SPLIT and adopts its four children."""
        if len(children) != 4:
            raise InternalConsistencyError(
                f"A split node needs 4 children, got {len(children)}"
            )
        if self.children:
            raise InternalConsistencyError("Node is already split")
        for child in children:
            child._parent = weakref.ref(self)
        self.children = tuple(children)
        self.kind = Kind.SPLIT

    def live_children(self) -> tuple[QuadNode, ...]:
        """Children still part of the tree: all four if SPLIT, none otherwise."""
        return self.children if self.is_split else ()

    def is_attached(self) -> bool:
        """True while every ancestor is SPLIT, i.e. no merge abandoned the node."""
        node = self
        parent = node.parent
        while parent is not None:
            if not parent.is_split or not any(child is node for child in parent.children):
                return False
            node, parent = parent, parent.parent
        return True


__all__ = ["QuadNode"]
