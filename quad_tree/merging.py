"""
Merging of quad tree nodes.

Functions:
    merge_leaves(root)              - Lossless bottom-up collapse of uniform quadrants
    mean_kind(node)                 - Representative leaf kind of a subtree
    merge_with_siblings(leaf, loss) - Lossy merge of a leaf with its siblings
"""

from __future__ import annotations

import logging

from errors import InternalConsistencyError
from quad_tree.nodes import QuadNode
from quad_tree.traversal import postorder
from quad_tree.types import LEAF_KINDS, Kind

logger = logging.getLogger(__name__)


def merge_leaves(root: QuadNode) -> int:
    """
    Collapses every split node whose four children are leaves of one kind.

    Children are collapsed before their parent, so uniform regions collapse all
    the way up in a single pass. The per-cell classification is unchanged.

    Returns:
        The number of split nodes turned into leaves.
    """
    collapsed = 0
    for node in postorder(root):
        if not node.is_split:
            continue
        kinds = {child.classified_kind for child in node.children}
        if len(kinds) != 1:
            continue
        (kind,) = kinds
        if kind is Kind.SPLIT:
            continue
        node.kind = kind
        collapsed += 1
    return collapsed


def mean_kind(node: QuadNode) -> Kind:
    """
    Representative kind of a subtree.

    A leaf stands for its own kind; a split node for the truncated average of
    its four children's representative kinds.
    """
    if node.is_leaf:
        return node.classified_kind
    return Kind(sum(mean_kind(child) for child in node.children) // 4)


def merge_with_siblings(leaf: QuadNode, maximum_detail_loss: int) -> bool:
    """
    Replaces the parent of a leaf by a single leaf of its averaged kind.

    Split siblings are averaged through `mean_kind`; at most
    `maximum_detail_loss` of them are accepted.

    Returns:
        True if the parent was merged. False if the leaf was abandoned by an
        earlier merge, or if too many siblings are split.
    """
    if leaf.is_split:
        raise InternalConsistencyError("merge_with_siblings() on a split node")
    parent = leaf.parent
    if parent is None:
        raise InternalConsistencyError("merge_with_siblings() on the root")
    if not leaf.is_attached():
        return False

    values: list[int] = []
    sibling_splits = 0
    for sibling in parent.children:
        if sibling.is_split:
            sibling_splits += 1
            if sibling_splits > maximum_detail_loss:
                return False
            values.append(mean_kind(sibling))
        else:
            values.append(sibling.classified_kind)

    mean = sum(values) // 4
    if mean not in LEAF_KINDS:
        raise InternalConsistencyError(f"Siblings {values} merged to invalid kind {mean}")

    parent.kind = Kind(mean)
    logger.debug(
        f"Merged {parent.size}x{parent.size} region at ({parent.x}, {parent.y}) "
        f"into {parent.kind.name} ({sibling_splits} split siblings)"
    )
    return True


__all__ = [
    "merge_leaves",
    "mean_kind",
    "merge_with_siblings",
]
