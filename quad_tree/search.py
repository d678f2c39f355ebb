"""
Randomized search fitting a quad tree into the encoding budget.

Leaves are drawn at random and merged with their siblings until the encoded
size fits. Every draw that does not shrink the tree raises the number of split
siblings a merge may average through; once that tolerance goes past its limit
the image is declared too complex for the budget.
"""

from __future__ import annotations

import logging
import random

from constants import MAXIMUM_DETAIL_LOSS, MAXIMUM_ENCODED_SIZE
from errors import BudgetUnreachableError
from localtypes import RandomSource
from quad_tree.encoding import encoded_size
from quad_tree.merging import merge_with_siblings
from quad_tree.nodes import QuadNode
from quad_tree.traversal import leaves

logger = logging.getLogger(__name__)


def simplify(
    root: QuadNode,
    rng: RandomSource | None = None,
    maximum_encoded_size: int = MAXIMUM_ENCODED_SIZE,
    maximum_detail_loss: int = MAXIMUM_DETAIL_LOSS,
) -> int:
    """
    Merges leaves of the tree until its encoded size fits the budget.

    The leaves are collected once. Entries abandoned by later merges stay in
    the collection; drawing one is a wasted iteration.

    Args:
        root: Tree to shrink in place, normally after `merge_leaves`.
        rng: Source of the random draws, the `random` module when omitted.
        maximum_encoded_size: Budget in encoding units.
        maximum_detail_loss: Highest tolerated number of split siblings.

    Returns:
        The encoded size reached.

    Raises:
        BudgetUnreachableError: the size stopped shrinking more often than
            `maximum_detail_loss` allows.
    """
    if rng is None:
        rng = random

    snapshot = [leaf for leaf in leaves(root) if leaf is not root]
    detail_loss = 0
    last_size = encoded_size(root)
    logger.debug(f"Simplifying {len(snapshot)} leaves, encoded size {last_size}")

    iterations = 0
    while snapshot and encoded_size(root) > maximum_encoded_size:
        iterations += 1
        current_size = encoded_size(root)
        if current_size == last_size:
            detail_loss += 1
            logger.debug(f"No progress at size {current_size}, detail loss now {detail_loss}")
            if detail_loss > maximum_detail_loss:
                raise BudgetUnreachableError(
                    f"Image is too complex for a budget of {maximum_encoded_size} "
                    f"with this cell size (stuck at {current_size}); "
                    "try a larger cell size"
                )

        leaf = rng.choice(snapshot)
        if not merge_with_siblings(leaf, detail_loss):
            logger.debug(f"Could not merge leaf at ({leaf.x}, {leaf.y})")
        last_size = current_size

    final_size = encoded_size(root)
    logger.debug(f"Simplified to {final_size} after {iterations} iterations")
    return final_size


__all__ = ["simplify"]
