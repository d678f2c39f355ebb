import logging
from collections import Counter
from dataclasses import dataclass

from quad_tree import Kind, QuadNode, depth, encoded_size, preorder, serialize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeSummary:
    leaves_by_kind: dict[Kind, int]
    splits: int
    depth: int
    encoded_size: int
    text_length: int

    @property
    def leaves(self) -> int:
        return sum(self.leaves_by_kind.values())

    def __str__(self) -> str:
        kinds = ", ".join(
            f"{count} {kind.name.lower()}" for kind, count in self.leaves_by_kind.items()
        )
        return (
            f"{self.leaves} leaves ({kinds}), {self.splits} splits, depth {self.depth}, "
            f"{self.encoded_size} units, {self.text_length} characters"
        )


def summarize(root: QuadNode) -> TreeSummary:
    kinds = Counter(node.classified_kind for node in preorder(root))
    splits = kinds.pop(Kind.SPLIT, 0)
    return TreeSummary(
        leaves_by_kind={kind: kinds[kind] for kind in sorted(kinds)},
        splits=splits,
        depth=depth(root),
        encoded_size=encoded_size(root),
        text_length=len(serialize(root)),
    )


def display_summary(root: QuadNode, stage: str) -> None:
    logger.info(f"{stage}: {summarize(root)}")
