"""
Node kinds of the quad tree.

Leaf kinds are ordered (BLACK < GREY < WHITE) and their integer values are the
representative values averaged by the merge search. SPLIT marks internal nodes.
"""

from __future__ import annotations

from enum import IntEnum

from constants import BLACK_THRESHOLD, GLYPHS, GREY_THRESHOLD
from localtypes import Sample


class Kind(IntEnum):
    BLACK = 0
    GREY = 1
    WHITE = 2
    SPLIT = 3

    @classmethod
    def from_sample(cls, value: Sample) -> Kind:
        """Classifies one intensity sample."""
        if value < BLACK_THRESHOLD:
            return cls.BLACK
        if value < GREY_THRESHOLD:
            return cls.GREY
        return cls.WHITE

    @property
    def glyph(self) -> str:
        """Character emitted for a leaf of this kind."""
        if self is Kind.SPLIT:
            raise ValueError("Split nodes have no glyph")
        return GLYPHS[self.value]


LEAF_KINDS = (Kind.BLACK, Kind.GREY, Kind.WHITE)

__all__ = [
    "Kind",
    "LEAF_KINDS",
]
