"""
Fatal errors of the encoding pipeline.

Every error here aborts the run: the command line reports the message and exits
with status 1. A merge attempt that cannot proceed is not an error, it is a
plain False returned by `merge_with_siblings`.
"""


class Png2TweetError(Exception):
    """Base class of all fatal pipeline errors."""

    pass


class UsageError(Png2TweetError):
    """Wrong argument count or an unparsable or non-positive cell size."""

    pass


class InputError(Png2TweetError):
    """Unreadable image, or a grid with zero width or height."""

    pass


class UnclassifiedNodeError(Png2TweetError):
    """A node was sized, encoded or traversed before being classified."""

    pass


class BudgetUnreachableError(Png2TweetError):
    """The merge search stalled before reaching the size budget."""

    pass


class InternalConsistencyError(Png2TweetError):
    """An invariant of the tree was violated; signals a logic fault."""

    pass


__all__ = [
    "Png2TweetError",
    "UsageError",
    "InputError",
    "UnclassifiedNodeError",
    "BudgetUnreachableError",
    "InternalConsistencyError",
]
