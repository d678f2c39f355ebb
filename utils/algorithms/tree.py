"""
Tree traversal utilities.

Traversals:
    depth_first_preorder(after, root)  - DFS yielding parent before children
    depth_first_postorder(after, root) - DFS yielding children before parent

`after` returns the nodes to visit below a node; returning nothing for a node
prunes its subtree, which is how callers skip demoted quad tree regions.
Both traversals use an explicit stack, so deep trees do not hit the recursion
limit.
"""

from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")


def depth_first_preorder(after: Callable[[T], Iterable[T]], root: T | None) -> Iterator[T]:
    """Yields parent before children, children left to right."""
    if root is None:
        return
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(tuple(after(current))))


def depth_first_postorder(after: Callable[[T], Iterable[T]], root: T | None) -> Iterator[T]:
    """Yields children before parent, children left to right."""
    if root is None:
        return
    stack: list[tuple[T, bool]] = [(root, False)]
    while stack:
        current, expanded = stack.pop()
        if expanded:
            yield current
            continue
        stack.append((current, True))
        stack.extend((child, False) for child in reversed(tuple(after(current))))


__all__ = [
    "depth_first_preorder",
    "depth_first_postorder",
]
