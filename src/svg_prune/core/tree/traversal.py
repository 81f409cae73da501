"""Pre-order traversal with subtree skipping."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svg_prune.core.tree.document import Node


class Descendants(Iterator["Node"]):
    """Depth-first, pre-order walk over a subtree, start node included.

    Children of the most recently yielded node are only expanded when the next
    node is requested, so calling `skip_children()` in between omits them.
    """

    def __init__(self, start: Node) -> None:
        self._stack: list[Node] = [start]
        self._current: Node | None = None

    def __iter__(self) -> Descendants:
        return self

    def __next__(self) -> Node:
        if self._current is not None:
            self._stack.extend(reversed(self._current.children))
            self._current = None
        if not self._stack:
            raise StopIteration
        self._current = self._stack.pop()
        return self._current

    def skip_children(self) -> None:
        """Do not descend into the node returned by the last `next()`."""
        self._current = None
