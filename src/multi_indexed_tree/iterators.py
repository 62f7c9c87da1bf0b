"""Lazy traversal iterators over a tree."""

from __future__ import annotations

from collections import deque

from .node import TreeNode


class DepthFirstIterator:
    """Pre-order traversal, children visited in stored order."""

    def __init__(self, root: TreeNode):
        self._stack: list[TreeNode] = [root]

    def __iter__(self) -> DepthFirstIterator:
        return self

    def __next__(self) -> TreeNode:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        # Reversed so the first child is popped next
        self._stack.extend(reversed(node.children))
        return node


class BreadthFirstIterator:
    """Level-order traversal, children enqueued in stored order."""

    def __init__(self, root: TreeNode):
        self._queue: deque[TreeNode] = deque([root])

    def __iter__(self) -> BreadthFirstIterator:
        return self

    def __next__(self) -> TreeNode:
        if not self._queue:
            raise StopIteration
        node = self._queue.popleft()
        self._queue.extend(node.children)
        return node


class ShortestPathIterator:
    """Breadth-first traversal that also reports each node's depth.

    Nodes come out in exactly the breadth-first order, which is also the
    order of non-decreasing distance from the root. After each ``next()``
    the ``depth`` attribute holds the depth of the node just yielded.
    """

    def __init__(self, root: TreeNode):
        self._queue: deque[tuple[int, TreeNode]] = deque([(0, root)])
        self.depth: int | None = None

    def __iter__(self) -> ShortestPathIterator:
        return self

    def __next__(self) -> TreeNode:
        if not self._queue:
            raise StopIteration
        depth, node = self._queue.popleft()
        self._queue.extend((depth + 1, child) for child in node.children)
        self.depth = depth
        return node

    def with_depth(self):
        """Yield ``(depth, node)`` pairs from the remaining traversal."""
        for node in self:
            yield self.depth, node
