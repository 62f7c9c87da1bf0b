"""Tree node with position bookkeeping and a weak parent back-reference."""

from __future__ import annotations

import weakref
from collections.abc import Hashable, MutableMapping
from typing import Any

NodeIndex = MutableMapping[Hashable, "TreeNode"]


class TreeNode:
    """A single element of the hierarchy.

    A node owns its children. The parent is held through a weak reference,
    and ``index`` caches the node's slot in the parent's ``children`` list
    so that removal is O(1).
    """

    def __init__(self, key: Hashable, value: Any = None):
        self._key = key
        self.value = value
        self._children: list[TreeNode] = []
        self._index = 0
        self._parent: weakref.ref[TreeNode] | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self._key!r})"

    @property
    def key(self) -> Hashable:
        return self._key

    @property
    def index(self) -> int:
        """Position of this node within its parent's children."""
        return self._index

    @property
    def children(self) -> tuple[TreeNode, ...]:
        return tuple(self._children)

    @property
    def parent(self) -> TreeNode | None:
        """The parent node, or None for a root or a collected parent."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def depth(self) -> int:
        """Number of edges between this node and its topmost ancestor."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def is_leaf(self) -> bool:
        return not self._children

    def is_root(self) -> bool:
        return self.parent is None

    def is_ancestor_of(self, other: TreeNode) -> bool:
        """Check whether ``other`` lies strictly below this node."""
        node = other.parent
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def iter_subtree(self):
        """Yield this node and all of its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def abandon(self, child: TreeNode) -> None:
        """Drop ``child`` from this node's children.

        The last child is swapped into the vacated slot, so the relative
        order of the remaining children is not preserved.
        """
        slot = child._index
        child._parent = None
        last = self._children.pop()
        if slot < len(self._children):
            self._children[slot] = last
            last._index = slot

    def adopt(self, child: TreeNode, index: NodeIndex) -> None:
        """Append ``child`` as the last child of this node."""
        child.attach(self, index)

    def attach(self, parent: TreeNode, index: NodeIndex) -> None:
        """Move this node under ``parent`` as its last child.

        The node is detached first, which purges it and its descendants from
        ``index``. Putting the keys back is up to the caller.
        """
        self.detach(index)
        self._index = len(parent._children)
        self._parent = weakref.ref(parent)
        parent._children.append(self)

    def detach(self, index: NodeIndex) -> None:
        """Cut this node from its parent and purge its subtree from ``index``.

        The children of the detached node are left in place.
        """
        parent = self.parent
        if parent is not None:
            parent.abandon(self)

        for node in self.iter_subtree():
            index.pop(node._key, None)
