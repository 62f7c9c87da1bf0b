"""Keyed tree with a primary key index and a secondary tag index."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from typing import Any

from .config import TreeConfig
from .errors import (
    DuplicateKeyError,
    InvalidMoveError,
    KeyNotFoundError,
    ParentNotFoundError,
    RootRemovalError,
)
from .iterators import BreadthFirstIterator, DepthFirstIterator, ShortestPathIterator
from .node import TreeNode
from .paths import shortest_paths

logger = logging.getLogger(__name__)


class MultiIndexedTree:
    """
    A mutable tree whose nodes are addressable by key in O(1).

    The primary index maps every key reachable from the root to its node.
    The secondary index maps free-form tags to ordered key lists; it is not
    validated against the tree, and lookups through it skip keys that have
    since been removed.
    """

    def __init__(
        self,
        root_key: Hashable,
        root_value: Any = None,
        config: TreeConfig | None = None,
    ):
        self.config = config or TreeConfig()
        self._root = TreeNode(root_key, root_value)
        self._index: dict[Hashable, TreeNode] = {root_key: self._root}
        self._secondary_index: dict[str, list[Hashable]] = {}

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[TreeNode]:
        return self.iter_depth_first()

    def __repr__(self) -> str:
        return f"MultiIndexedTree(root={self._root.key!r}, nodes={len(self)})"

    @property
    def root(self) -> TreeNode:
        return self._root

    def find(self, key: Hashable) -> TreeNode | None:
        """Look up a node by key."""
        return self._index.get(key)

    def insert(self, parent_key: Hashable, key: Hashable, value: Any = None) -> TreeNode:
        """
        Insert a new leaf under ``parent_key``.

        Args:
            parent_key: Key of an existing node to append the leaf to
            key: Key of the new node
            value: Payload of the new node

        Returns:
            The newly created node

        Raises:
            ParentNotFoundError: If ``parent_key`` is not in the tree
            DuplicateKeyError: If ``key`` already exists and the config
                rejects duplicates, or replacing it would remove the parent
                or the root
        """
        parent = self._index.get(parent_key)
        if parent is None:
            raise ParentNotFoundError(parent_key)

        existing = self._index.get(key)
        if existing is not None:
            self._discard_for_replace(existing, parent)

        node = TreeNode(key, value)
        parent.adopt(node, self._index)
        self._index[key] = node
        logger.debug("Inserted %r under %r", key, parent_key)
        return node

    def remove(self, key: Hashable) -> None:
        """
        Remove a node and its whole subtree.

        Raises:
            KeyNotFoundError: If ``key`` is not in the tree
            RootRemovalError: If ``key`` is the root's key
        """
        node = self._index.get(key)
        if node is None:
            raise KeyNotFoundError(key)
        if node is self._root:
            raise RootRemovalError(key)

        before = len(self._index)
        node.detach(self._index)
        logger.debug("Removed %r (%d nodes)", key, before - len(self._index))

    def move(self, key: Hashable, new_parent_key: Hashable) -> None:
        """
        Move a node, together with its subtree, under a new parent.

        The node becomes the last child of ``new_parent_key``. Every key in
        the moved subtree stays in the primary index.

        Raises:
            KeyNotFoundError: If ``key`` is not in the tree
            ParentNotFoundError: If ``new_parent_key`` is not in the tree
            InvalidMoveError: If ``key`` is the root, or ``new_parent_key``
                is the node itself or one of its descendants
        """
        node = self._index.get(key)
        if node is None:
            raise KeyNotFoundError(key)
        new_parent = self._index.get(new_parent_key)
        if new_parent is None:
            raise ParentNotFoundError(new_parent_key)

        if node is self._root:
            raise InvalidMoveError(key, new_parent_key, "the root cannot be moved")
        if new_parent is node or node.is_ancestor_of(new_parent):
            raise InvalidMoveError(key, new_parent_key, "target is inside the moved subtree")

        # attach purges the subtree from the index, so put it back afterwards
        node.attach(new_parent, self._index)
        for moved in node.iter_subtree():
            self._index[moved.key] = moved
        logger.debug("Moved %r under %r", key, new_parent_key)

    def add_to_secondary_index(self, tag: str, key: Hashable) -> None:
        """Append ``key`` to the list for ``tag``, creating the list if needed."""
        self._secondary_index.setdefault(tag, []).append(key)

    def find_by_secondary_index(self, tag: str) -> list[TreeNode] | None:
        """
        Return the nodes registered under ``tag``.

        Returns None for a tag that was never registered. Keys that are no
        longer in the tree are skipped; registration order is kept.
        """
        keys = self._secondary_index.get(tag)
        if keys is None:
            return None
        return [node for node in map(self._index.get, keys) if node is not None]

    def iter_depth_first(self) -> DepthFirstIterator:
        return DepthFirstIterator(self._root)

    def iter_breadth_first(self) -> BreadthFirstIterator:
        return BreadthFirstIterator(self._root)

    def iter_shortest_path(self) -> ShortestPathIterator:
        """Breadth-first traversal that tracks the depth of each node."""
        return ShortestPathIterator(self._root)

    def shortest_paths(
        self, start_key: Hashable, end_key: Hashable
    ) -> dict[int, list[Hashable]] | None:
        """Shortest downward paths from ``start_key`` to ``end_key``, keyed by length."""
        return shortest_paths(self._index, start_key, end_key)

    def _discard_for_replace(self, existing: TreeNode, parent: TreeNode) -> None:
        """Handle an insert whose key is already taken, per the duplicate policy."""
        key = existing.key
        if self.config.duplicate_keys == "reject":
            raise DuplicateKeyError(key)
        if existing is self._root:
            raise DuplicateKeyError(key, "the root cannot be replaced")
        if existing is parent or existing.is_ancestor_of(parent):
            raise DuplicateKeyError(key, "replacing it would remove the parent")

        existing.detach(self._index)
        logger.debug("Replaced stale node %r", key)
