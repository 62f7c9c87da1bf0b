"""Exceptions raised by tree mutations."""

from typing import Any


class TreeError(Exception):
    """Base class for all tree errors."""


class ParentNotFoundError(TreeError, KeyError):
    """The requested parent key is not in the primary index."""

    def __init__(self, parent_key: Any):
        self.parent_key = parent_key
        super().__init__(f"Parent key not found: {parent_key!r}")

    def __str__(self) -> str:
        return self.args[0]


class KeyNotFoundError(TreeError, KeyError):
    """The requested key is not in the primary index."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key not found: {key!r}")

    def __str__(self) -> str:
        return self.args[0]


class DuplicateKeyError(TreeError):
    """A node with this key already exists and cannot be replaced."""

    def __init__(self, key: Any, reason: str = "key already exists"):
        self.key = key
        self.reason = reason
        super().__init__(f"Cannot insert {key!r}: {reason}")


class RootRemovalError(TreeError):
    """The root node cannot be removed from its own tree."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Cannot remove root node {key!r}")


class InvalidMoveError(TreeError):
    """A move would detach the root or put a node under its own subtree."""

    def __init__(self, key: Any, new_parent_key: Any, reason: str):
        self.key = key
        self.new_parent_key = new_parent_key
        self.reason = reason
        super().__init__(f"Cannot move {key!r} under {new_parent_key!r}: {reason}")
