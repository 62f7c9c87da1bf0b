"""Rich rendering of a tree for terminal output."""

from __future__ import annotations

from rich.markup import escape
from rich.tree import Tree

from .node import TreeNode
from .tree import MultiIndexedTree


def render_tree(
    tree: MultiIndexedTree,
    *,
    show_values: bool = True,
    max_depth: int | None = None,
) -> Tree:
    """
    Build a rich Tree mirroring the structure of ``tree``.

    Args:
        tree: The tree to render
        show_values: Show ``key: value`` instead of only the key
        max_depth: Deepest level to render (root is 0); None renders all

    Returns:
        A renderable rich Tree
    """
    rendered = Tree(_label(tree.root, show_values))
    stack: list[tuple[TreeNode, Tree, int]] = [(tree.root, rendered, 0)]

    while stack:
        node, branch, depth = stack.pop()
        if node.is_leaf():
            continue
        if max_depth is not None and depth >= max_depth:
            branch.add("[dim]…[/dim]")
            continue
        # rich keeps insertion order, so add children first and walk them after
        added = [(child, branch.add(_label(child, show_values))) for child in node.children]
        stack.extend((child, sub, depth + 1) for child, sub in reversed(added))

    return rendered


def _label(node: TreeNode, show_values: bool) -> str:
    label = f"[bold]{escape(str(node.key))}[/bold]"
    if show_values and node.value is not None:
        label += f": {escape(str(node.value))}"
    return label
