"""CLI for Multi-Indexed Tree."""

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import TreeConfig, load_config
from .errors import TreeError
from .render import render_tree
from .tree import MultiIndexedTree

console = Console()
error_console = Console(stderr=True)

# Used when no --edge is given
SAMPLE_EDGES = [
    ("root", "child1"),
    ("root", "child2"),
    ("child1", "child1.1"),
    ("child2", "child2.1"),
]


def parse_edge(value: str) -> tuple[str, str]:
    """Split a ``PARENT:CHILD`` option value."""
    parent, sep, child = value.partition(":")
    if not sep or not parent or not child:
        raise click.BadParameter(f"expected PARENT:CHILD, got {value!r}", param_hint="--edge")
    return parent, child


def build_tree(
    root_key: str, edges: list[tuple[str, str]], config: TreeConfig
) -> MultiIndexedTree:
    """Build a tree from parent/child pairs; each value is ``<key>_value``."""
    tree = MultiIndexedTree(root_key, f"{root_key}_value", config=config)
    for parent, child in edges:
        tree.insert(parent, child, f"{child}_value")
    return tree


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    error_console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="mitree")
@click.option("--root", "root_key", default="root", show_default=True, help="Key of the root node")
@click.option(
    "--edge",
    "edges",
    multiple=True,
    metavar="PARENT:CHILD",
    help="Insert CHILD under PARENT (repeatable, applied in order)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON config file",
)
@click.pass_context
def main(ctx: click.Context, root_key: str, edges: tuple[str, ...], config_path: Path | None) -> None:
    """Multi-Indexed Tree - build a keyed tree and inspect it.

    Without --edge and with the default root, a small sample tree is used.
    """
    try:
        config = load_config(config_path)
    except (json.JSONDecodeError, ValidationError) as e:
        fail(f"Invalid config file {config_path}: {e}")

    if edges:
        pairs = [parse_edge(edge) for edge in edges]
    else:
        pairs = SAMPLE_EDGES if root_key == "root" else []

    try:
        tree = build_tree(root_key, pairs, config)
    except TreeError as e:
        fail(str(e))

    ctx.obj = {"tree": tree, "config": config}


@main.command()
@click.option("--max-depth", type=click.IntRange(min=0), default=None, help="Deepest level to show")
@click.pass_obj
def show(obj: dict, max_depth: int | None) -> None:
    """Render the tree."""
    config: TreeConfig = obj["config"]
    if max_depth is None:
        max_depth = config.max_render_depth
    console.print(render_tree(obj["tree"], show_values=config.show_values, max_depth=max_depth))


@main.command()
@click.option(
    "--order",
    type=click.Choice(["depth", "breadth"]),
    default="depth",
    show_default=True,
    help="Traversal order",
)
@click.pass_obj
def traverse(obj: dict, order: str) -> None:
    """Print node keys in traversal order, one per line."""
    tree: MultiIndexedTree = obj["tree"]
    nodes = tree.iter_depth_first() if order == "depth" else tree.iter_breadth_first()
    for node in nodes:
        console.print(str(node.key), markup=False, highlight=False)


@main.command()
@click.argument("start")
@click.argument("end")
@click.pass_obj
def paths(obj: dict, start: str, end: str) -> None:
    """Print the shortest downward paths from START to END."""
    tree: MultiIndexedTree = obj["tree"]
    result = tree.shortest_paths(start, end)
    if result is None:
        fail(f"No path from {start!r} to {end!r}")

    for length, path in sorted(result.items()):
        console.print(f"{length}: {' -> '.join(map(str, path))}", markup=False, highlight=False)


if __name__ == "__main__":
    main()
