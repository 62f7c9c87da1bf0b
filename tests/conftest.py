"""Shared test fixtures for multi-indexed-tree."""

import pytest
from click.testing import CliRunner

from multi_indexed_tree import (
    ENV_DUPLICATE_KEYS,
    ENV_MAX_RENDER_DEPTH,
    MultiIndexedTree,
    TreeConfig,
)


def build_sample_tree(config: TreeConfig | None = None) -> MultiIndexedTree:
    """Build the sample tree used across tests.

    Structure:
        root
        ├── child1
        │   └── child1.1
        └── child2
            └── child2.1
    """
    tree = MultiIndexedTree("root", "root_value", config=config)
    tree.insert("root", "child1", "child1_value")
    tree.insert("root", "child2", "child2_value")
    tree.insert("child1", "child1.1", "child1.1_value")
    tree.insert("child2", "child2.1", "child2.1_value")
    return tree


def assert_positions_consistent(tree: MultiIndexedTree) -> None:
    """Every non-root node sits at its cached index in its parent's children."""
    for node in tree.iter_depth_first():
        if node.is_root():
            continue
        assert node.parent.children[node.index] is node


def keys(nodes) -> list:
    return [node.key for node in nodes]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure overrides from the outer environment don't leak in."""
    monkeypatch.delenv(ENV_DUPLICATE_KEYS, raising=False)
    monkeypatch.delenv(ENV_MAX_RENDER_DEPTH, raising=False)


@pytest.fixture
def cli_runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_tree() -> MultiIndexedTree:
    """The sample tree with the default (reject) duplicate policy."""
    return build_sample_tree()


@pytest.fixture
def replacing_tree() -> MultiIndexedTree:
    """The sample tree configured to replace duplicate keys."""
    return build_sample_tree(TreeConfig(duplicate_keys="replace"))
