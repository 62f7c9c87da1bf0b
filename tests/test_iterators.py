"""Tests for the depth-first, breadth-first and shortest-path iterators."""

import pytest

from multi_indexed_tree import MultiIndexedTree, ShortestPathIterator
from tests.conftest import keys


@pytest.fixture
def small_tree() -> MultiIndexedTree:
    """root -> {child1 -> {child1.1}, child2}"""
    tree = MultiIndexedTree("root", "root_value")
    tree.insert("root", "child1", "child1_value")
    tree.insert("root", "child2", "child2_value")
    tree.insert("child1", "child1.1", "child1.1_value")
    return tree


class TestDepthFirst:
    """Tests for pre-order traversal."""

    def test_preorder_left_to_right(self, small_tree):
        assert keys(small_tree.iter_depth_first()) == ["root", "child1", "child1.1", "child2"]

    def test_sample_scenario(self, sample_tree):
        assert keys(sample_tree.iter_depth_first()) == [
            "root", "child1", "child1.1", "child2", "child2.1",
        ]

    def test_iterating_tree_is_depth_first(self, sample_tree):
        assert keys(sample_tree) == keys(sample_tree.iter_depth_first())

    def test_singleton(self):
        tree = MultiIndexedTree("only")
        assert keys(tree.iter_depth_first()) == ["only"]

    def test_single_pass(self, small_tree):
        iterator = small_tree.iter_depth_first()

        assert iter(iterator) is iterator
        assert len(list(iterator)) == 4
        with pytest.raises(StopIteration):
            next(iterator)

    def test_deep_chain(self):
        tree = MultiIndexedTree(0)
        for i in range(1, 5000):
            tree.insert(i - 1, i)

        assert keys(tree.iter_depth_first()) == list(range(5000))


class TestBreadthFirst:
    """Tests for level-order traversal."""

    def test_level_order(self, small_tree):
        assert keys(small_tree.iter_breadth_first()) == ["root", "child1", "child2", "child1.1"]

    def test_sample_scenario(self, sample_tree):
        assert keys(sample_tree.iter_breadth_first()) == [
            "root", "child1", "child2", "child1.1", "child2.1",
        ]

    def test_follows_stored_child_order_after_removal(self, sample_tree):
        sample_tree.insert("root", "child3")
        sample_tree.remove("child1")

        assert keys(sample_tree.iter_breadth_first()) == ["root", "child3", "child2", "child2.1"]

    def test_lazy(self, sample_tree):
        iterator = sample_tree.iter_breadth_first()

        assert next(iterator).key == "root"
        assert next(iterator).key == "child1"


class TestShortestPathIterator:
    """Tests for breadth-first traversal with depth tracking."""

    def test_same_order_as_breadth_first(self, sample_tree):
        assert keys(sample_tree.iter_shortest_path()) == keys(sample_tree.iter_breadth_first())

    def test_reports_depth(self, sample_tree):
        pairs = [(depth, node.key) for depth, node in sample_tree.iter_shortest_path().with_depth()]

        assert pairs == [
            (0, "root"),
            (1, "child1"),
            (1, "child2"),
            (2, "child1.1"),
            (2, "child2.1"),
        ]

    def test_depth_tracks_last_yielded(self, sample_tree):
        iterator = sample_tree.iter_shortest_path()
        assert isinstance(iterator, ShortestPathIterator)
        assert iterator.depth is None

        next(iterator)
        assert iterator.depth == 0
        next(iterator)
        next(iterator)
        assert iterator.depth == 1
        node = next(iterator)
        assert iterator.depth == node.depth == 2
