"""All-shortest-paths query over downward (parent to child) edges."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Hashable, Mapping

from .node import TreeNode


def shortest_paths(
    index: Mapping[Hashable, TreeNode],
    start_key: Hashable,
    end_key: Hashable,
) -> dict[int, list[Hashable]] | None:
    """
    Find the shortest paths from ``start_key`` down to ``end_key``.

    Distances are computed breadth-first over parent to child edges only,
    every edge costing 1. Each predecessor reaching a node at its best
    distance is recorded, so ties yield several paths.

    Args:
        index: Primary index mapping keys to nodes
        start_key: Key where paths begin
        end_key: Key where paths end

    Returns:
        Paths keyed by their length (number of keys on the path), or None if
        ``end_key`` cannot be reached downward from ``start_key``. Paths of
        equal length overwrite each other; the last one reconstructed wins.
    """
    if start_key not in index or end_key not in index:
        return None

    distances: dict[Hashable, float] = dict.fromkeys(index, math.inf)
    predecessors: dict[Hashable, list[Hashable]] = {}

    distances[start_key] = 0
    queue: deque[Hashable] = deque([start_key])

    while queue:
        current_key = queue.popleft()
        node = index.get(current_key)
        if node is None:
            continue
        new_distance = distances[current_key] + 1
        for child in node.children:
            best = distances.get(child.key, math.inf)
            if new_distance < best:
                distances[child.key] = new_distance
                predecessors[child.key] = [current_key]
                queue.append(child.key)
            elif new_distance == best:
                predecessors.setdefault(child.key, []).append(current_key)

    if distances.get(end_key, math.inf) == math.inf:
        return None

    return _trace_paths(end_key, predecessors)


def _trace_paths(
    end_key: Hashable,
    predecessors: Mapping[Hashable, list[Hashable]],
) -> dict[int, list[Hashable]]:
    """Walk predecessor chains back from ``end_key`` into root-first paths."""
    all_paths: dict[int, list[Hashable]] = {}
    stack: list[tuple[Hashable, list[Hashable]]] = [(end_key, [end_key])]

    while stack:
        key, chain = stack.pop()
        preds = predecessors.get(key)
        if not preds:
            path = list(reversed(chain))
            all_paths[len(path)] = path
            continue
        # Reversed so predecessors are explored in recorded order
        for pred in reversed(preds):
            stack.append((pred, chain + [pred]))

    return all_paths
