"""
Shortest-body search.

Breadth-first search over attainable partial sums. Nodes are running sums,
edges append one alphabet value. Processing the frontier strictly FIFO means
the first path that produces the target has the minimum number of elements.

Bounds (see SearchConfig):
- a partial sum is enqueued at most once (first time it is reached)
- only sums inside [min_sum, max_sum] are enqueued
- paths longer than max_depth are not expanded

Paths are stored as parent links (sum -> previous sum, value), not per node.
"""

from __future__ import annotations
from collections import deque
from typing import Optional, Sequence

from app.main.sequence_solver.config import ALPHABET, SearchConfig
from app.main.sequence_solver.models import SearchStats


def shortest_body(target_sum: int,
                  config: Optional[SearchConfig] = None,
                  alphabet: Sequence[int] = ALPHABET,
                  stats: Optional[SearchStats] = None) -> Optional[list[int]]:
    """
    Find the shortest sequence of alphabet values summing to target_sum.

    Args:
        target_sum: Sum the body must reach
        config: Search bounds (default: SearchConfig())
        alphabet: Values that may be appended (default: ALPHABET)
        stats: Optional counters, filled in place

    Returns:
        List of values (possibly empty for target_sum == 0),
        or None if the target is not reachable within the bounds.

    Notes:
        - The target test runs before the window test, so a target just
          outside the window is still found from a sum inside it.
        - Start sum 0 is marked visited before the search begins.

    Example:
        >>> shortest_body(0)
        []
        >>> shortest_body(16)
        [16]
    """
    if target_sum == 0:
        return []

    if config is None:
        config = SearchConfig()

    # sum -> (previous sum, value appended); each visited sum appears once
    parents: dict[int, Optional[tuple[int, int]]] = {0: None}
    queue: deque[tuple[int, int]] = deque([(0, 0)])

    try:
        while queue:
            current_sum, depth = queue.popleft()

            if stats is not None:
                stats.max_depth_reached = max(stats.max_depth_reached, depth)

            if depth > config.max_depth:
                continue

            if stats is not None:
                stats.nodes_expanded += 1

            for value in alphabet:
                next_sum = current_sum + value

                if next_sum == target_sum:
                    return _rebuild_path(parents, current_sum) + [value]

                if next_sum not in parents and config.in_window(next_sum):
                    parents[next_sum] = (current_sum, value)
                    queue.append((next_sum, depth + 1))

        return None
    finally:
        if stats is not None:
            stats.sums_visited = len(parents)


def _rebuild_path(parents: dict[int, Optional[tuple[int, int]]], end_sum: int) -> list[int]:
    """Follow parent links from end_sum back to the start sum 0."""
    path = []
    link = parents[end_sum]
    while link is not None:
        previous_sum, value = link
        path.append(value)
        link = parents[previous_sum]
    path.reverse()
    return path
