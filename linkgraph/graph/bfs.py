"""
Breadth-first path discovery over a directed adjacency mapping.

The finder reads the graph's live adjacency directly; it never copies it.
Because BFS discovers nodes in order of edge distance, the path returned is
always one of the shortest (fewest edges). When several shortest paths exist,
the one through the earliest-inserted neighbours wins.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterable, Mapping
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


class PathFinder(Generic[N]):
    """
    Stateless BFS path finder bound to an adjacency mapping.

    Args:
        adjacency: Mapping from node to its out-neighbours
    """

    def __init__(self, adjacency: Mapping[N, Iterable[N]]) -> None:
        self._adjacency = adjacency

    def find_path(self, source: N | None, target: N | None) -> list[N]:
        """
        Find one shortest path from source to target.

        Returns:
            Nodes from source to target inclusive, or an empty list if either
            endpoint is None or not in the graph, or target is unreachable.
        """
        if source is None or target is None:
            return []
        if source not in self._adjacency or target not in self._adjacency:
            logger.debug(f"Path query with unknown endpoint: {source!r} -> {target!r}")
            return []

        queue: deque[N] = deque([source])
        visited: set[N] = {source}
        predecessors: dict[N, N] = {}

        while queue:
            current = queue.popleft()

            if current == target:
                return self._reconstruct_path(source, target, predecessors)

            for neighbor in self._adjacency.get(current, ()):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                predecessors[neighbor] = current
                queue.append(neighbor)

        logger.debug(f"No path from {source!r} to {target!r} ({len(visited)} nodes visited)")
        return []

    @staticmethod
    def _reconstruct_path(source: N, target: N, predecessors: dict[N, N]) -> list[N]:
        """Walk predecessors back from target; empty if the chain misses source."""
        path: deque[N] = deque()
        current = target
        while True:
            path.appendleft(current)
            if current not in predecessors:
                break
            current = predecessors[current]

        if path[0] != source:
            logger.warning(f"Broken predecessor chain from {target!r}, expected {source!r}")
            return []
        return list(path)
