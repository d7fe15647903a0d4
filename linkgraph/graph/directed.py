"""
Adjacency-backed directed graph.

Nodes are any hashable values; None stands for "no node" and is ignored
by every operation instead of raising.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

from linkgraph.graph.bfs import PathFinder

N = TypeVar("N", bound=Hashable)


class DirectedGraph(Generic[N]):
    """
    Directed graph stored as node -> out-neighbours.

    Neighbours are kept in insertion-ordered dicts used as sets, so edges are
    never duplicated and path queries break ties deterministically (earliest
    inserted edge first).

    Malformed input is never an error: mutators ignore None endpoints and
    queries on unknown nodes return empty results. Use StrictDirectedGraph
    for the raising variant.

    Not thread-safe. get_path walks the live adjacency, so callers sharing a
    graph across threads must serialize mutations against all queries.
    """

    def __init__(self) -> None:
        self._graph: dict[N, dict[N, None]] = {}

    def add_node(self, node: N | None) -> None:
        """Add a node. No-op if node is None or already present."""
        if node is not None and node not in self._graph:
            self._graph[node] = {}

    def add_edge(self, source: N | None, target: N | None) -> None:
        """
        Add a directed edge, registering both endpoints as needed.

        No-op if either endpoint is None. Adding an existing edge again
        changes nothing; self-loops are recorded.
        """
        if source is None or target is None:
            return
        self._graph.setdefault(source, {})
        self._graph.setdefault(target, {})
        self._graph[source][target] = None

    def node_set(self) -> frozenset[N]:
        """All nodes in the graph (a copy)."""
        return frozenset(self._graph)

    def linked_nodes(self, node: N | None) -> frozenset[N]:
        """Nodes directly targeted from node; empty if node is unknown."""
        if node is None:
            return frozenset()
        return frozenset(self._graph.get(node, ()))

    def get_path(self, source: N | None, target: N | None) -> list[N]:
        """One shortest path from source to target, or [] if there is none."""
        return PathFinder(self._graph).find_path(source, target)

    def edge_count(self) -> int:
        """Number of directed edges, self-loops included."""
        return sum(len(neighbors) for neighbors in self._graph.values())

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __len__(self) -> int:
        return len(self._graph)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={len(self)}, edges={self.edge_count()})"
