"""
Raising variant of DirectedGraph.

Same storage and path semantics, but None endpoints raise ValueError and
queries about non-members raise NodeNotFoundError instead of returning
empty results.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TypeVar

from linkgraph.errors import NodeNotFoundError
from linkgraph.graph.directed import DirectedGraph

N = TypeVar("N", bound=Hashable)


class StrictDirectedGraph(DirectedGraph[N]):
    """DirectedGraph that reports invalid node references."""

    def add_node(self, node: N | None) -> None:
        if node is None:
            raise ValueError("node must not be None")
        super().add_node(node)

    def add_edge(self, source: N | None, target: N | None) -> None:
        if source is None or target is None:
            raise ValueError(f"Edge endpoints must not be None: {source!r} -> {target!r}")
        super().add_edge(source, target)

    def linked_nodes(self, node: N | None) -> frozenset[N]:
        self._require_member(node)
        return super().linked_nodes(node)

    def get_path(self, source: N | None, target: N | None) -> list[N]:
        """
        One shortest path from source to target.

        Raises:
            ValueError: If either endpoint is None
            NodeNotFoundError: If either endpoint is not in the graph
        """
        if source is None or target is None:
            raise ValueError(f"Path endpoints must not be None: {source!r} -> {target!r}")
        self._require_member(source)
        self._require_member(target)
        return super().get_path(source, target)

    def _require_member(self, node: N | None) -> None:
        if node is None:
            raise ValueError("node must not be None")
        if node not in self:
            raise NodeNotFoundError(node)
