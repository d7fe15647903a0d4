"""
Graph module.

Provides a generic directed graph and BFS pathfinding:
- DirectedGraph: permissive graph (None / unknown nodes are no-ops)
- StrictDirectedGraph: same graph, raising on invalid node references
- PathFinder: BFS shortest path over an adjacency mapping
"""

from linkgraph.graph.bfs import PathFinder
from linkgraph.graph.directed import DirectedGraph
from linkgraph.graph.strict import StrictDirectedGraph

__all__ = ["DirectedGraph", "PathFinder", "StrictDirectedGraph"]
