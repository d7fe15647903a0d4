"""
linkgraph - generic directed graphs with BFS path discovery.

Build a graph by hand or crawl one from live Wikipedia, then ask it
for a path between two nodes.
"""

from linkgraph.errors import NetworkError, NodeNotFoundError
from linkgraph.graph import DirectedGraph, PathFinder, StrictDirectedGraph

__version__ = "0.1.0"

__all__ = [
    "DirectedGraph",
    "PathFinder",
    "StrictDirectedGraph",
    "NetworkError",
    "NodeNotFoundError",
]
