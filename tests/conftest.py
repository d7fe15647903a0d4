"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from linkgraph.graph import DirectedGraph


@pytest.fixture
def graph() -> DirectedGraph[str]:
    """Return an empty graph."""
    return DirectedGraph()


@pytest.fixture
def diamond() -> DirectedGraph[str]:
    """Return A->B->C and A->D->C: two shortest paths from A to C."""
    g: DirectedGraph[str] = DirectedGraph()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("A", "D")
    g.add_edge("D", "C")
    return g


@pytest.fixture
def disconnected() -> DirectedGraph[str]:
    """Return two components: A->B and C->D."""
    g: DirectedGraph[str] = DirectedGraph()
    g.add_edge("A", "B")
    g.add_edge("C", "D")
    return g

