"""
Unit tests for BFS path discovery.
"""

import pytest

from linkgraph.graph import DirectedGraph, PathFinder


def assert_valid_path(graph: DirectedGraph, path: list, source, target) -> None:
    """Path runs source -> target along existing edges without repeats."""
    assert path[0] == source
    assert path[-1] == target
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert b in graph.linked_nodes(a)


class TestGetPath:
    """Test DirectedGraph.get_path."""

    def test_diamond_returns_a_shortest_path(self, diamond):
        """Either A-B-C or A-D-C is acceptable."""
        path = diamond.get_path("A", "C")
        assert len(path) == 3
        assert_valid_path(diamond, path, "A", "C")
        assert path in (["A", "B", "C"], ["A", "D", "C"])

    def test_disconnected_returns_empty(self, disconnected):
        """No directed walk means an empty path."""
        assert disconnected.get_path("A", "D") == []

    def test_against_edge_direction_returns_empty(self, disconnected):
        """Edges are not walked backwards."""
        assert disconnected.get_path("B", "A") == []

    def test_same_node_returns_single_element(self, diamond):
        """Path from a node to itself is just that node."""
        assert diamond.get_path("A", "A") == ["A"]

    def test_self_loop_not_repeated(self, graph):
        """A self-loop should still give [A], not [A, A]."""
        graph.add_edge("A", "A")
        assert graph.get_path("A", "A") == ["A"]

    @pytest.mark.parametrize(
        ("source", "target"),
        [(None, "C"), ("A", None), (None, None), ("Z", "C"), ("A", "Z")],
    )
    def test_invalid_endpoints_return_empty(self, diamond, source, target):
        """None or unknown endpoints give an empty path."""
        assert diamond.get_path(source, target) == []

    def test_isolated_node_to_itself(self, graph):
        """A node with no edges still reaches itself."""
        graph.add_node("A")
        assert graph.get_path("A", "A") == ["A"]

    def test_prefers_fewest_edges(self, graph):
        """BFS must not return the longer route."""
        for a, b in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("A", "E")]:
            graph.add_edge(a, b)
        assert graph.get_path("A", "E") == ["A", "E"]

    def test_handles_cycles(self, graph):
        """Cycles must not cause revisits or infinite loops."""
        for a, b in [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D")]:
            graph.add_edge(a, b)
        assert graph.get_path("A", "D") == ["A", "B", "C", "D"]
        assert graph.get_path("D", "A") == []

    def test_tie_break_follows_insertion_order(self, diamond):
        """Earliest-inserted neighbour wins among equal-length paths."""
        assert diamond.get_path("A", "C") == ["A", "B", "C"]

    def test_path_reflects_later_mutation(self, disconnected):
        """Paths are recomputed on every query."""
        assert disconnected.get_path("A", "D") == []
        disconnected.add_edge("B", "C")
        assert disconnected.get_path("A", "D") == ["A", "B", "C", "D"]

    def test_long_chain(self, graph):
        """Path over a long chain includes every node in order."""
        nodes = list(range(500))
        for a, b in zip(nodes, nodes[1:]):
            graph.add_edge(a, b)
        assert graph.get_path(0, 499) == nodes


class TestPathFinder:
    """Test PathFinder directly on plain adjacency mappings."""

    def test_works_on_plain_dict(self):
        """Any mapping of node -> iterable of neighbours is accepted."""
        finder = PathFinder({"A": ["B"], "B": ["C"], "C": []})
        assert finder.find_path("A", "C") == ["A", "B", "C"]

    def test_neighbour_missing_from_mapping(self):
        """Neighbours without their own entry are treated as sinks."""
        finder = PathFinder({"A": ["B"], "C": []})
        assert finder.find_path("A", "C") == []

    def test_broken_predecessor_chain_returns_empty(self):
        """Reconstruction refuses a chain that does not end at source."""
        path = PathFinder._reconstruct_path("A", "C", {"C": "B"})
        assert path == []

    def test_reconstruct_valid_chain(self):
        """Reconstruction walks predecessors back to source."""
        path = PathFinder._reconstruct_path("A", "C", {"C": "B", "B": "A"})
        assert path == ["A", "B", "C"]

    def test_does_not_copy_adjacency(self):
        """Finder sees changes made to the mapping after construction."""
        adjacency: dict[str, list[str]] = {"A": [], "B": []}
        finder = PathFinder(adjacency)
        adjacency["A"].append("B")
        assert finder.find_path("A", "B") == ["A", "B"]

    def test_graph_delegates_to_finder(self, diamond, monkeypatch):
        """get_path goes through PathFinder.find_path."""
        calls = []
        monkeypatch.setattr(
            PathFinder, "find_path", lambda self, s, t: calls.append((s, t)) or ["sentinel"]
        )
        assert diamond.get_path("A", "C") == ["sentinel"]
        assert calls == [("A", "C")]
