import pytest

from pathmatrix.algorithms.spf import DijkstraShortestPath, spf


class TestSPF:
    def test_spf_all_nodes(self, diamond):
        costs, pred = spf(diamond, "A")
        assert costs == {"A": 0, "B": 1, "C": 3, "D": 4}
        assert pred["A"] is None
        assert pred["C"][0] == "B"
        assert pred["D"][0] == "C"

    def test_spf_early_exit_settles_destination(self, diamond):
        costs, pred = spf(diamond, "A", dst_node="B")
        assert costs["B"] == 1
        assert pred["B"] == ("A", ("A", "B", 0))
        # D lies beyond the destination and is never reached
        assert "D" not in costs

    def test_spf_picks_cheapest_parallel_edge(self, parallel_edges):
        costs, pred = spf(parallel_edges, "A")
        assert costs == {"A": 0, "B": 2, "C": 3}
        assert pred["B"] == ("A", ("A", "B", 1))

    def test_spf_respects_direction(self, one_way_triangle):
        costs, _ = spf(one_way_triangle, "B")
        assert costs == {"B": 0, "C": 1, "A": 11}

    def test_spf_custom_weight_attr(self, diamond):
        for _, _, _, attrs in diamond.get_edges().values():
            attrs["delay"] = 1
        costs, _ = spf(diamond, "A", weight_attr="delay")
        assert costs["C"] == 1

    def test_spf_missing_attr_counts_as_one(self, diamond):
        costs, _ = spf(diamond, "A", weight_attr="hops")
        assert costs == {"A": 0, "B": 1, "C": 1, "D": 2}

    def test_spf_unknown_source(self, diamond):
        with pytest.raises(KeyError):
            spf(diamond, "Z")

    def test_spf_negative_weight(self, diamond):
        diamond.add_edge("A", "D", weight=-1)
        with pytest.raises(ValueError, match="Negative edge weight"):
            spf(diamond, "A")

    def test_spf_undirected_nx_graph(self, simple_undirected):
        costs, _ = spf(simple_undirected, 1)
        assert costs[5] == 20
        assert costs[6] == 11


class TestDijkstraShortestPath:
    def test_get_path(self, diamond):
        path = DijkstraShortestPath(diamond).get_path("A", "D")
        assert path.nodes == ("A", "B", "C", "D")
        assert path.weight == 4
        assert [edge[:2] for edge in path.edges] == [("A", "B"), ("B", "C"), ("C", "D")]

    def test_get_path_unreachable(self, two_islands):
        assert DijkstraShortestPath(two_islands).get_path("A", "D") is None

    def test_get_path_same_vertex_is_trivial(self, diamond):
        path = DijkstraShortestPath(diamond).get_path("C", "C")
        assert path.nodes == ("C",)
        assert path.edges == ()
        assert path.weight == 0

    def test_get_path_unknown_target(self, diamond):
        with pytest.raises(KeyError):
            DijkstraShortestPath(diamond).get_path("A", "Z")

    def test_get_path_weight(self, two_islands):
        alg = DijkstraShortestPath(two_islands)
        assert alg.get_path_weight("A", "B") == 1
        assert alg.get_path_weight("A", "C") == float("inf")

    def test_get_paths_single_source(self, two_islands):
        paths = DijkstraShortestPath(two_islands).get_paths("A")
        assert set(paths) == {"A", "B"}
        assert paths["A"].is_trivial
        assert paths["B"].nodes == ("A", "B")
