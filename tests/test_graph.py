"""Tests for lyricgraph/graph.py - adjacency matrix graph."""

import logging

import numpy as np
import pytest

from lyricgraph.graph import LyricGraph


class TestVertices:
    def test_add_vertex_reports_new_and_duplicate(self):
        graph = LyricGraph(4)

        assert graph.add_vertex("sun") is True
        assert graph.add_vertex("sun") is False
        assert graph.vertex_count == 1
        assert len(graph) == 1

    def test_add_vertices_counts_new_only(self):
        graph = LyricGraph(5)

        added = graph.add_vertices(["the", "cat", "meows", "cat", "the"])

        assert added == 3
        assert graph.vertices == ("the", "cat", "meows")

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            LyricGraph(-1)

    @pytest.mark.parametrize("capacity", [2.5, "4", None])
    def test_non_integer_capacity_rejected(self, capacity):
        with pytest.raises(TypeError):
            LyricGraph(capacity)

    def test_numpy_integer_capacity_accepted(self):
        graph = LyricGraph(np.int64(3))
        graph.add_vertices(["a", "b"])

        assert graph.create_edge("a", "b")

    def test_grows_past_capacity(self):
        graph = LyricGraph(1)
        graph.add_vertices(["a", "b", "c"])

        assert graph.create_edge("c", "a")
        assert graph.has_edge("c", "a")
        assert graph.vertex_count == 3

    def test_zero_capacity_graph_accepts_vertices(self):
        graph = LyricGraph(0)

        assert graph.add_vertex("solo")
        assert graph.create_edge("solo", "solo")
        assert graph.successors("solo") == ["solo"]


class TestEdges:
    def test_construction_round_trip(self, abac_graph):
        """Tokens a b a c give edges a->b, b->a, a->c and nothing else."""
        assert set(abac_graph.vertices) == {"a", "b", "c"}

        present = {("a", "b"), ("b", "a"), ("a", "c")}
        for src in "abc":
            for dst in "abc":
                assert abac_graph.has_edge(src, dst) == ((src, dst) in present)
        assert abac_graph.edge_count == 3

    def test_edge_idempotence(self):
        graph = LyricGraph(2)
        graph.add_vertices(["x", "y"])

        graph.create_edge("x", "y")
        once = graph.matrix.copy()
        assert graph.create_edge("x", "y")

        np.testing.assert_array_equal(graph.matrix, once)
        assert graph.edge_count == 1

    def test_unknown_endpoints_leave_matrix_unchanged(self, caplog):
        graph = LyricGraph(3)
        graph.add_vertex("known")
        before = graph.matrix.copy()

        with caplog.at_level(logging.WARNING, logger="lyricgraph.graph"):
            assert graph.create_edge("x", "y") is False
            assert graph.create_edge("known", "y") is False
            assert graph.create_edge("x", "known") is False

        np.testing.assert_array_equal(graph.matrix, before)
        assert graph.edge_count == 0
        assert "Failed to create edge" in caplog.text

    def test_self_loop(self):
        graph = LyricGraph.from_tokens(["na", "na", "na"])

        assert graph.vertex_count == 1
        assert graph.has_edge("na", "na")

    def test_edge_direction_is_row_to_column(self):
        graph = LyricGraph.from_tokens(["first", "second"])

        assert graph.matrix[0, 1] == 1
        assert graph.matrix[1, 0] == 0

    def test_successors_in_column_order(self):
        graph = LyricGraph.from_tokens(["a", "c", "a", "b", "a", "c"])

        assert graph.successors("a") == ["c", "b"]
        assert graph.successors("missing") == []

    def test_has_edge_unknown_vertex(self, abac_graph):
        assert abac_graph.has_edge("a", "zzz") is False


class TestMatrixView:
    def test_matrix_view_is_read_only(self, abac_graph):
        with pytest.raises(ValueError):
            abac_graph.matrix[0, 0] = 1

    def test_render_matrix(self):
        """'The cat meows cat' renders one row per source word."""
        graph = LyricGraph.from_tokens(["the", "cat", "meows", "cat"])

        assert graph.render_matrix() == "010\n001\n010"
