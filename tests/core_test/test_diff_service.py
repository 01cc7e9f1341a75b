# tests/core_test/test_diff_service.py

import pytest
from graph_api.models.graph import LogicalGraph, RenderedState
from graph_services.diff_service import DiffService
from graph_services.filter_service import FilterService
from graph_services.parser_service import ParserService


@pytest.fixture
def service():
    return DiffService()


class TestDiff:

    def test_replacing_a_vertex(self, service):
        diff = service.diff(
            {"a", "b", "d"}, {"a -> b", "b -> d", "d -> a"},
            {"a", "b", "c"}, {"a -> b", "b -> c", "c -> a"},
        )
        assert diff.nodes_to_add == {"d"}
        assert diff.nodes_to_remove == {"c"}
        assert diff.edges_to_add == {"b -> d", "d -> a"}
        assert diff.edges_to_remove == {"b -> c", "c -> a"}

    def test_self_diff_is_empty(self, service):
        nodes, edges = {"a", "b"}, {"a -> b"}
        assert service.diff(nodes, edges, nodes, edges).is_empty

    def test_empty_to_empty(self, service):
        assert service.diff(set(), set(), set(), set()).is_empty

    def test_from_empty_adds_everything(self, service):
        diff = service.diff({"a", "b"}, {"a -> b"}, set(), set())
        assert diff.nodes_to_add == {"a", "b"}
        assert diff.edges_to_add == {"a -> b"}
        assert not diff.has_removals

    def test_to_empty_removes_everything(self, service):
        diff = service.diff(set(), set(), {"a", "b"}, {"a -> b"})
        assert diff.nodes_to_remove == {"a", "b"}
        assert diff.edges_to_remove == {"a -> b"}
        assert not diff.has_additions

    @pytest.mark.parametrize("new_text, current_text", [
        ("a -> x", "a -> y"),
        ("a -> b\nb -> c\nc -> a", "a -> b\nb -> d\nd -> a"),
        ("a -> b", "a -> b"),
        ("", "a -> b\nb -> c"),
        ("a -> b\nb -> c", ""),
        ("a -> a", "a -> b\nb -> a"),
        ("x -> y", "a -> b"),
    ])
    def test_add_and_remove_disjoint(self, service, new_text, current_text):
        new = FilterService().apply(ParserService().parse(new_text)[1], set())
        current = FilterService().apply(ParserService().parse(current_text)[1], set())
        diff = service.diff(new.vertices, new.edges, current.vertices, current.edges)
        assert not diff.nodes_to_add & diff.nodes_to_remove
        assert not diff.edges_to_add & diff.edges_to_remove

    def test_applying_diff_reaches_target(self, service):
        new_nodes, new_edges = {"a", "b", "d"}, {"a -> b", "b -> d"}
        cur_nodes, cur_edges = {"a", "c"}, {"a -> c"}
        diff = service.diff(new_nodes, new_edges, cur_nodes, cur_edges)
        assert (cur_nodes - diff.nodes_to_remove) | diff.nodes_to_add == new_nodes
        assert (cur_edges - diff.edges_to_remove) | diff.edges_to_add == new_edges


class TestDiffGraphs:

    def test_compact_renderer_keys_match_canonical(self, service):
        graph = LogicalGraph.from_edge_keys(["a -> b"])
        state = RenderedState(["a", "b"], ["a->b"])
        assert service.diff_graphs(graph, state).is_empty
