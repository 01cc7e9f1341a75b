# tests/core_test/test_filter_service.py

import pytest
from graph_services.filter_service import FilterService
from graph_services.parser_service import ParserService


@pytest.fixture
def service():
    return FilterService()


@pytest.fixture
def triangle_edges():
    return ParserService().parse("a -> b\nb -> c\nc -> a")[1]


class TestFilter:

    def test_disabled_vertex_hides_its_edges(self, service, triangle_edges):
        graph = service.apply(triangle_edges, {"b"})
        assert graph.edges == {"c -> a"}
        assert graph.vertices == {"a", "c"}

    def test_nothing_disabled_keeps_everything(self, service, triangle_edges):
        graph = service.apply(triangle_edges, set())
        assert graph.edges == {"a -> b", "b -> c", "c -> a"}
        assert graph.vertices == {"a", "b", "c"}

    @pytest.mark.parametrize("disabled", [
        set(),
        {"a"},
        {"b"},
        {"a", "c"},
        {"a", "b", "c"},
        {"unknown"},
    ])
    def test_retained_edges_touch_no_disabled_vertex(self, service, triangle_edges, disabled):
        retained = service.filter(triangle_edges, disabled)
        for key in triangle_edges:
            source, target = key.split(" -> ")
            expected = source not in disabled and target not in disabled
            assert (key in retained) == expected

    def test_enabled_vertex_with_only_hidden_edges_is_not_exposed(self, service):
        graph = service.apply(["a -> b"], {"b"})
        assert graph.vertices == set()
        assert graph.edges == set()

    def test_duplicates_collapse(self, service):
        assert service.filter(["a -> b", "a -> b"], set()) == {"a -> b"}

    def test_idempotent(self, service, triangle_edges):
        once = service.filter(triangle_edges, {"c"})
        twice = service.filter(once, {"c"})
        assert once == twice

    def test_unknown_disabled_vertex_is_harmless(self, service, triangle_edges):
        assert service.filter(triangle_edges, {"zzz"}) == service.filter(triangle_edges, set())


class TestExposedVertices:

    def test_flattened_endpoints(self, service):
        assert service.exposed_vertices(["a -> b", "b -> c"]) == {"a", "b", "c"}

    def test_empty(self, service):
        assert service.exposed_vertices([]) == set()
