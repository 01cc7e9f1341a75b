# graph_services/filter_service.py
"""
    FilterService — drops edges that touch a disabled vertex.
"""
from typing import AbstractSet, Iterable, Set

from graph_api.models.edge import Edge
from graph_api.models.graph import LogicalGraph


class FilterService:
    """
    Visibility filter.  An edge ``(s, t)`` is retained iff ``s`` and ``t``
    are both enabled.  Vertices are then derived from the retained edges,
    so an enabled vertex whose only edges were filtered out is hidden too.
    """

    def filter(self, edges: Iterable[str], disabled: AbstractSet[str]) -> Set[str]:
        """
        :param edges: Canonical edge strings (duplicates allowed)
        :param disabled: Vertices the user has deselected
        :return: Set of retained canonical edge strings
        """
        retained = set()
        for key in edges:
            edge = Edge.from_key(key)
            if not edge.touches_any(disabled):
                retained.add(edge.key)
        return retained

    def exposed_vertices(self, edges: Iterable[str]) -> Set[str]:
        """Flattened endpoints of the given edges."""
        return LogicalGraph.from_edge_keys(edges).vertices

    def apply(self, edges: Iterable[str], disabled: AbstractSet[str]) -> LogicalGraph:
        """Filter ``edges`` and return the resulting logical graph."""
        return LogicalGraph.from_edge_keys(self.filter(edges, disabled))
