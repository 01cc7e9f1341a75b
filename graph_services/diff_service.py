# graph_services/diff_service.py
"""
    DiffService — set algebra between the logical graph and the renderer's
    reported state.
"""
from typing import AbstractSet

from graph_api.models.graph import GraphDiff, LogicalGraph, RenderedState


class DiffService:

    def diff(self, new_nodes: AbstractSet[str], new_edges: AbstractSet[str],
             current_nodes: AbstractSet[str], current_edges: AbstractSet[str]) -> GraphDiff:
        """
        ``to_add = new - current``, ``to_remove = current - new`` for both
        nodes and edges.  The add and remove sets are always disjoint.

        ``current_*`` must be a fresh snapshot taken from the renderer
        immediately before the call.
        """
        new_nodes, new_edges = set(new_nodes), set(new_edges)
        current_nodes, current_edges = set(current_nodes), set(current_edges)
        return GraphDiff(
            nodes_to_add=new_nodes - current_nodes,
            nodes_to_remove=current_nodes - new_nodes,
            edges_to_add=new_edges - current_edges,
            edges_to_remove=current_edges - new_edges,
        )

    def diff_graphs(self, graph: LogicalGraph, state: RenderedState) -> GraphDiff:
        return self.diff(graph.vertices, graph.edges, state.nodes, state.edges)
