"""
    Graph models - the logical graph derived from text, the renderer's
    reported state, and the difference between the two.
"""
from typing import Any, Dict, Iterable, List, Optional, Set

from .edge import Edge, normalize_edge_key


class LogicalGraph:
    """
    Vertex and edge sets derived purely from parsed and filtered text,
    independent of what the renderer currently displays.

    Edges are held as canonical ``"source -> target"`` strings.
    """

    def __init__(self, vertices: Optional[Iterable[str]] = None,
                 edges: Optional[Iterable[str]] = None):
        self.vertices: Set[str] = set(vertices or ())
        self.edges: Set[str] = set(edges or ())

    @classmethod
    def from_edge_keys(cls, edge_keys: Iterable[str]) -> 'LogicalGraph':
        """
        Build a graph whose vertices are the flattened endpoints of the
        given edges.  A vertex that appears in no edge is not exposed.
        """
        edges = set(edge_keys)
        vertices: Set[str] = set()
        for key in edges:
            vertices.update(Edge.from_key(key).endpoints())
        return cls(vertices, edges)

    def get_number_of_nodes(self) -> int:
        return len(self.vertices)

    def get_number_of_edges(self) -> int:
        return len(self.edges)

    def to_elements(self) -> List[Dict[str, str]]:
        """Add-command descriptors for the whole graph, nodes first."""
        elements: List[Dict[str, str]] = [{'id': v} for v in sorted(self.vertices)]
        elements.extend(Edge.from_key(k).to_descriptor() for k in sorted(self.edges))
        return elements

    def __eq__(self, other) -> bool:
        if not isinstance(other, LogicalGraph):
            return False
        return self.vertices == other.vertices and self.edges == other.edges

    def __repr__(self) -> str:
        return f"LogicalGraph(nodes={len(self.vertices)}, edges={len(self.edges)})"


class RenderedState:
    """
    The renderer's self-reported node ids and edge keys.

    Owned by the renderer and fetched fresh on every pass; edge keys are
    normalized to canonical form so they compare against ``LogicalGraph``.
    """

    def __init__(self, nodes: Optional[Iterable[str]] = None,
                 edges: Optional[Iterable[str]] = None):
        self.nodes: Set[str] = {str(n) for n in (nodes or ())}
        self.edges: Set[str] = set()
        for raw in edges or ():
            key = normalize_edge_key(str(raw))
            if key is not None:
                self.edges.add(key)

    @classmethod
    def empty(cls) -> 'RenderedState':
        return cls()

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]]) -> 'RenderedState':
        """
        Build from a ``{"nodes": [...], "edges": [...]}`` record.
        Missing or ``null`` fields are read as empty.
        """
        if not isinstance(payload, dict):
            return cls.empty()
        return cls(payload.get('nodes') or (), payload.get('edges') or ())

    def __repr__(self) -> str:
        return f"RenderedState(nodes={len(self.nodes)}, edges={len(self.edges)})"


class GraphDiff:
    """
    Set differences between a logical graph and the rendered state:
    ``to_add = new - current`` and ``to_remove = current - new``.
    """

    def __init__(self, nodes_to_add: Set[str], nodes_to_remove: Set[str],
                 edges_to_add: Set[str], edges_to_remove: Set[str]):
        self.nodes_to_add = nodes_to_add
        self.nodes_to_remove = nodes_to_remove
        self.edges_to_add = edges_to_add
        self.edges_to_remove = edges_to_remove

    @property
    def has_removals(self) -> bool:
        return bool(self.nodes_to_remove or self.edges_to_remove)

    @property
    def has_additions(self) -> bool:
        return bool(self.nodes_to_add or self.edges_to_add)

    @property
    def is_empty(self) -> bool:
        return not (self.has_removals or self.has_additions)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            'nodes_to_add': sorted(self.nodes_to_add),
            'nodes_to_remove': sorted(self.nodes_to_remove),
            'edges_to_add': sorted(self.edges_to_add),
            'edges_to_remove': sorted(self.edges_to_remove),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, GraphDiff):
            return False
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"GraphDiff(+{len(self.nodes_to_add)}/-{len(self.nodes_to_remove)} nodes, "
            f"+{len(self.edges_to_add)}/-{len(self.edges_to_remove)} edges)"
        )
