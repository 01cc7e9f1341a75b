"""
    Serialization of renderer payloads.

    Builds the add-command descriptors for a diff, wraps them in the
    ``{"data": {...}}`` element shape used by Cytoscape-style renderers,
    and reads the renderer's JSON snapshot back into a ``RenderedState``.

    Design Pattern: Strategy (serialization strategy is configurable)
    ─────────────────────────────────────────────────────────────────
    ``SerializationConfig`` determines element ordering.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from graph_api.models.edge import Edge
from graph_api.models.graph import GraphDiff, RenderedState
from graph_api.types import ElementDescriptor

from .exceptions import RendererQueryError


@dataclass
class SerializationConfig:
    """
    Attributes:
        sort_elements: Emit nodes and edges in sorted order so commands
                       are reproducible.  Nodes always precede edges.
    """
    sort_elements: bool = True


class ElementSerializer:
    """
    Usage:
        serializer = ElementSerializer()
        descriptors = serializer.add_descriptors(diff)     # → [{id}, ..., {source, target}, ...]
        elements = serializer.wrap_elements(descriptors)   # → [{"data": {...}}, ...]
        state = serializer.parse_state(json_str)           # → RenderedState
    """

    def __init__(self, config: Optional[SerializationConfig] = None):
        self._config = config or SerializationConfig()

    @property
    def config(self) -> SerializationConfig:
        return self._config

    @config.setter
    def config(self, value: SerializationConfig) -> None:
        self._config = value

    # ── Outgoing commands ────────────────────────────────────────

    def add_descriptors(self, diff: GraphDiff) -> List[ElementDescriptor]:
        """One descriptor per added node, then one per added edge."""
        descriptors: List[ElementDescriptor] = [
            {'id': node} for node in self._ordered(diff.nodes_to_add)
        ]
        descriptors.extend(
            Edge.from_key(key).to_descriptor()
            for key in self._ordered(diff.edges_to_add)
        )
        return descriptors

    @staticmethod
    def wrap_elements(descriptors: Iterable[ElementDescriptor]) -> List[Dict[str, ElementDescriptor]]:
        return [{'data': dict(d)} for d in descriptors]

    def compact_edge_keys(self, edge_keys: Iterable[str]) -> List[str]:
        """Canonical keys rewritten as the renderer's ``source->target`` form."""
        return [Edge.from_key(key).compact_key for key in self._ordered(edge_keys)]

    # ── Incoming state ───────────────────────────────────────────

    def parse_state(self, raw: Any) -> RenderedState:
        """
        Read a renderer snapshot.  Accepts a JSON string, a dict, or
        ``None`` / empty (read as an empty state).

        Raises:
            RendererQueryError: If ``raw`` is a string that is not valid JSON.
        """
        if raw is None or raw == "":
            return RenderedState.empty()
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except ValueError as exc:
                raise RendererQueryError(f"Invalid renderer snapshot: {exc}") from exc
        return RenderedState.from_payload(raw)

    def _ordered(self, values: Iterable[str]) -> List[str]:
        return sorted(values) if self._config.sort_elements else list(values)
