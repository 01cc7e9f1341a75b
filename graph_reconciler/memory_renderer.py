"""
    InMemoryRenderer — a headless renderer that keeps its elements in sets.

    Used by the command-line REPL and by tests.  Every command is appended
    to ``log`` so callers can check exactly what a pass issued.  Failures
    can be injected per operation.
"""
import logging
from typing import Any, Dict, List, Optional, Set, Tuple

from graph_api.models.edge import Edge
from graph_api.plugins.base import RendererPlugin
from graph_api.types import ElementDescriptor, LayoutConfig

from graph_services.exceptions import RendererCommandError, RendererQueryError

logger = logging.getLogger(__name__)


class InMemoryRenderer(RendererPlugin):

    def __init__(self, ready: bool = True):
        self.nodes: Set[str] = set()
        self.edges: Set[str] = set()
        self.log: List[Tuple[str, Any]] = []
        self.layouts: List[LayoutConfig] = []
        self.ready = ready
        self.update_entry_point = ready
        self._failures: Dict[str, Exception] = {}

    def get_plugin_name(self) -> str:
        return "In-Memory Renderer"

    # ── Failure injection ────────────────────────────────────────

    def fail_on(self, operation: str, error: Optional[Exception] = None) -> None:
        """
        Make ``operation`` ("query", "remove", "add", "layout", "ready")
        raise until ``recover`` is called.
        """
        self._failures[operation] = error or (
            RendererQueryError("query failed") if operation == "query"
            else RendererCommandError(f"{operation} failed")
        )

    def recover(self, operation: Optional[str] = None) -> None:
        if operation is None:
            self._failures.clear()
        else:
            self._failures.pop(operation, None)

    def _check(self, operation: str) -> None:
        if operation in self._failures:
            raise self._failures[operation]

    # ── RendererPlugin ───────────────────────────────────────────

    def query_current_elements(self) -> Dict[str, List[str]]:
        self._check("query")
        return {
            'nodes': sorted(self.nodes),
            'edges': sorted(Edge.from_key(k).compact_key for k in self.edges),
        }

    def remove_elements(self, node_ids: Set[str], edge_keys: Set[str]) -> None:
        self._check("remove")
        self.log.append(("remove", (set(node_ids), set(edge_keys))))
        self.nodes -= set(node_ids)
        # Removing a node also removes its connected edges.
        self.edges = {
            key for key in self.edges
            if key not in edge_keys and not Edge.from_key(key).touches_any(node_ids)
        }

    def add_elements(self, descriptors: List[ElementDescriptor]) -> None:
        self._check("add")
        self.log.append(("add", [dict(d) for d in descriptors]))
        for descriptor in descriptors:
            if 'id' in descriptor:
                self.nodes.add(descriptor['id'])
                continue
            source, target = descriptor['source'], descriptor['target']
            if source not in self.nodes or target not in self.nodes:
                raise RendererCommandError(
                    f"Edge {source} -> {target} references a missing node."
                )
            self.edges.add(Edge(source, target).key)

    def run_layout(self, config: LayoutConfig) -> None:
        self._check("layout")
        self.log.append(("layout", config))
        self.layouts.append(config)

    def is_ready(self) -> bool:
        self._check("ready")
        return self.ready

    def has_update_entry_point(self) -> bool:
        return self.update_entry_point

    # ── Convenience ──────────────────────────────────────────────

    def commands(self) -> List[str]:
        """Names of the commands issued so far, in order."""
        return [name for name, _ in self.log]

    def clear_log(self) -> None:
        self.log.clear()
        self.layouts.clear()

    def __repr__(self) -> str:
        return f"InMemoryRenderer(nodes={len(self.nodes)}, edges={len(self.edges)})"
