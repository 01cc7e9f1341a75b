"""
    Abstract base classes for plugins.
    Defines the "Contract" that all renderer and visualizer plugins must follow.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Set

from ..models.graph import LogicalGraph
from ..types import ElementDescriptor, LayoutConfig


class RendererPlugin(ABC):
    """
        Abstract base class for Renderer plugins.
        Pattern: Strategy (for applying a graph diff to a visual renderer).

        The renderer owns the visual state; the reconciliation engine only
        reads it through ``query_current_elements`` and changes it through
        the three command methods.  Implementations signal failures by
        raising (see ``graph_services.exceptions``).
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the renderer.
            Example: "Cytoscape.js Renderer"
        """
        pass

    @abstractmethod
    def query_current_elements(self) -> Dict[str, List[str]]:
        """
        Report what is currently displayed.

        Returns:
            ``{"nodes": [node ids], "edges": [edge keys]}``
        """
        pass

    @abstractmethod
    def remove_elements(self, node_ids: Set[str], edge_keys: Set[str]) -> None:
        """
        Remove the matching elements in a single command.
        A node matches by id; an edge matches when its canonical key is in
        ``edge_keys``.
        """
        pass

    @abstractmethod
    def add_elements(self, descriptors: List[ElementDescriptor]) -> None:
        """
        Add elements in a single command.  Node descriptors (``{"id"}``)
        precede edge descriptors (``{"source", "target"}``).
        """
        pass

    @abstractmethod
    def run_layout(self, config: LayoutConfig) -> None:
        """Re-run the layout with the given configuration."""
        pass

    @abstractmethod
    def is_ready(self) -> bool:
        """Whether the renderer finished initializing."""
        pass

    @abstractmethod
    def has_update_entry_point(self) -> bool:
        """Whether the renderer exposes its update entry point."""
        pass


class VisualizerPlugin(ABC):
    """
        Abstract base class for Visualizer plugins.
        Pattern: Strategy (for producing the static page a renderer loads).
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the visualizer.
            Example: "Cytoscape.js Page"
        """
        pass

    @abstractmethod
    def visualize(self, graph: LogicalGraph, **options: Any) -> str:
        """
        Render the page that hosts the renderer, seeded with ``graph``.

        Returns:
            str: HTML string (may contain <script> tags).
        """
        pass
