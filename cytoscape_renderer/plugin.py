import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Set

from jinja2 import Environment, PackageLoader, select_autoescape

from graph_api.models.graph import LogicalGraph
from graph_api.plugins import RendererPlugin, VisualizerPlugin
from graph_api.types import ElementDescriptor, LayoutConfig

from graph_services.exceptions import RendererCommandError, RendererQueryError
from graph_services.serialization_service import ElementSerializer

from . import scripts

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "graph.html"
CYTOSCAPE_CDN = "https://unpkg.com/cytoscape@3.30.2/dist/cytoscape.min.js"


class ScriptEngine(ABC):
    """
    Anything that can evaluate JavaScript in the page hosting Cytoscape.js
    (a web view, a headless browser session) and return the result.
    """

    @abstractmethod
    def execute_script(self, script: str) -> Any:
        pass


class CytoscapeRenderer(RendererPlugin):
    """
    Renderer that drives a Cytoscape.js page through a ``ScriptEngine``.
    Engine failures surface as ``RendererQueryError`` / ``RendererCommandError``.
    """

    def __init__(self, engine: ScriptEngine, serializer: Optional[ElementSerializer] = None):
        self._engine = engine
        self._serializer = serializer or ElementSerializer()

    def get_plugin_name(self) -> str:
        return "Cytoscape.js Renderer"

    def query_current_elements(self) -> Dict[str, List[str]]:
        try:
            raw = self._engine.execute_script(scripts.QUERY_ELEMENTS)
            if isinstance(raw, str):
                raw = json.loads(raw) if raw else {}
        except Exception as exc:
            raise RendererQueryError(f"getCurrentElements() failed: {exc}") from exc

        if not isinstance(raw, dict):
            raw = {}
        return {
            'nodes': [str(n) for n in raw.get('nodes') or []],
            'edges': [str(e) for e in raw.get('edges') or []],
        }

    def remove_elements(self, node_ids: Set[str], edge_keys: Set[str]) -> None:
        script = scripts.remove_script(
            sorted(node_ids), self._serializer.compact_edge_keys(edge_keys)
        )
        self._run(script, "remove")

    def add_elements(self, descriptors: List[ElementDescriptor]) -> None:
        self._run(scripts.add_script(self._serializer.wrap_elements(descriptors)), "add")

    def run_layout(self, config: LayoutConfig) -> None:
        self._run(scripts.layout_script(config), "layout")

    def is_ready(self) -> bool:
        return self._engine.execute_script(scripts.READY_PROBE) is True

    def has_update_entry_point(self) -> bool:
        return self._engine.execute_script(scripts.UPDATE_ENTRY_POINT_PROBE) is True

    def _run(self, script: str, command: str) -> None:
        logger.debug("Executing %s script (%d chars)", command, len(script))
        try:
            self._engine.execute_script(script)
        except Exception as exc:
            raise RendererCommandError(f"{command} command failed: {exc}") from exc


class CytoscapeVisualizer(VisualizerPlugin):
    """
    Renders the page the Cytoscape renderer expects: it defines ``cy``,
    ``getCurrentElements()``, ``window.updateGraph`` and sets
    ``window.isCytoscapeReady`` once Cytoscape.js has initialized.
    """

    def __init__(self):
        self._env = Environment(
            loader=PackageLoader("cytoscape_renderer", "templates"),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def get_plugin_name(self) -> str:
        return "Cytoscape.js Page"

    def visualize(self, graph: LogicalGraph, **options: Any) -> str:
        """
        Options:
            title:        Page title.
            script_src:   URL of cytoscape.min.js.
            layout:       ``LayoutConfig`` for the initial layout.
        """
        layout = options.get('layout') or LayoutConfig()
        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            title=options.get('title', "Graph Visualizer"),
            script_src=options.get('script_src', CYTOSCAPE_CDN),
            elements=ElementSerializer.wrap_elements(graph.to_elements()),
            layout=scripts.layout_options(layout),
        )
