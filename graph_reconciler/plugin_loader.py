"""
    PluginLoader — entry-point registry for renderer and visualizer plugins.

    Design Pattern: Registry
    ────────────────────────
    Installed distributions advertise plugin classes under an entry-point
    group (see setup.py).  The loader resolves each group lazily the first
    time it is asked for a name, checks the class against the expected
    ABC, and instantiates on ``create`` with caller-supplied keyword
    arguments (a script renderer needs its engine, a visualizer needs none).
"""
import importlib.metadata
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from graph_api.plugins.base import RendererPlugin, VisualizerPlugin

logger = logging.getLogger(__name__)

TPlugin = TypeVar('TPlugin')

RENDERER_EP_GROUP = 'graph_reconciler.renderer'
VISUALIZER_EP_GROUP = 'graph_reconciler.visualizer'


class PluginLoader(Generic[TPlugin]):
    """
    Usage:
        loader = create_renderer_loader()
        loader.get_names()                         # ['cytoscape', 'memory']
        renderer = loader.create('cytoscape', engine=script_engine)
    """

    def __init__(self, plugin_base_class: Type[TPlugin], group: str):
        self._base_class = plugin_base_class
        self._group = group
        self._registry: Optional[Dict[str, Type[TPlugin]]] = None

    @property
    def group(self) -> str:
        return self._group

    # ── Discovery ────────────────────────────────────────────────

    def load_all(self) -> Dict[str, Type[TPlugin]]:
        """Name → plugin class for the group, discovered on first use."""
        if self._registry is None:
            self._registry = self._discover()
        return self._registry

    def reload(self) -> Dict[str, Type[TPlugin]]:
        """Drop manual registrations and scan the entry points again."""
        self._registry = None
        return self.load_all()

    def _discover(self) -> Dict[str, Type[TPlugin]]:
        found: Dict[str, Type[TPlugin]] = {}
        try:
            entry_points = importlib.metadata.entry_points().select(group=self._group)
        except Exception as exc:
            logger.error("Cannot read entry points for '%s': %s", self._group, exc)
            return found

        for entry_point in entry_points:
            if entry_point.name in found:
                continue
            try:
                candidate = entry_point.load()
            except Exception as exc:
                logger.error("Plugin '%s' failed to import: %s", entry_point.name, exc)
                continue
            if not self._accepts(candidate):
                logger.warning("Plugin '%s' is not a %s, ignored.",
                               entry_point.name, self._base_class.__name__)
                continue
            found[entry_point.name] = candidate
            logger.info("Plugin '%s' → %s", entry_point.name, candidate.__name__)
        return found

    def _accepts(self, candidate: Any) -> bool:
        return isinstance(candidate, type) and issubclass(candidate, self._base_class)

    # ── Lookup ───────────────────────────────────────────────────

    def register(self, name: str, plugin_cls: Type[TPlugin]) -> None:
        """
        Add a class by hand, replacing any discovered plugin of that name.

        Raises:
            TypeError: If ``plugin_cls`` is not a subclass of the group's ABC.
        """
        if not self._accepts(plugin_cls):
            raise TypeError(f"{plugin_cls!r} is not a {self._base_class.__name__}.")
        self.load_all()[name] = plugin_cls

    def get_class(self, name: str) -> Optional[Type[TPlugin]]:
        return self.load_all().get(name)

    def create(self, name: str, **kwargs: Any) -> TPlugin:
        """
        Raises:
            ValueError: If nothing is registered under ``name``.
        """
        plugin_cls = self.get_class(name)
        if plugin_cls is None:
            raise ValueError(
                f"Plugin '{name}' not found in '{self._group}'. "
                f"Available: {self.get_names()}"
            )
        return plugin_cls(**kwargs)

    def get_names(self) -> List[str]:
        return sorted(self.load_all())

    def __len__(self) -> int:
        return len(self.load_all())

    def __contains__(self, name: str) -> bool:
        return name in self.load_all()

    def __repr__(self) -> str:
        known = "?" if self._registry is None else len(self._registry)
        return f"PluginLoader(group='{self._group}', plugins={known})"


def create_renderer_loader() -> PluginLoader[RendererPlugin]:
    return PluginLoader(RendererPlugin, RENDERER_EP_GROUP)


def create_visualizer_loader() -> PluginLoader[VisualizerPlugin]:
    return PluginLoader(VisualizerPlugin, VISUALIZER_EP_GROUP)
