"""
    ReconciliationEngine — the central orchestrator of the application.

    Design Patterns applied
    ───────────────────────
    • Facade             – single entry-point for the presentation layer;
                           hides readiness gating, workspace state and
                           the reconciliation driver.
    • Command dispatch   – every user action becomes a ``ReconcileRequest``
                           passed to ``dispatch``.
    • Observer (hooks)   – ``_listeners`` dict for presentation updates
                           (vertex list, status bar, error banners).

    Invocation model
    ────────────────
    The engine runs on a single event thread.  Requests that arrive before
    the renderer is ready, or while a pass is in flight (a listener that
    dispatches again), are held; only the latest held request runs once the
    engine is free.
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from graph_api.models.graph import LogicalGraph
from graph_api.plugins.base import RendererPlugin, VisualizerPlugin

from graph_services.exceptions import ReadinessTimeoutError
from graph_services.serialization_service import ElementSerializer

from .config import PlatformConfig
from .driver import ReconcileOutcome, ReconciliationDriver
from .plugin_loader import PluginLoader, create_renderer_loader, create_visualizer_loader
from .readiness import ImmediateScheduler, ReadinessOutcome, ReadinessWaiter, Scheduler
from .request import ReconcileRequest
from .workspace import Workspace

logger = logging.getLogger(__name__)


# ── Observer event types ─────────────────────────────────────────
EVENT_RECONCILED = "reconciled"
EVENT_RECONCILE_FAILED = "reconcile_failed"
EVENT_RENDERER_READY = "renderer_ready"
EVENT_RENDERER_TIMEOUT = "renderer_timeout"


class ReconciliationEngine:
    """
    Manages:
        • Renderer readiness (bounded polling through a ``Scheduler``).
        • The workspace: graph text and the disabled-vertex set.
        • Serialized reconciliation passes.
        • Observer hooks for the presentation layer.
    """

    def __init__(
        self,
        renderer: RendererPlugin,
        config: Optional[PlatformConfig] = None,
        scheduler: Optional[Scheduler] = None,
        workspace: Optional[Workspace] = None,
    ):
        """
        Args:
            renderer:  Renderer the engine keeps in sync.
            config:    Platform configuration (layout, readiness, etc.).
            scheduler: Timer used for readiness retries (defaults to
                       running retries immediately).
            workspace: Initial text / disabled set (defaults to the ring graph).
        """
        self._config: PlatformConfig = config or PlatformConfig()
        self._renderer = renderer
        self._driver = ReconciliationDriver(
            renderer,
            layout=self._config.layout,
            serializer=ElementSerializer(self._config.serialization),
        )
        self._workspace = workspace or Workspace(max_history=self._config.max_history_depth)
        self._waiter = ReadinessWaiter(renderer, scheduler or ImmediateScheduler(),
                                       self._config.readiness)

        self._ready = False
        self._in_flight = False
        self._pending: Optional[ReconcileRequest] = None
        self._last_outcome: Optional[ReconcileOutcome] = None

        self._vis_loader: PluginLoader[VisualizerPlugin] = create_visualizer_loader()

        # Observer listeners: event_name → [callback, ...]
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

        logger.info("ReconciliationEngine initialized with %s.", renderer.get_plugin_name())

    @classmethod
    def from_plugin(cls, renderer_name: Optional[str] = None,
                    config: Optional[PlatformConfig] = None,
                    scheduler: Optional[Scheduler] = None,
                    **renderer_kwargs: Any) -> 'ReconciliationEngine':
        """
        Build an engine around an installed renderer plugin.

        Raises:
            ValueError: If the renderer plugin is not installed.
        """
        config = config or PlatformConfig()
        loader = create_renderer_loader()
        renderer = loader.create(renderer_name or config.default_renderer, **renderer_kwargs)
        return cls(renderer, config=config, scheduler=scheduler)

    # ── Properties ───────────────────────────────────────────────

    @property
    def config(self) -> PlatformConfig:
        return self._config

    @property
    def renderer(self) -> RendererPlugin:
        return self._renderer

    @property
    def workspace(self) -> Workspace:
        return self._workspace

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def readiness(self) -> ReadinessOutcome:
        return self._waiter.outcome

    @property
    def pending_request(self) -> Optional[ReconcileRequest]:
        return self._pending

    @property
    def last_outcome(self) -> Optional[ReconcileOutcome]:
        return self._last_outcome

    # ── Lifecycle ────────────────────────────────────────────────

    def start(self) -> None:
        """Begin waiting for the renderer.  The first pass runs once it is ready."""
        self._waiter.start(self._on_readiness)

    def _on_readiness(self, outcome: ReadinessOutcome) -> None:
        if outcome is ReadinessOutcome.READY:
            self._ready = True
            self._notify(EVENT_RENDERER_READY)
            request, self._pending = self._pending, None
            self.dispatch(request or self._workspace.to_request())
        else:
            error = ReadinessTimeoutError(
                f"Renderer not ready after {self._waiter.attempts} probe(s)."
            )
            logger.error("%s Reconciliation disabled.", error)
            self._notify(EVENT_RENDERER_TIMEOUT, error=error)

    # ── Dispatch ─────────────────────────────────────────────────

    def dispatch(self, request: ReconcileRequest) -> Optional[ReconcileOutcome]:
        """
        Run a reconciliation pass for ``request``.

        Returns:
            The outcome, or ``None`` if the request was held (renderer not
            ready yet, or a pass is already running).
        """
        if not self._ready or self._in_flight:
            logger.debug("Holding request (ready=%s, in_flight=%s).",
                         self._ready, self._in_flight)
            self._pending = request
            return None

        self._in_flight = True
        try:
            outcome = self._run(request)
            while self._pending is not None:
                held, self._pending = self._pending, None
                self._run(held)
        finally:
            self._in_flight = False
        return outcome

    def reconcile(self, text: str, disabled: Iterable[str] = ()) -> Optional[ReconcileOutcome]:
        """Fire-and-forget pass for explicit text and disabled set."""
        return self.dispatch(ReconcileRequest.of(text, disabled))

    def _run(self, request: ReconcileRequest) -> ReconcileOutcome:
        outcome = self._driver.handle(request)
        self._last_outcome = outcome
        if outcome.succeeded:
            self._notify(EVENT_RECONCILED, request=request, outcome=outcome)
        else:
            self._notify(EVENT_RECONCILE_FAILED, request=request, outcome=outcome)
        return outcome

    # ── Workspace actions (each one dispatches) ──────────────────

    def set_text(self, text: str) -> Optional[ReconcileOutcome]:
        return self.dispatch(self._workspace.set_text(text))

    def disable(self, vertex: str) -> Optional[ReconcileOutcome]:
        self._workspace.disable(vertex)
        return self.dispatch(self._workspace.to_request())

    def enable(self, vertex: str) -> Optional[ReconcileOutcome]:
        self._workspace.enable(vertex)
        return self.dispatch(self._workspace.to_request())

    def toggle(self, vertex: str) -> Optional[ReconcileOutcome]:
        self._workspace.toggle(vertex)
        return self.dispatch(self._workspace.to_request())

    def refresh(self) -> Optional[ReconcileOutcome]:
        return self.dispatch(self._workspace.to_request())

    def current_graph(self) -> LogicalGraph:
        """Logical graph for the workspace, without touching the renderer."""
        return self._driver.build_graph(self._workspace.text, self._workspace.disabled)

    # ── Visualization ────────────────────────────────────────────

    def render_page(self, visualizer_name: Optional[str] = None, **options: Any) -> str:
        """
        Produce the static page a renderer loads at startup, seeded with
        the current logical graph.

        Raises:
            ValueError: If no visualizer plugin is found.
        """
        name = visualizer_name or self._config.default_visualizer
        if name is None:
            names = self._vis_loader.get_names()
            if not names:
                raise ValueError("No visualizer plugins installed.")
            name = names[0]
        visualizer = self._vis_loader.create(name)
        return visualizer.visualize(self.current_graph(), **options)

    # ── Observer pattern ─────────────────────────────────────────

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register a callback for an engine event.

        Events:
            - reconciled        (request, outcome)
            - reconcile_failed  (request, outcome)
            - renderer_ready
            - renderer_timeout  (error: ReadinessTimeoutError)
        """
        self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _notify(self, event: str, **kwargs: Any) -> None:
        """Fire all callbacks registered for the given event."""
        for cb in list(self._listeners.get(event, [])):
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error("Observer callback failed for '%s': %s", event, exc)

    def __repr__(self) -> str:
        return (
            f"ReconciliationEngine(renderer={self._renderer.get_plugin_name()!r}, "
            f"ready={self._ready}, disabled={len(self._workspace.disabled)})"
        )
