"""
    ReconciliationDriver — parse → filter → diff → apply.

    One pass takes the full graph text and the disabled-vertex set, reads
    a fresh snapshot of what the renderer displays, and issues at most one
    remove command, one add command and one layout command.  Nothing is
    cached between passes, so external changes to the renderer are picked
    up by the next pass.

    A pass never raises: a failed state query is read as an empty state and
    a failed command ends the pass early.  Both are logged and reported in
    the returned ``ReconcileOutcome``.
"""
import logging
from dataclasses import dataclass, field
from typing import AbstractSet, List, Optional

from graph_api.models.graph import GraphDiff, LogicalGraph, RenderedState
from graph_api.plugins.base import RendererPlugin
from graph_api.types import LayoutConfig

from graph_services.diff_service import DiffService
from graph_services.filter_service import FilterService
from graph_services.parser_service import ParserService
from graph_services.serialization_service import ElementSerializer

from .request import ReconcileRequest

logger = logging.getLogger(__name__)

COMMAND_REMOVE = "remove"
COMMAND_ADD = "add"
COMMAND_LAYOUT = "layout"


@dataclass
class ReconcilePlan:
    """The pure part of a pass: target graph and the diff against a snapshot."""
    graph: LogicalGraph
    diff: GraphDiff


@dataclass
class ReconcileOutcome:
    """
    Result of one reconciliation pass.

    Attributes:
        graph:           Filtered logical graph the pass converged towards.
        diff:            Computed add / remove sets.
        state_available: False if the renderer query failed and an empty
                         state was substituted.
        commands:        Renderer commands that completed, in order.
        error:           Message of the command failure that ended the pass.
    """
    graph: LogicalGraph
    diff: GraphDiff
    state_available: bool = True
    commands: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def changed(self) -> bool:
        return not self.diff.is_empty


class ReconciliationDriver:
    """
    Applies one reconciliation pass to a renderer.

    Usage:
        driver = ReconciliationDriver(renderer)
        outcome = driver.reconcile("a -> b\\nb -> c", disabled={"c"})
    """

    def __init__(
        self,
        renderer: RendererPlugin,
        layout: Optional[LayoutConfig] = None,
        serializer: Optional[ElementSerializer] = None,
    ):
        self._renderer = renderer
        self._layout = layout or LayoutConfig()
        self._serializer = serializer or ElementSerializer()

        self._parser = ParserService()
        self._filter = FilterService()
        self._differ = DiffService()

    @property
    def renderer(self) -> RendererPlugin:
        return self._renderer

    @property
    def layout(self) -> LayoutConfig:
        return self._layout

    # ── Pure planning ────────────────────────────────────────────

    def build_graph(self, text: str, disabled: AbstractSet[str]) -> LogicalGraph:
        """Parse ``text`` and drop edges touching ``disabled``."""
        _, edges = self._parser.parse(text)
        return self._filter.apply(edges, disabled)

    def plan(self, text: str, disabled: AbstractSet[str],
             state: RenderedState) -> ReconcilePlan:
        graph = self.build_graph(text, disabled)
        return ReconcilePlan(graph, self._differ.diff_graphs(graph, state))

    # ── Full pass ────────────────────────────────────────────────

    def handle(self, request: ReconcileRequest) -> ReconcileOutcome:
        return self.reconcile(request.text, request.disabled)

    def reconcile(self, text: str, disabled: AbstractSet[str]) -> ReconcileOutcome:
        state, available = self._fetch_state()
        plan = self.plan(text, disabled, state)
        outcome = ReconcileOutcome(plan.graph, plan.diff, state_available=available)

        if plan.diff.is_empty:
            logger.debug("Reconcile: renderer already matches (%d nodes, %d edges).",
                         plan.graph.get_number_of_nodes(),
                         plan.graph.get_number_of_edges())
            return outcome

        try:
            self._apply(plan.diff, outcome)
        except Exception as exc:
            outcome.error = str(exc) or exc.__class__.__name__
            logger.error("Error updating graph after %s: %s",
                         outcome.commands or "no commands", outcome.error)
            return outcome

        logger.info("Reconciled %r → %d nodes, %d edges.",
                    plan.diff, plan.graph.get_number_of_nodes(),
                    plan.graph.get_number_of_edges())
        return outcome

    # ── Internal helpers ─────────────────────────────────────────

    def _fetch_state(self):
        try:
            raw = self._renderer.query_current_elements()
            return self._serializer.parse_state(raw), True
        except Exception as exc:
            logger.warning("Renderer state query failed, assuming empty state: %s", exc)
            return RenderedState.empty(), False

    def _apply(self, diff: GraphDiff, outcome: ReconcileOutcome) -> None:
        if diff.has_removals:
            self._renderer.remove_elements(set(diff.nodes_to_remove),
                                           set(diff.edges_to_remove))
            outcome.commands.append(COMMAND_REMOVE)

        if diff.has_additions:
            self._renderer.add_elements(self._serializer.add_descriptors(diff))
            outcome.commands.append(COMMAND_ADD)

        self._renderer.run_layout(self._layout)
        outcome.commands.append(COMMAND_LAYOUT)
