# tests/core_test/test_engine.py

import pytest
from cytoscape_renderer.plugin import CytoscapeVisualizer
from graph_reconciler.config import PlatformConfig, ReadinessConfig
from graph_reconciler.core import (
    EVENT_RECONCILE_FAILED, EVENT_RECONCILED, EVENT_RENDERER_READY,
    EVENT_RENDERER_TIMEOUT, ReconciliationEngine,
)
from graph_reconciler.memory_renderer import InMemoryRenderer
from graph_reconciler.readiness import ReadinessOutcome
from graph_reconciler.request import ReconcileRequest
from graph_reconciler.workspace import Workspace
from graph_services.exceptions import ReadinessTimeoutError

TRIANGLE = "a -> b\nb -> c\nc -> a"
SQUARE_WITH_D = "a -> b\nb -> d\nd -> a"


@pytest.fixture
def slow_renderer():
    return InMemoryRenderer(ready=False)


@pytest.fixture
def gated_engine(slow_renderer, scheduler):
    eng = ReconciliationEngine(slow_renderer, scheduler=scheduler, workspace=Workspace(text=""))
    eng.start()
    return eng


class TestStartup:

    def test_default_workspace_renders_ring(self, renderer):
        engine = ReconciliationEngine(renderer)
        engine.start()
        assert engine.is_ready
        assert len(renderer.nodes) == 100
        assert "99 -> 0" in renderer.edges

    def test_requests_held_until_ready(self, gated_engine, slow_renderer, scheduler):
        assert gated_engine.set_text("a -> b") is None
        assert gated_engine.set_text(TRIANGLE) is None
        assert slow_renderer.log == []
        assert gated_engine.pending_request == ReconcileRequest.of(TRIANGLE)

        slow_renderer.ready = True
        slow_renderer.update_entry_point = True
        scheduler.run_next()

        assert gated_engine.is_ready
        assert gated_engine.pending_request is None
        assert slow_renderer.commands() == ["add", "layout"]
        assert slow_renderer.edges == {"a -> b", "b -> c", "c -> a"}

    def test_timeout_disables_reconciliation(self, slow_renderer, scheduler):
        config = PlatformConfig(readiness=ReadinessConfig(max_retries=2))
        engine = ReconciliationEngine(slow_renderer, config=config, scheduler=scheduler)
        errors = []
        engine.subscribe(EVENT_RENDERER_TIMEOUT, lambda error: errors.append(error))
        engine.start()
        scheduler.run_all()

        assert engine.readiness is ReadinessOutcome.TIMED_OUT
        assert len(errors) == 1
        assert isinstance(errors[0], ReadinessTimeoutError)
        assert engine.set_text("a -> b") is None
        assert slow_renderer.log == []

    def test_ready_event(self, renderer):
        engine = ReconciliationEngine(renderer, workspace=Workspace(text=""))
        events = []
        engine.subscribe(EVENT_RENDERER_READY, lambda: events.append("ready"))
        engine.start()
        assert events == ["ready"]


class TestDispatch:

    def test_set_text_reconciles(self, engine, renderer):
        outcome = engine.set_text(TRIANGLE)
        assert outcome.succeeded
        assert renderer.nodes == {"a", "b", "c"}
        assert engine.last_outcome is outcome

    def test_disabled_set_survives_text_edits(self, engine, renderer):
        engine.set_text(TRIANGLE)
        engine.disable("b")
        engine.set_text(SQUARE_WITH_D)
        assert renderer.edges == {"d -> a"}
        assert renderer.nodes == {"a", "d"}

    def test_toggle_and_enable(self, engine, renderer):
        engine.set_text(TRIANGLE)
        engine.toggle("a")
        assert renderer.edges == {"b -> c"}
        engine.enable("a")
        assert renderer.edges == {"a -> b", "b -> c", "c -> a"}

    def test_refresh_repairs_external_changes(self, engine, renderer):
        engine.set_text("a -> b")
        renderer.nodes.discard("b")
        renderer.edges.clear()
        outcome = engine.refresh()
        assert outcome.diff.nodes_to_add == {"b"}
        assert renderer.edges == {"a -> b"}

    def test_reconcile_explicit(self, engine, renderer):
        engine.reconcile(TRIANGLE, {"c"})
        assert renderer.edges == {"a -> b"}

    def test_current_graph_does_not_touch_renderer(self, engine, renderer):
        engine.workspace.set_text("x -> y")
        assert engine.current_graph().edges == {"x -> y"}
        assert renderer.log == []

    def test_reentrant_dispatch_is_coalesced(self, engine, renderer):
        held = []

        def on_reconciled(request, outcome):
            if not held:
                held.append(engine.dispatch(ReconcileRequest.of("a -> b")))
                held.append(engine.dispatch(ReconcileRequest.of("x -> y")))

        engine.subscribe(EVENT_RECONCILED, on_reconciled)
        engine.set_text(TRIANGLE)

        assert held == [None, None]
        assert engine.pending_request is None
        assert renderer.edges == {"x -> y"}
        assert renderer.commands().count("layout") == 2


class TestObservers:

    def test_reconciled_event(self, engine):
        seen = []
        engine.subscribe(EVENT_RECONCILED, lambda request, outcome: seen.append(outcome))
        engine.set_text("a -> b")
        assert len(seen) == 1
        assert seen[0].graph.edges == {"a -> b"}

    def test_failed_event(self, engine, renderer):
        failures = []
        engine.subscribe(EVENT_RECONCILE_FAILED,
                         lambda request, outcome: failures.append(outcome.error))
        renderer.fail_on("add")
        engine.set_text("a -> b")
        assert failures == ["add failed"]

    def test_unsubscribe(self, engine):
        seen = []
        callback = lambda request, outcome: seen.append(outcome)  # noqa: E731
        engine.subscribe(EVENT_RECONCILED, callback)
        engine.unsubscribe(EVENT_RECONCILED, callback)
        engine.set_text("a -> b")
        assert seen == []

    def test_listener_error_is_contained(self, engine, renderer):
        def broken(request, outcome):
            raise RuntimeError("listener bug")

        engine.subscribe(EVENT_RECONCILED, broken)
        outcome = engine.set_text("a -> b")
        assert outcome.succeeded
        assert renderer.edges == {"a -> b"}


class TestPlugins:

    def test_from_plugin_unknown_renderer(self):
        with pytest.raises(ValueError):
            ReconciliationEngine.from_plugin("no-such-renderer")

    def test_render_page(self, engine):
        engine._vis_loader.register("page", CytoscapeVisualizer)
        engine.workspace.set_text("a -> b")
        html = engine.render_page("page", title="My Graph")
        assert "<title>My Graph</title>" in html
        assert '{"data": {"id": "a"}}' in html
        assert '{"data": {"source": "a", "target": "b"}}' in html
