# tests/conftest.py
"""
Shared test fixtures.
Fake collaborators: an in-memory renderer and a manually driven scheduler.
"""
import pytest

from graph_reconciler.core import ReconciliationEngine
from graph_reconciler.driver import ReconciliationDriver
from graph_reconciler.memory_renderer import InMemoryRenderer
from graph_reconciler.readiness import Scheduler
from graph_reconciler.workspace import Workspace


class ManualScheduler(Scheduler):
    """Collects scheduled callbacks; tests run them one tick at a time."""

    def __init__(self):
        self.calls = []

    def call_later(self, delay_s, callback):
        self.calls.append((delay_s, callback))

    def run_next(self):
        _, callback = self.calls.pop(0)
        callback()

    def run_all(self):
        while self.calls:
            self.run_next()


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def renderer() -> InMemoryRenderer:
    return InMemoryRenderer()


@pytest.fixture
def driver(renderer) -> ReconciliationDriver:
    return ReconciliationDriver(renderer)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def engine(renderer) -> ReconciliationEngine:
    """Started engine over an empty workspace; the renderer is ready."""
    eng = ReconciliationEngine(renderer, workspace=Workspace(text=""))
    eng.start()
    renderer.clear_log()
    return eng
