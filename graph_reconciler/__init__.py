"""
Graph Reconciler — core package.

Public API:
    ReconciliationEngine – central orchestrator (Facade)
    ReconciliationDriver – one parse → filter → diff → apply pass
    ReconcileRequest     – value produced by every user action
    Workspace            – graph text + disabled-vertex set + undo history
    ReadinessWaiter      – bounded renderer readiness polling
    VertexList           – keyed container of per-vertex UI handles
    InMemoryRenderer     – headless renderer
    PlatformConfig       – top-level configuration
    PluginLoader         – generic plugin discovery
"""
from .core import ReconciliationEngine
from .driver import ReconciliationDriver, ReconcileOutcome, ReconcilePlan
from .request import ReconcileRequest
from .workspace import Workspace, ring_graph_text
from .readiness import (
    ReadinessWaiter,
    ReadinessOutcome,
    Scheduler,
    ImmediateScheduler,
    AsyncioScheduler,
)
from .vertex_list import VertexList
from .memory_renderer import InMemoryRenderer
from .config import PlatformConfig, ReadinessConfig, LayoutConfig, SerializationConfig
from .plugin_loader import (
    PluginLoader,
    create_renderer_loader,
    create_visualizer_loader,
)

__all__ = [
    'ReconciliationEngine',
    'ReconciliationDriver',
    'ReconcileOutcome',
    'ReconcilePlan',
    'ReconcileRequest',
    'Workspace',
    'ring_graph_text',
    'ReadinessWaiter',
    'ReadinessOutcome',
    'Scheduler',
    'ImmediateScheduler',
    'AsyncioScheduler',
    'VertexList',
    'InMemoryRenderer',
    'PlatformConfig',
    'ReadinessConfig',
    'LayoutConfig',
    'SerializationConfig',
    'PluginLoader',
    'create_renderer_loader',
    'create_visualizer_loader',
]
