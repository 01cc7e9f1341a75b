"""
    Platform configuration — layout command, readiness retries, defaults.

    Provides typed configuration objects for the reconciliation engine.
    ``LayoutConfig`` lives in ``graph_api.types`` and ``SerializationConfig``
    in ``graph_services.serialization_service``; both are re-exported here.
"""
from dataclasses import dataclass, field
from typing import Optional

from graph_api.types import LayoutConfig
from graph_services.serialization_service import SerializationConfig


@dataclass
class ReadinessConfig:
    """
    Bounded readiness polling before the first reconciliation.

    Attributes:
        max_retries: Probes after the first one before giving up.
        delay_ms:    Fixed delay between probes.
    """
    max_retries: int = 10
    delay_ms: int = 500

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0


@dataclass
class PlatformConfig:
    """
    Top-level configuration for the reconciliation engine.

    Attributes:
        layout:             Re-layout command issued after a non-empty diff.
        readiness:          Renderer readiness polling.
        serialization:      Element ordering.
        max_history_depth:  How many text / disabled-set snapshots a
                            Workspace keeps for undo.
        default_renderer:   Entry-point name of the default renderer plugin.
        default_visualizer: Entry-point name of the default visualizer plugin.
    """
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    readiness: ReadinessConfig = field(default_factory=ReadinessConfig)
    serialization: SerializationConfig = field(default_factory=SerializationConfig)
    max_history_depth: int = 50
    default_renderer: Optional[str] = "memory"
    default_visualizer: Optional[str] = "cytoscape"
