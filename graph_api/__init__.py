"""
Graph Reconciler API — models, renderer payload types and plugin contracts.
"""
from .types import ElementDescriptor, LayoutConfig, FORCE_DIRECTED
from .models.edge import (
    Edge,
    EDGE_SEPARATOR,
    canonical_edge,
    normalize_edge_key,
    split_edge_key,
)
from .models.graph import LogicalGraph, RenderedState, GraphDiff
from .plugins.base import RendererPlugin, VisualizerPlugin

__all__ = [
    'ElementDescriptor',
    'LayoutConfig',
    'FORCE_DIRECTED',
    'Edge',
    'EDGE_SEPARATOR',
    'canonical_edge',
    'normalize_edge_key',
    'split_edge_key',
    'LogicalGraph',
    'RenderedState',
    'GraphDiff',
    'RendererPlugin',
    'VisualizerPlugin',
]
