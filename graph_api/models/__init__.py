from .edge import Edge, canonical_edge, normalize_edge_key, split_edge_key
from .graph import LogicalGraph, RenderedState, GraphDiff

__all__ = [
    'Edge',
    'canonical_edge',
    'normalize_edge_key',
    'split_edge_key',
    'LogicalGraph',
    'RenderedState',
    'GraphDiff',
]
