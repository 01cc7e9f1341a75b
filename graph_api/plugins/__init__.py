"""
Plugin contracts — abstract base classes for Renderer and Visualizer plugins.
"""
from .base import RendererPlugin, VisualizerPlugin

__all__ = ['RendererPlugin', 'VisualizerPlugin']
