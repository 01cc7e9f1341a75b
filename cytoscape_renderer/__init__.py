"""
Cytoscape.js renderer plugin — drives a Cytoscape.js page through a
script engine and provides the page template.
"""
from .plugin import CytoscapeRenderer, CytoscapeVisualizer, ScriptEngine

__all__ = ['CytoscapeRenderer', 'CytoscapeVisualizer', 'ScriptEngine']
