"""
JavaScript snippets executed inside the Cytoscape.js page.

Every payload is embedded as JSON so vertex names cannot break out of
the script.
"""
import json
from typing import Any, Dict, List

from graph_api.types import FORCE_DIRECTED, LayoutConfig

# Renderer-neutral layout names → Cytoscape.js layout names.
LAYOUT_NAMES = {
    FORCE_DIRECTED: "cose",
}

READY_PROBE = "typeof window.isCytoscapeReady === 'boolean' && window.isCytoscapeReady"
UPDATE_ENTRY_POINT_PROBE = "typeof window.updateGraph === 'function'"
QUERY_ELEMENTS = "getCurrentElements()"


def remove_script(node_ids: List[str], compact_edge_keys: List[str]) -> str:
    return (
        "cy.elements().filter(function(element) {\n"
        "    if (element.isNode()) {\n"
        f"        return {json.dumps(node_ids)}.includes(element.id());\n"
        "    } else if (element.isEdge()) {\n"
        f"        return {json.dumps(compact_edge_keys)}.includes("
        "element.data('source') + '->' + element.data('target'));\n"
        "    }\n"
        "    return false;\n"
        "}).remove();"
    )


def add_script(elements: List[Dict[str, Any]]) -> str:
    return f"cy.add({json.dumps(elements)});"


def layout_options(config: LayoutConfig) -> Dict[str, Any]:
    return {
        'name': LAYOUT_NAMES.get(config.name, config.name),
        'animate': config.animate,
        'animationDuration': config.duration_ms,
        'animationEasing': config.easing,
        'randomize': config.randomize,
    }


def layout_script(config: LayoutConfig) -> str:
    return f"cy.layout({json.dumps(layout_options(config))}).run();"
