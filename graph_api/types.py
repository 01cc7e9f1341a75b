"""
    Renderer command payload types - layout configuration and element
    descriptors.
"""
from dataclasses import dataclass
from typing import Any, Dict

# Node descriptors carry only ``id``; edge descriptors only ``source``/``target``.
ElementDescriptor = Dict[str, str]

FORCE_DIRECTED = "force-directed"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Re-layout command issued after any non-empty reconciliation.

    Attributes:
        name:        Layout algorithm (renderer-neutral name).
        animate:     Whether the renderer animates node movement.
        duration_ms: Fixed animation duration.
        easing:      Animation easing function.
        randomize:   Randomize initial positions before laying out.
    """
    name: str = FORCE_DIRECTED
    animate: bool = True
    duration_ms: int = 500
    easing: str = "ease"
    randomize: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'animate': self.animate,
            'durationMs': self.duration_ms,
            'easing': self.easing,
            'randomizeInitialPositions': self.randomize,
        }
