"""
    Edge model - a directed pair of vertex identifiers.

    The canonical textual form ``"source -> target"`` is the identity of an
    edge: two edges are equal iff their canonical strings are equal.
"""
from typing import Dict, Optional, Tuple

EDGE_SEPARATOR = "->"


def canonical_edge(source: str, target: str) -> str:
    """Build the canonical key for an edge (single space around the arrow)."""
    return f"{source.strip()} {EDGE_SEPARATOR} {target.strip()}"


def split_edge_key(raw: str) -> Optional[Tuple[str, str]]:
    """
    Split a textual edge into its two trimmed endpoints.

    Every occurrence of the separator counts, so ``"a -> b -> c"`` yields
    three parts and is rejected, as is any line with an empty endpoint.

    Returns:
        ``(source, target)`` or ``None`` for malformed input.
    """
    if raw is None or EDGE_SEPARATOR not in raw:
        return None

    parts = [part.strip() for part in raw.split(EDGE_SEPARATOR)]
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def normalize_edge_key(raw: str) -> Optional[str]:
    """
    Normalize any textual edge (canonical or the renderer's compact
    ``"a->b"``) to the canonical key.  Returns ``None`` if malformed.
    """
    pair = split_edge_key(raw)
    if pair is None:
        return None
    return canonical_edge(*pair)


class Edge:
    """
    A directed edge between two vertices.
    Vertices are plain strings; they carry no attributes beyond identity.
    """

    def __init__(self, source: str, target: str):
        """
        Args:
            source: Source vertex identifier (trimmed)
            target: Target vertex identifier (trimmed)
        """
        self.source = str(source).strip()
        self.target = str(target).strip()

    @classmethod
    def from_key(cls, raw: str) -> 'Edge':
        """
        Build an edge from its textual form.

        Raises:
            ValueError: If ``raw`` is not a single ``source -> target`` pair.
        """
        pair = split_edge_key(raw)
        if pair is None:
            raise ValueError(f"Malformed edge: {raw!r}")
        return cls(*pair)

    @property
    def key(self) -> str:
        """Canonical ``"source -> target"`` string."""
        return canonical_edge(self.source, self.target)

    @property
    def compact_key(self) -> str:
        """``source->target`` as the renderer reports it."""
        return f"{self.source}{EDGE_SEPARATOR}{self.target}"

    def endpoints(self) -> Tuple[str, str]:
        return self.source, self.target

    def touches_any(self, vertices) -> bool:
        """True if either endpoint is in ``vertices``."""
        return self.source in vertices or self.target in vertices

    def to_descriptor(self) -> Dict[str, str]:
        """Add-command descriptor: edges carry only source and target."""
        return {'source': self.source, 'target': self.target}

    def __repr__(self) -> str:
        return f"Edge({self.key})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return False
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
