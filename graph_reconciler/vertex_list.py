"""
    VertexList — keyed container of per-vertex UI handles.

    Owned by the presentation layer.  ``sync`` updates it incrementally:
    handles of vanished vertices are released, handles for new vertices
    are created, and existing handles are left alone so their state
    survives text edits.
"""
from typing import AbstractSet, Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

THandle = TypeVar('THandle')


class VertexList(Generic[THandle]):
    """
    Usage:
        vertex_list = VertexList(lambda vertex, enabled: CheckBox(vertex, enabled))
        added, removed = vertex_list.sync(vertices, disabled)
    """

    def __init__(self, create: Callable[[str, bool], THandle],
                 release: Optional[Callable[[str, THandle], None]] = None):
        """
        Args:
            create:  Builds a handle from ``(vertex, enabled)``.
            release: Called with ``(vertex, handle)`` when a vertex vanishes.
        """
        self._create = create
        self._release = release
        self._handles: Dict[str, THandle] = {}

    def sync(self, vertices: Iterable[str],
             disabled: AbstractSet[str] = frozenset()):
        """
        Returns:
            ``(added, removed)`` vertex lists.
        """
        wanted = list(dict.fromkeys(vertices))
        wanted_set = set(wanted)

        removed: List[str] = [v for v in self._handles if v not in wanted_set]
        for vertex in removed:
            handle = self._handles.pop(vertex)
            if self._release is not None:
                self._release(vertex, handle)

        added: List[str] = []
        for vertex in wanted:
            if vertex not in self._handles:
                self._handles[vertex] = self._create(vertex, vertex not in disabled)
                added.append(vertex)

        return added, removed

    def get(self, vertex: str) -> Optional[THandle]:
        return self._handles.get(vertex)

    def vertices(self) -> List[str]:
        return list(self._handles)

    def __contains__(self, vertex: str) -> bool:
        return vertex in self._handles

    def __iter__(self) -> Iterator[str]:
        return iter(self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    def __repr__(self) -> str:
        return f"VertexList(size={len(self._handles)})"
