# graph_services/parser_service.py
"""
    ParserService — turns line-oriented ``A -> B`` text into edges and vertices.

    Malformed lines are dropped silently so a user in the middle of typing
    an edge never sees an error.
"""
from typing import List, Optional, Set, Tuple

from graph_api.models.edge import EDGE_SEPARATOR, canonical_edge, split_edge_key


class ParserService:
    """
    Pure parser for graph definitions of the form::

        a -> b
        b -> c

    A line is an edge candidate iff it contains ``->``.  It is kept only
    when it splits into exactly two non-empty trimmed endpoints.
    """

    def parse(self, text: Optional[str]) -> Tuple[Set[str], List[str]]:
        """
        :param text: Raw multi-line graph definition
        :return: ``(vertices, edges)`` where ``edges`` is the list of
                 canonical edge strings in input line order (duplicates kept)
                 and ``vertices`` the deduplicated set of all endpoints
        """
        vertices: Set[str] = set()
        edges: List[str] = []
        for line in (text or "").splitlines():
            pair = self.parse_line(line)
            if pair is None:
                continue
            source, target = pair
            edges.append(canonical_edge(source, target))
            vertices.add(source)
            vertices.add(target)
        return vertices, edges

    def parse_vertices(self, text: Optional[str]) -> Set[str]:
        """Vertex set only; independent of line order."""
        return self.parse(text)[0]

    @staticmethod
    def parse_line(line: str) -> Optional[Tuple[str, str]]:
        """Return ``(source, target)`` for a well-formed edge line, else ``None``."""
        if EDGE_SEPARATOR not in line:
            return None
        return split_edge_key(line)
