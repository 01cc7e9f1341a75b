"""
    CommandProcessor — one line of user input in, one ``CommandResult`` out.

    The line is tokenized with ``shlex`` (quotes group vertex names that
    contain spaces, ``#`` starts a comment), mapped to a ``Command``, run
    against the engine's workspace, and any resulting ``ReconcileRequest``
    is dispatched to the engine.

    The processor also owns the presentation-side ``VertexList``: one
    ``VertexEntry`` per parsed vertex, kept in sync after every command.
"""
from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from graph_services.exceptions import CommandParseError
from graph_services.parser_service import ParserService

from ..core import ReconciliationEngine
from ..vertex_list import VertexList
from .commands import (
    Command,
    CommandResult,
    SetTextCommand,
    AddEdgeCommand,
    RemoveEdgeCommand,
    ClearCommand,
    DisableVertexCommand,
    EnableVertexCommand,
    ToggleVertexCommand,
    UndoCommand,
    RefreshCommand,
    InfoCommand,
    ListCommand,
    HelpCommand,
)

logger = logging.getLogger(__name__)

# Verbs that take no arguments.
_NULLARY: Dict[str, Callable[[], Command]] = {
    "help": HelpCommand,
    "undo": UndoCommand,
    "clear": ClearCommand,
    "refresh": RefreshCommand,
    "info": InfoCommand,
}

# Verbs that take exactly one vertex.
_VERTEX: Dict[str, Callable[[str], Command]] = {
    "disable": DisableVertexCommand,
    "enable": EnableVertexCommand,
    "toggle": ToggleVertexCommand,
}

# Verbs that take an edge.
_EDGE: Dict[str, Callable[[str, str], Command]] = {
    "add": AddEdgeCommand,
    "remove": RemoveEdgeCommand,
}

_LIST_TARGETS = ("vertices", "edges", "disabled")


@dataclass
class VertexEntry:
    """Text-mode stand-in for a vertex checkbox."""
    vertex: str
    enabled: bool = True


class CommandProcessor:
    """
    Usage:
        processor = CommandProcessor(engine)
        result = processor.process("disable b")
    """

    def __init__(self, engine: ReconciliationEngine):
        self._engine = engine
        self._parser = ParserService()
        self._vertex_list: VertexList[VertexEntry] = VertexList(VertexEntry)
        self._sync_vertex_list()

    @property
    def vertex_list(self) -> VertexList[VertexEntry]:
        return self._vertex_list

    def process(self, text: str) -> CommandResult:
        """
        Parse and execute a single command line.  Malformed input and
        failed reconciliation passes are reported in the result, never raised.
        """
        tokens = self._tokenize(text)
        if not tokens:
            return CommandResult(False, "Empty command. Type 'help' for usage.")

        try:
            command = self._parse(tokens)
        except CommandParseError as e:
            logger.debug("Rejected command %r: %s", text, e)
            return CommandResult(False, f"Parse error: {e}")

        return self._execute(command)

    # ── Execution ────────────────────────────────────────────────

    def _execute(self, command: Command) -> CommandResult:
        result = command.execute(self._engine.workspace)
        if not result.success or result.request is None:
            return result

        outcome = self._engine.dispatch(result.request)
        if command.mutates:
            self._sync_vertex_list()

        if outcome is None:
            result.message += " (renderer not ready, update queued)"
        elif not outcome.succeeded:
            result.message += f" (renderer update failed: {outcome.error})"
        elif outcome.changed:
            diff = outcome.diff
            result.message += (
                f" [+{len(diff.nodes_to_add)}/-{len(diff.nodes_to_remove)} node(s), "
                f"+{len(diff.edges_to_add)}/-{len(diff.edges_to_remove)} edge(s)]"
            )
        if outcome is not None:
            result.data["diff"] = outcome.diff.to_dict()
        return result

    def _sync_vertex_list(self) -> None:
        workspace = self._engine.workspace
        vertices = sorted(self._parser.parse_vertices(workspace.text))
        self._vertex_list.sync(vertices, workspace.disabled)
        for vertex in self._vertex_list:
            self._vertex_list.get(vertex).enabled = vertex not in workspace.disabled

    # ── Parsing ──────────────────────────────────────────────────

    @staticmethod
    def _tokenize(text: str) -> List[str]:
        try:
            return shlex.split(text or "", comments=True)
        except ValueError:
            # Unbalanced quotes: drop the comment and split on whitespace.
            return (text or "").split("#", 1)[0].split()

    def _parse(self, tokens: List[str]) -> Command:
        """
        Raises:
            CommandParseError: Unknown verb or wrong arguments.
        """
        verb, args = tokens[0].lower(), tokens[1:]

        if verb in _NULLARY:
            return _NULLARY[verb]()

        if verb == "set":
            return SetTextCommand(" ".join(args))

        if verb == "list":
            target = args[0].lower() if args else None
            if target is not None and target not in _LIST_TARGETS:
                raise CommandParseError(
                    f"Unknown list target: '{target}'. Use 'vertices', 'edges' or 'disabled'."
                )
            return ListCommand(target)

        if verb in _EDGE:
            return _EDGE[verb](*self._parse_endpoints(verb, args))

        if verb in _VERTEX:
            if len(args) != 1:
                raise CommandParseError(f"Usage: {verb} <vertex>")
            return _VERTEX[verb](args[0])

        raise CommandParseError(f"Unknown command: '{verb}'. Type 'help' for usage.")

    @staticmethod
    def _parse_endpoints(verb: str, args: List[str]) -> Tuple[str, str]:
        """Accept ``<source> <target>`` or ``<source> -> <target>``."""
        joined = " ".join(args)
        parts = [p.strip() for p in joined.split("->")] if "->" in joined else args
        if len(parts) != 2 or not all(parts):
            raise CommandParseError(f"Usage: {verb} <source> <target>")
        return parts[0], parts[1]
