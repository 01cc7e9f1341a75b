"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command encapsulates one user action on a ``Workspace``.
    Commands that change the text or the disabled set return the
    resulting ``ReconcileRequest`` in their ``CommandResult``; the
    ``CommandProcessor`` hands it to the engine.

    Supported commands:
    ───────────────────
        set '<text>'
        add <source> <target>
        remove <source> <target>
        disable <vertex>
        enable <vertex>
        toggle <vertex>
        clear
        undo
        refresh
        list [vertices|edges|disabled]
        info
        help
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from graph_services.filter_service import FilterService
from graph_services.parser_service import ParserService

from ..request import ReconcileRequest
from ..workspace import Workspace

_parser = ParserService()
_filter = FilterService()


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable output.
        request:  Reconcile request to dispatch, if the command changed state.
        data:     Optional structured data for programmatic consumers.
    """
    success: bool
    message: str
    request: Optional[ReconcileRequest] = None
    data: Optional[Dict[str, Any]] = field(default_factory=dict)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all CLI commands.

    Design Pattern: Command
    """

    @abstractmethod
    def execute(self, workspace: Workspace) -> CommandResult:
        """Execute the command on the given workspace."""
        ...

    @property
    def mutates(self) -> bool:
        """Whether this command can change what the renderer should show."""
        return False


def _parsed_vertices(workspace: Workspace):
    return _parser.parse_vertices(workspace.text)


# ═════════════════════════════════════════════════════════════════
#  TEXT COMMANDS
# ═════════════════════════════════════════════════════════════════

class SetTextCommand(Command):
    """
    Replace the whole graph definition.

    Syntax:
        set 'a -> b\\nb -> c'
    """

    def __init__(self, text: str):
        self._text = text.replace("\\n", "\n")

    def execute(self, workspace: Workspace) -> CommandResult:
        request = workspace.set_text(self._text)
        vertices, edges = _parser.parse(request.text)
        return CommandResult(
            True,
            f"Graph text set: {len(edges)} edge line(s), {len(vertices)} vertex(es).",
            request,
        )

    @property
    def mutates(self) -> bool:
        return True


class AddEdgeCommand(Command):
    """
    Append an edge line.

    Syntax:
        add <source> <target>
    """

    def __init__(self, source: str, target: str):
        self._source = source.strip()
        self._target = target.strip()

    def execute(self, workspace: Workspace) -> CommandResult:
        if not self._source or not self._target:
            return CommandResult(False, "Edge endpoints cannot be empty.")
        if "->" in self._source or "->" in self._target:
            return CommandResult(False, "Edge endpoints cannot contain '->'.")
        request = workspace.add_edge(self._source, self._target)
        return CommandResult(True, f"Edge added: {self._source} -> {self._target}.", request)

    @property
    def mutates(self) -> bool:
        return True


class RemoveEdgeCommand(Command):
    """
    Remove every line defining an edge.

    Syntax:
        remove <source> <target>
    """

    def __init__(self, source: str, target: str):
        self._source = source
        self._target = target

    def execute(self, workspace: Workspace) -> CommandResult:
        removed = workspace.remove_edge(self._source, self._target)
        if not removed:
            return CommandResult(False, f"Edge '{self._source} -> {self._target}' not found.")
        return CommandResult(
            True,
            f"Edge '{self._source} -> {self._target}' removed ({removed} line(s)).",
            workspace.to_request(),
        )

    @property
    def mutates(self) -> bool:
        return True


class ClearCommand(Command):
    """
    Clear the graph text.  Disabled vertices are kept.

    Syntax:
        clear
    """

    def execute(self, workspace: Workspace) -> CommandResult:
        return CommandResult(True, "Graph cleared.", workspace.clear())

    @property
    def mutates(self) -> bool:
        return True


# ═════════════════════════════════════════════════════════════════
#  VERTEX COMMANDS
# ═════════════════════════════════════════════════════════════════

class DisableVertexCommand(Command):
    """
    Hide a vertex and every edge touching it.

    Syntax:
        disable <vertex>
    """

    def __init__(self, vertex: str):
        self._vertex = vertex

    def execute(self, workspace: Workspace) -> CommandResult:
        if self._vertex in workspace.disabled:
            return CommandResult(False, f"Vertex '{self._vertex}' is already disabled.")
        if self._vertex not in _parsed_vertices(workspace):
            return CommandResult(False, f"Vertex '{self._vertex}' not found.")
        workspace.disable(self._vertex)
        return CommandResult(True, f"Vertex '{self._vertex}' disabled.", workspace.to_request())

    @property
    def mutates(self) -> bool:
        return True


class EnableVertexCommand(Command):
    """
    Show a previously disabled vertex.

    Syntax:
        enable <vertex>
    """

    def __init__(self, vertex: str):
        self._vertex = vertex

    def execute(self, workspace: Workspace) -> CommandResult:
        if not workspace.enable(self._vertex):
            return CommandResult(False, f"Vertex '{self._vertex}' is not disabled.")
        return CommandResult(True, f"Vertex '{self._vertex}' enabled.", workspace.to_request())

    @property
    def mutates(self) -> bool:
        return True


class ToggleVertexCommand(Command):
    """
    Flip a vertex between enabled and disabled.

    Syntax:
        toggle <vertex>
    """

    def __init__(self, vertex: str):
        self._vertex = vertex

    def execute(self, workspace: Workspace) -> CommandResult:
        if (self._vertex not in workspace.disabled
                and self._vertex not in _parsed_vertices(workspace)):
            return CommandResult(False, f"Vertex '{self._vertex}' not found.")
        enabled = workspace.toggle(self._vertex)
        state = "enabled" if enabled else "disabled"
        return CommandResult(
            True,
            f"Vertex '{self._vertex}' {state}.",
            workspace.to_request(),
            data={"vertex": self._vertex, "enabled": enabled},
        )

    @property
    def mutates(self) -> bool:
        return True


# ═════════════════════════════════════════════════════════════════
#  SESSION COMMANDS
# ═════════════════════════════════════════════════════════════════

class UndoCommand(Command):
    """
    Undo the last text edit or toggle.

    Syntax:
        undo
    """

    def execute(self, workspace: Workspace) -> CommandResult:
        request = workspace.undo()
        if request is None:
            return CommandResult(False, "Nothing to undo.")
        return CommandResult(
            True,
            f"Undo successful (history depth: {workspace.history_depth}).",
            request,
        )

    @property
    def mutates(self) -> bool:
        return True


class RefreshCommand(Command):
    """
    Re-run reconciliation without changing anything (picks up external
    changes to the renderer).

    Syntax:
        refresh
    """

    def execute(self, workspace: Workspace) -> CommandResult:
        return CommandResult(True, "Refreshing.", workspace.to_request())

    @property
    def mutates(self) -> bool:
        return True


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS (no state change)
# ═════════════════════════════════════════════════════════════════

class InfoCommand(Command):
    """
    Summarize the workspace.

    Syntax:
        info
    """

    def execute(self, workspace: Workspace) -> CommandResult:
        vertices, edges = _parser.parse(workspace.text)
        graph = _filter.apply(edges, workspace.disabled)
        msg = (
            f"Workspace '{workspace.name}': "
            f"{len(edges)} edge line(s), {len(vertices)} vertex(es), "
            f"{len(workspace.disabled)} disabled; "
            f"visible: {graph.get_number_of_nodes()} node(s), "
            f"{graph.get_number_of_edges()} edge(s)"
        )
        return CommandResult(True, msg, data=workspace.to_dict())


class ListCommand(Command):
    """
    List vertices, edges or disabled vertices.

    Syntax:
        list vertices
        list edges
        list disabled
        list   (lists vertices and edges)
    """

    def __init__(self, target: Optional[str] = None):
        self._target = target  # "vertices", "edges", "disabled", or None

    def execute(self, workspace: Workspace) -> CommandResult:
        vertices, edges = _parser.parse(workspace.text)
        disabled = workspace.disabled
        lines: List[str] = []

        if self._target in (None, "vertices"):
            lines.append(f"── Vertices ({len(vertices)}) ──")
            for vertex in sorted(vertices):
                mark = " " if vertex in disabled else "x"
                lines.append(f"  [{mark}] {vertex}")

        if self._target in (None, "edges"):
            visible = _filter.filter(edges, disabled)
            unique = list(dict.fromkeys(edges))
            lines.append(f"── Edges ({len(unique)}) ──")
            for key in unique:
                suffix = "" if key in visible else "  (hidden)"
                lines.append(f"  {key}{suffix}")

        if self._target == "disabled":
            lines.append(f"── Disabled ({len(disabled)}) ──")
            lines.extend(f"  {vertex}" for vertex in sorted(disabled))

        return CommandResult(True, "\n".join(lines))


class HelpCommand(Command):
    """
    Display available CLI commands.

    Syntax:
        help
    """

    def execute(self, workspace: Workspace) -> CommandResult:
        help_text = """
Available commands:
───────────────────────────────────────────────────────
  set '<text>'
      Replace the graph definition (use \\n between lines).
      Example: set 'a -> b\\nb -> c'

  add <source> <target>
      Append an edge line.

  remove <source> <target>
      Remove every line defining this edge.

  disable <vertex> | enable <vertex> | toggle <vertex>
      Hide or show a vertex and its edges.

  clear
      Remove all edge lines (disabled vertices are kept).

  undo
      Undo the last edit or toggle.

  refresh
      Re-sync the renderer without changing anything.

  list [vertices|edges|disabled]
      List vertices, edges, or disabled vertices.

  info
      Show a summary of the workspace.

  help
      Show this help text.
───────────────────────────────────────────────────────
""".strip()
        return CommandResult(True, help_text)
