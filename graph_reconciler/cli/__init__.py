"""
CLI package — text commands that drive the reconciliation engine.

Design Patterns
───────────────
• Command       – each user action is a ``Command`` object whose result
                  carries the ``ReconcileRequest`` to dispatch.
• Interpreter   – parsing the CLI syntax into structured command objects.
"""
from .command_processor import CommandProcessor, VertexEntry
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

__all__ = [
    'CommandProcessor',
    'VertexEntry',
    'Command',
    'CommandResult',
    'SetTextCommand',
    'AddEdgeCommand',
    'RemoveEdgeCommand',
    'ClearCommand',
    'DisableVertexCommand',
    'EnableVertexCommand',
    'ToggleVertexCommand',
    'UndoCommand',
    'RefreshCommand',
    'InfoCommand',
    'ListCommand',
    'HelpCommand',
]
