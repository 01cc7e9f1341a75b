"""
    Workspace — the user's graph text combined with the disabled-vertex set.

    Design Pattern: Memento (simplified)
    ─────────────────────────────────────
    The Workspace keeps a history stack of (text, disabled) snapshots so
    the user can roll back edits and toggles.

    Each workspace holds:
        • text      – the current line-oriented graph definition
        • disabled  – vertices the user has deselected; survives text edits
        • history   – stack of earlier snapshots
"""
import uuid
import logging
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

from graph_api.models.edge import canonical_edge, split_edge_key

from .request import ReconcileRequest

logger = logging.getLogger(__name__)

_Snapshot = Tuple[str, FrozenSet[str]]


def ring_graph_text(size: int = 100) -> str:
    """``i -> (i + 1) % size`` for every i: a single cycle through all vertices."""
    return "".join(f"{i} -> {(i + 1) % size}\n" for i in range(size))


class Workspace:
    """
    Holds the state a user edits between reconciliation passes.

    Attributes:
        workspace_id: Unique identifier.
        name:         Human-readable label.
    """

    def __init__(
        self,
        text: Optional[str] = None,
        disabled: Optional[Iterable[str]] = None,
        name: Optional[str] = None,
        max_history: int = 50,
    ):
        self.workspace_id: str = str(uuid.uuid4())
        self.name: str = name or f"Workspace-{self.workspace_id[:8]}"

        self._text: str = ring_graph_text() if text is None else text
        self._disabled: Set[str] = set(disabled or ())
        self._history: List[_Snapshot] = []
        self._max_history: int = max_history

    # ── Properties ───────────────────────────────────────────────

    @property
    def text(self) -> str:
        return self._text

    @property
    def disabled(self) -> FrozenSet[str]:
        return frozenset(self._disabled)

    @property
    def history_depth(self) -> int:
        """Number of snapshots in the undo history."""
        return len(self._history)

    def to_request(self) -> ReconcileRequest:
        return ReconcileRequest.of(self._text, self._disabled)

    # ── Text edits ───────────────────────────────────────────────

    def set_text(self, text: str) -> ReconcileRequest:
        """Replace the whole definition.  The disabled set is kept."""
        self._push_snapshot()
        self._text = text or ""
        logger.debug("Workspace %s: text replaced (%d lines)",
                     self.workspace_id[:8], len(self._text.splitlines()))
        return self.to_request()

    def add_edge(self, source: str, target: str) -> ReconcileRequest:
        """Append a ``source -> target`` line."""
        self._push_snapshot()
        line = canonical_edge(source, target)
        if self._text and not self._text.endswith("\n"):
            self._text += "\n"
        self._text += line + "\n"
        return self.to_request()

    def remove_edge(self, source: str, target: str) -> int:
        """
        Drop every line defining ``source -> target``.

        Returns:
            The number of lines removed (0 leaves the history untouched).
        """
        wanted = (source.strip(), target.strip())
        lines = self._text.splitlines()
        kept = [line for line in lines if split_edge_key(line) != wanted]
        removed = len(lines) - len(kept)
        if removed:
            self._push_snapshot()
            self._text = "".join(line + "\n" for line in kept)
        return removed

    def clear(self) -> ReconcileRequest:
        return self.set_text("")

    # ── Disabled-vertex toggles ──────────────────────────────────

    def disable(self, vertex: str) -> bool:
        """Returns False if ``vertex`` was already disabled."""
        if vertex in self._disabled:
            return False
        self._push_snapshot()
        self._disabled.add(vertex)
        return True

    def enable(self, vertex: str) -> bool:
        """Returns False if ``vertex`` was not disabled."""
        if vertex not in self._disabled:
            return False
        self._push_snapshot()
        self._disabled.discard(vertex)
        return True

    def toggle(self, vertex: str) -> bool:
        """Flip ``vertex``.  Returns True if it is now enabled."""
        if vertex in self._disabled:
            self.enable(vertex)
            return True
        self.disable(vertex)
        return False

    # ── History ──────────────────────────────────────────────────

    def undo(self) -> Optional[ReconcileRequest]:
        """
        Revert to the previous snapshot (one step back).

        Returns:
            The restored request, or ``None`` if history is empty.
        """
        if not self._history:
            logger.warning("Workspace %s: nothing to undo.", self.workspace_id[:8])
            return None

        text, disabled = self._history.pop()
        self._text, self._disabled = text, set(disabled)
        logger.info("Workspace %s: undo (%d disabled)",
                    self.workspace_id[:8], len(self._disabled))
        return self.to_request()

    def _push_snapshot(self) -> None:
        if len(self._history) >= self._max_history:
            self._history.pop(0)  # Drop oldest snapshot
        self._history.append((self._text, frozenset(self._disabled)))

    # ── Convenience ──────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            'workspace_id': self.workspace_id,
            'name': self.name,
            'lines': len(self._text.splitlines()),
            'disabled': sorted(self._disabled),
            'history_depth': self.history_depth,
        }

    def __repr__(self) -> str:
        return (
            f"Workspace(id={self.workspace_id[:8]}, "
            f"name='{self.name}', "
            f"lines={len(self._text.splitlines())}, "
            f"disabled={len(self._disabled)})"
        )
