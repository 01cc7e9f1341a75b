"""
    ReconcileRequest — one value per user action.

    Text edits, the Enter key and vertex toggles each produce a request
    carrying the full graph text and the disabled-vertex set at that moment.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional


@dataclass(frozen=True)
class ReconcileRequest:
    text: str = ""
    disabled: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, text: Optional[str], disabled: Optional[Iterable[str]] = None) -> 'ReconcileRequest':
        return cls(text or "", frozenset(disabled or ()))
