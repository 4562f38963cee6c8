from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from finance_tracker.data_model.interfaces import ExportFormat, ExportScope, ITransaction

from .filter_spec import FilterSpec


@dataclass(frozen=True)
class Selection:
    """
    Immutable, insertion-ordered set of selected transaction ids. Every
    operation returns a new Selection.
    """

    ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", tuple(dict.fromkeys(str(i) for i in self.ids)))

    @classmethod
    def of(cls, ids: Iterable[str]) -> Selection:
        return cls(tuple(ids))

    def __contains__(self, txn_id: object) -> bool:
        return str(txn_id) in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids)

    def select(self, txn_id: str) -> Selection:
        txn_id = str(txn_id)
        if txn_id in self.ids:
            return self
        return Selection(self.ids + (txn_id,))

    def discard(self, txn_id: str) -> Selection:
        txn_id = str(txn_id)
        if txn_id not in self.ids:
            return self
        return Selection(tuple(i for i in self.ids if i != txn_id))

    def toggle(self, txn_id: str) -> Selection:
        txn_id = str(txn_id)
        return self.discard(txn_id) if txn_id in self.ids else self.select(txn_id)

    def toggle_all(self, view: Sequence[ITransaction]) -> Selection:
        """Everything in ``view`` ↔ nothing, decided by comparing sizes."""
        if len(self.ids) == len(view):
            return Selection()
        return Selection(tuple(t.id for t in view))

    def clear(self) -> Selection:
        return Selection()


@dataclass(frozen=True)
class ViewState:
    """Snapshot of the transaction screen's UI state."""

    filters: FilterSpec = field(default_factory=FilterSpec)
    selection: Selection = field(default_factory=Selection)
    scope: ExportScope = ExportScope.FILTERED
    export_format: ExportFormat = ExportFormat.CSV
