# finance_tracker/controllers/view_composer.py
from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from finance_tracker.data_model import ITransaction, Selection

T = TypeVar("T", bound=ITransaction)


def sort_for_display(transactions: Iterable[T]) -> list[T]:
    """
    Newest first. The sort is stable, so transactions sharing a date keep
    their original relative order. The input is not modified.
    """
    return sorted(transactions, key=lambda t: t.date, reverse=True)


def select_by_ids(transactions: Iterable[T], ids: Iterable[str]) -> list[T]:
    """Transactions whose id is in ``ids``, in their original order."""
    wanted = set(ids)
    return [t for t in transactions if t.id in wanted]


def working_set(
    all_transactions: Sequence[T],
    filtered: Sequence[T],
    selection: Selection | Iterable[str],
) -> list[T]:
    """
    The transactions the totals are computed over: a non-empty selection
    (resolved against the full collection) overrides the filtered view.
    """
    ids = list(selection)
    if ids:
        return select_by_ids(all_transactions, ids)
    return list(filtered)
