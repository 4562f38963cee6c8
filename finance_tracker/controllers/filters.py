# finance_tracker/controllers/filters.py
"""
Filter predicate evaluation.

``matches`` decides whether a single transaction satisfies every active
constraint of a ``FilterSpec``; ``apply_filters`` keeps the matching
transactions in their original order. Both are pure and never raise for
well-formed transactions.

Quick presets build the date ranges offered as one-click filters.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Iterable, Optional, TypeVar

from finance_tracker.data_model import DateRange, FilterSpec, ITransaction

T = TypeVar("T", bound=ITransaction)

# ------------------------ Filtering helpers ------------------------


def searchable_text(t: ITransaction) -> str:
    """Payee, notes, category and tags, space-joined and lower-cased."""
    return " ".join([t.payee, t.notes, t.category, " ".join(t.tags)]).lower()


def matches(t: ITransaction, spec: FilterSpec) -> bool:
    """True when ``t`` passes every active constraint in ``spec``."""
    if spec.category and t.category != spec.category:
        return False
    if spec.person and t.person != spec.person:
        return False
    if spec.type and t.type.value != spec.type:
        return False
    if spec.date_range is not None and t.date not in spec.date_range:
        return False
    if spec.search_text and spec.search_text.lower() not in searchable_text(t):
        return False
    return True


def apply_filters(txns: Iterable[T], spec: Optional[FilterSpec]) -> list[T]:
    """Transactions matching ``spec`` (all of them when ``spec`` is None)."""
    if spec is None or spec.is_empty():
        return list(txns)
    return [t for t in txns if matches(t, spec)]


# ------------------------ Quick presets ------------------------


def _shift_months(d: date, months: int) -> date:
    """Same day ``months`` away, clamped to the end of shorter months."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _month_bounds(d: date) -> DateRange:
    last_day = calendar.monthrange(d.year, d.month)[1]
    return DateRange(d.replace(day=1), d.replace(day=last_day))


def this_month(today: date) -> DateRange:
    return _month_bounds(today)


def last_month(today: date) -> DateRange:
    first_of_month = today.replace(day=1)
    return _month_bounds(first_of_month - timedelta(days=1))


def last_12_months(today: date) -> DateRange:
    """From the same day twelve months back through ``today``."""
    return DateRange(_shift_months(today, -12), today)


QUICK_FILTERS = {
    "This Month": this_month,
    "Last Month": last_month,
    "Last 12 Months": last_12_months,
}
