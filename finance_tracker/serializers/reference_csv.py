# finance_tracker/serializers/reference_csv.py
"""CSV exports for the category and budget lists, quoted like transactions."""

from __future__ import annotations

from typing import Iterable

from finance_tracker.data_model import Budget, Category
from finance_tracker.exceptions import EmptyInputError
from finance_tracker.utilities import format_amount, format_date, format_timestamp

from .csv_parser_emitter import emit_quoted_rows

CATEGORY_COLUMNS = ("Name", "Type", "Color", "Icon", "Created At", "Updated At")
BUDGET_COLUMNS = (
    "Category",
    "Amount",
    "Period",
    "Start Date",
    "End Date",
    "Created At",
    "Updated At",
)


def emit_categories_csv(categories: Iterable[Category]) -> str:
    items = list(categories)
    if not items:
        raise EmptyInputError("categories")
    rows = (
        [
            c.name,
            c.type,
            c.color,
            c.icon,
            format_timestamp(c.created_at),
            format_timestamp(c.updated_at),
        ]
        for c in items
    )
    return emit_quoted_rows(CATEGORY_COLUMNS, rows)


def emit_budgets_csv(budgets: Iterable[Budget]) -> str:
    items = list(budgets)
    if not items:
        raise EmptyInputError("budgets")
    rows = (
        [
            b.category,
            format_amount(b.amount),
            b.period,
            format_date(b.start_date) if b.start_date else "",
            format_date(b.end_date) if b.end_date else "",
            format_timestamp(b.created_at),
            format_timestamp(b.updated_at),
        ]
        for b in items
    )
    return emit_quoted_rows(BUDGET_COLUMNS, rows)
