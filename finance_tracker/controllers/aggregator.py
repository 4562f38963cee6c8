# finance_tracker/controllers/aggregator.py
"""
Totals and summary statistics over a transaction collection.

All functions are pure: they take a snapshot and return frozen results.
Amounts are summed as ``Decimal``. Empty input never divides by zero; the
average is reported as 0.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from finance_tracker.data_model import (
    AggregateSummary,
    CategoryStat,
    DateSpan,
    DisplayTotals,
    ITransaction,
    MonthlyTotal,
    Selection,
    TransactionStats,
    TransactionType,
)

from .view_composer import working_set

_ZERO = Decimal(0)


def _blended_average(income: Decimal, expenses: Decimal, count: int) -> Decimal:
    # Unsigned: the typical transaction size, not the net per transaction.
    if count == 0:
        return _ZERO
    return (income + expenses) / count


def aggregate(transactions: Iterable[ITransaction]) -> AggregateSummary:
    """
    Summarize ``transactions``: income/expense totals and counts, distinct
    categories (first-seen order), earliest/latest date and the blended
    average magnitude.
    """
    income = expenses = _ZERO
    n_income = n_expense = 0
    categories: dict[str, None] = {}
    earliest = latest = None

    for t in transactions:
        if t.type is TransactionType.INCOME:
            income += t.amount
            n_income += 1
        else:
            expenses += t.amount
            n_expense += 1
        categories.setdefault(t.category, None)
        if earliest is None or t.date < earliest:
            earliest = t.date
        if latest is None or t.date > latest:
            latest = t.date

    count = n_income + n_expense
    span: Optional[DateSpan] = None
    if earliest is not None and latest is not None:
        span = DateSpan(earliest=earliest, latest=latest)

    return AggregateSummary(
        total_income=income,
        total_expenses=expenses,
        income_transactions=n_income,
        expense_transactions=n_expense,
        categories=tuple(categories),
        date_range=span,
        average_transaction_amount=_blended_average(income, expenses, count),
    )


def display_totals(transactions: Iterable[ITransaction]) -> DisplayTotals:
    """Income, expenses, count and blended average for the list footer."""
    summary = aggregate(transactions)
    return DisplayTotals(
        income=summary.total_income,
        expenses=summary.total_expenses,
        count=summary.count,
        average=summary.average_transaction_amount,
    )


def totals_for_view(
    all_transactions: Sequence[ITransaction],
    filtered: Sequence[ITransaction],
    selection: Selection | Iterable[str],
) -> DisplayTotals:
    """
    Display totals over the working set: the selected transactions (looked
    up in the full collection) when anything is selected, else the filtered
    view.
    """
    return display_totals(working_set(all_transactions, filtered, selection))


def transaction_stats(transactions: Iterable[ITransaction]) -> TransactionStats:
    """Counts and totals broken down by category and by calendar month."""
    stats = TransactionStats()
    for t in transactions:
        stats.total += 1
        is_income = t.type is TransactionType.INCOME
        if is_income:
            stats.income += 1
            stats.total_income += t.amount
        else:
            stats.expense += 1
            stats.total_expense += t.amount

        cat = stats.categories.setdefault(t.category, CategoryStat())
        cat.count += 1
        cat.total += t.amount

        month = stats.monthly_totals.setdefault(f"{t.date:%Y-%m}", MonthlyTotal())
        if is_income:
            month.income += t.amount
        else:
            month.expense += t.amount
    return stats
