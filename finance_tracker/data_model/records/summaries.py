from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from finance_tracker.data_model.interfaces import JsonValue
from finance_tracker.utilities import amount_to_json, format_date


@dataclass(frozen=True)
class DateSpan:
    earliest: date
    latest: date


@dataclass(frozen=True)
class AggregateSummary:
    """
    Derived statistics over a transaction collection.

    ``average_transaction_amount`` is the blended magnitude
    ``(income + expenses) / count``, not a signed net average.
    """

    total_income: Decimal = Decimal(0)
    total_expenses: Decimal = Decimal(0)
    income_transactions: int = 0
    expense_transactions: int = 0
    categories: tuple[str, ...] = ()
    date_range: Optional[DateSpan] = None
    average_transaction_amount: Decimal = Decimal(0)

    @property
    def net_amount(self) -> Decimal:
        return self.total_income - self.total_expenses

    @property
    def unique_categories(self) -> int:
        return len(self.categories)

    @property
    def count(self) -> int:
        return self.income_transactions + self.expense_transactions

    def to_dict(self) -> dict[str, JsonValue]:
        span = self.date_range
        return {
            "totalIncome": amount_to_json(self.total_income),
            "totalExpenses": amount_to_json(self.total_expenses),
            "netAmount": amount_to_json(self.net_amount),
            "incomeTransactions": self.income_transactions,
            "expenseTransactions": self.expense_transactions,
            "uniqueCategories": self.unique_categories,
            "categories": list(self.categories),
            "dateRange": {
                "earliest": format_date(span.earliest) if span else None,
                "latest": format_date(span.latest) if span else None,
            },
            "averageTransactionAmount": amount_to_json(self.average_transaction_amount),
        }


@dataclass(frozen=True)
class DisplayTotals:
    """Totals shown under the transaction list for the current working set."""

    income: Decimal = Decimal(0)
    expenses: Decimal = Decimal(0)
    count: int = 0
    average: Decimal = Decimal(0)

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass
class CategoryStat:
    count: int = 0
    total: Decimal = Decimal(0)


@dataclass
class MonthlyTotal:
    income: Decimal = Decimal(0)
    expense: Decimal = Decimal(0)


@dataclass
class TransactionStats:
    """Per-category and per-month breakdown; months keyed ``YYYY-MM``."""

    total: int = 0
    income: int = 0
    expense: int = 0
    total_income: Decimal = Decimal(0)
    total_expense: Decimal = Decimal(0)
    categories: dict[str, CategoryStat] = field(default_factory=dict)
    monthly_totals: dict[str, MonthlyTotal] = field(default_factory=dict)
