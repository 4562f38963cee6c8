# finance_tracker/data_model/records/__init__.py

from .export_records import ExportOutcome, ExportPreview, ExportSettings
from .filter_spec import DateRange, FilterSpec
from .reference import Budget, Category
from .summaries import (
    AggregateSummary,
    CategoryStat,
    DateSpan,
    DisplayTotals,
    MonthlyTotal,
    TransactionStats,
)
from .transaction import Transaction
from .view_state import Selection, ViewState

__all__ = [
    "AggregateSummary",
    "Budget",
    "Category",
    "CategoryStat",
    "DateRange",
    "DateSpan",
    "DisplayTotals",
    "ExportOutcome",
    "ExportPreview",
    "ExportSettings",
    "FilterSpec",
    "MonthlyTotal",
    "Selection",
    "Transaction",
    "TransactionStats",
    "ViewState",
]
