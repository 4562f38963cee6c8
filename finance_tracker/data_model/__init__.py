# finance_tracker/data_model/__init__.py
from .interfaces import (
    Cancelled, Delivered, DeliveryResult, ExportFormat, ExportScope,
    ExportStatus, IDelivery, IParserEmitter, ITransaction, IToDict,
    JsonValue, TransactionStatus, TransactionType)
from .records import (
    AggregateSummary, Budget, Category, CategoryStat, DateRange, DateSpan,
    DisplayTotals, ExportOutcome, ExportPreview, ExportSettings, FilterSpec,
    MonthlyTotal, Selection, Transaction, TransactionStats, ViewState)
__all__ = [
    "Cancelled", "Delivered", "DeliveryResult", "ExportFormat", "ExportScope",
    "ExportStatus", "IDelivery", "IParserEmitter", "ITransaction", "IToDict",
    "JsonValue", "TransactionStatus", "TransactionType", "AggregateSummary",
    "Budget", "Category", "CategoryStat", "DateRange", "DateSpan",
    "DisplayTotals", "ExportOutcome", "ExportPreview", "ExportSettings",
    "FilterSpec", "MonthlyTotal", "Selection", "Transaction",
    "TransactionStats", "ViewState"]
