# finance_tracker/serializers/__init__.py
from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from finance_tracker.data_model import ExportFormat, ExportSettings, IParserEmitter, Transaction

from .csv_parser_emitter import TRANSACTION_COLUMNS, CsvTransactionParserEmitter, emit_quoted_rows
from .json_parser_emitter import JsonTransactionParserEmitter
from .reference_csv import (
    BUDGET_COLUMNS,
    CATEGORY_COLUMNS,
    emit_budgets_csv,
    emit_categories_csv,
)


def parser_emitter_for(
    fmt: ExportFormat | str,
    settings: Optional[ExportSettings] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> IParserEmitter[Transaction]:
    """Serializer for ``fmt`` (case-insensitive token or ExportFormat)."""
    settings = settings or ExportSettings()
    fmt = ExportFormat.parse(fmt)
    if fmt is ExportFormat.JSON:
        return JsonTransactionParserEmitter(
            currency=settings.currency,
            schema_version=settings.schema_version,
            clock=clock,
        )
    return CsvTransactionParserEmitter()


__all__ = [
    "TRANSACTION_COLUMNS",
    "CATEGORY_COLUMNS",
    "BUDGET_COLUMNS",
    "CsvTransactionParserEmitter",
    "JsonTransactionParserEmitter",
    "emit_quoted_rows",
    "emit_categories_csv",
    "emit_budgets_csv",
    "parser_emitter_for",
]
