# finance_tracker/serializers/json_parser_emitter.py
"""
Structured (JSON) export of transactions.

The document carries the export time, schema version, currency, a count, an
aggregate summary and the reformatted transactions::

    {
      "exportDate": "2024-01-10T09:30:00.000Z",
      "version": "2.0.0",
      "currency": "AUD",
      "totalTransactions": 2,
      "summary": {...},
      "transactions": [...]
    }

Keys are emitted in that order and the text is indented by two spaces so
successive exports diff cleanly.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional

from finance_tracker.controllers.aggregator import aggregate
from finance_tracker.data_model import (
    ExportFormat,
    IParserEmitter,
    ITransaction,
    JsonValue,
    Transaction,
)
from finance_tracker.exceptions import EmptyInputError
from finance_tracker.utilities import EXPORT_DEFAULTS, format_iso_timestamp


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JsonTransactionParserEmitter(IParserEmitter[Transaction]):
    """Emit transactions as a JSON export document and read one back."""

    file_format: ExportFormat = ExportFormat.JSON

    def __init__(
        self,
        currency: str = EXPORT_DEFAULTS["currency"],
        schema_version: str = EXPORT_DEFAULTS["schema_version"],
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._currency = currency
        self._schema_version = schema_version
        self._clock = clock or _utc_now

    def build_document(self, items: Iterable[ITransaction]) -> dict[str, JsonValue]:
        txns = list(items)
        if not txns:
            raise EmptyInputError()
        return {
            "exportDate": format_iso_timestamp(self._clock()),
            "version": self._schema_version,
            "currency": self._currency,
            "totalTransactions": len(txns),
            "summary": aggregate(txns).to_dict(),
            "transactions": [t.to_dict() for t in txns],
        }

    # --- required by IParserEmitter ---

    def emit(self, items: Iterable[ITransaction]) -> str:
        return json.dumps(self.build_document(items), indent=2, ensure_ascii=False)

    def parse(self, unparsed_string: str) -> list[Transaction]:
        try:
            doc: Any = json.loads(unparsed_string)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e
        if not isinstance(doc, dict) or not isinstance(doc.get("transactions"), list):
            raise ValueError("Not a transaction export document: missing 'transactions' list")
        return [Transaction.from_record(rec) for rec in doc["transactions"]]
