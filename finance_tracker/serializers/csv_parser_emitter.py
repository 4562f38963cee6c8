# finance_tracker/serializers/csv_parser_emitter.py
"""
Tabular (CSV) export of transactions.

Layout
------
A fixed 12-column header followed by one row per transaction::

    "Date","Type","Amount","Category","Payee","Notes","Tags","Account","Person","Status","Created At","Updated At"
    "2024-01-05","expense","50","Food","","","","","","posted","",""

- Every field is double-quoted; embedded quotes are doubled.
- Rows are joined with ``\\n``; there is no trailing newline.
- Tags are joined with ``"; "`` so they cannot be confused with the field
  separator.

``parse`` is the matching decoder. The file carries no ids, so parsed
transactions are numbered ``row-1``, ``row-2``, ... in document order.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

from finance_tracker.data_model import ExportFormat, IParserEmitter, ITransaction, Transaction
from finance_tracker.exceptions import EmptyInputError
from finance_tracker.utilities import (
    EXPORT_DEFAULTS,
    format_amount,
    format_date,
    format_timestamp,
)

TRANSACTION_COLUMNS: tuple[str, ...] = (
    "Date",
    "Type",
    "Amount",
    "Category",
    "Payee",
    "Notes",
    "Tags",
    "Account",
    "Person",
    "Status",
    "Created At",
    "Updated At",
)


def emit_quoted_rows(header: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Quote every field, join rows with LF, no trailing newline."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    text = buf.getvalue()
    return text[:-1] if text.endswith("\n") else text


class CsvTransactionParserEmitter(IParserEmitter[Transaction]):
    """Emit transactions as quoted CSV and read such CSV back."""

    file_format: ExportFormat = ExportFormat.CSV

    def __init__(self, tag_delimiter: str = EXPORT_DEFAULTS["tag_delimiter"]):
        self._tag_delimiter = tag_delimiter

    # --- required by IParserEmitter ---

    def emit(self, items: Iterable[ITransaction]) -> str:
        txns = list(items)
        if not txns:
            raise EmptyInputError()
        return emit_quoted_rows(TRANSACTION_COLUMNS, (self._row(t) for t in txns))

    def parse(self, unparsed_string: str) -> list[Transaction]:
        reader = csv.reader(io.StringIO(unparsed_string, newline=""))
        rows = [r for r in reader if r]
        if not rows:
            raise ValueError("CSV document is empty")
        header = tuple(rows[0])
        if header != TRANSACTION_COLUMNS:
            raise ValueError(
                f"Unexpected CSV header: {list(header)}; expected {list(TRANSACTION_COLUMNS)}"
            )

        out: list[Transaction] = []
        for n, row in enumerate(rows[1:], start=1):
            if len(row) != len(TRANSACTION_COLUMNS):
                raise ValueError(
                    f"Row {n}: expected {len(TRANSACTION_COLUMNS)} fields, got {len(row)}"
                )
            out.append(self._transaction(f"row-{n}", row))
        return out

    # ------- internal helpers -------

    def _row(self, t: ITransaction) -> list[str]:
        return [
            format_date(t.date),
            t.type.value,
            format_amount(t.amount),
            t.category,
            t.payee,
            t.notes,
            self._tag_delimiter.join(t.tags),
            t.account,
            t.person,
            t.status.value,
            format_timestamp(t.created_at),
            format_timestamp(t.updated_at),
        ]

    def _transaction(self, txn_id: str, row: list[str]) -> Transaction:
        rec = dict(zip(TRANSACTION_COLUMNS, row))
        tags_cell = rec["Tags"]
        return Transaction(
            id=txn_id,
            date=rec["Date"],  # type: ignore[arg-type]
            type=rec["Type"],  # type: ignore[arg-type]
            amount=rec["Amount"],  # type: ignore[arg-type]
            category=rec["Category"],
            payee=rec["Payee"],
            notes=rec["Notes"],
            tags=tuple(tags_cell.split(self._tag_delimiter)) if tags_cell else (),
            account=rec["Account"],
            person=rec["Person"],
            status=rec["Status"],  # type: ignore[arg-type]
            created_at=rec["Created At"] or None,  # type: ignore[arg-type]
            updated_at=rec["Updated At"] or None,  # type: ignore[arg-type]
        )
