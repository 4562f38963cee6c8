"""
Spreadsheet ingestion.

Reads a transaction table (CSV or Excel workbook) with pandas and converts
each row into a ``Transaction``. The expected columns match the CSV export
layout (``Date``, ``Type``, ``Amount``, ``Category``, ``Payee``, ``Notes``,
``Tags``, ``Account``, ``Person``, ``Status``, ``Created At``,
``Updated At``) plus an optional ``Id`` column. Only ``Date``, ``Type`` and
``Amount`` are required. Text cells and tags are taken verbatim, so a file
written by the CSV export loads back unchanged apart from ids.
"""

# finance_tracker/controllers/transaction_loader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Union

import pandas as pd

from finance_tracker.data_model import Transaction
from finance_tracker.utilities import EXPORT_DEFAULTS

log = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("Date", "Type", "Amount")

_OPTIONAL_TEXT = {
    "category": "Category",
    "payee": "Payee",
    "notes": "Notes",
    "account": "Account",
    "person": "Person",
    "status": "Status",
}

_EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


def _cell(row: pd.Series, column: str, *, strip: bool = False) -> str:
    """String value of ``column``, verbatim unless ``strip``; empty when absent or NaN."""
    if column not in row.index:
        return ""
    value: Any = row[column]
    if value is None or pd.isna(value):
        return ""
    text = str(value)
    return text.strip() if strip else text


def read_table(path: Union[str, Path], *, sheet_name: Union[int, str] = 0) -> pd.DataFrame:
    """Read ``path`` into a string-typed DataFrame (no NaN coercion of blanks)."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    elif suffix in _EXCEL_SUFFIXES:
        df = pd.read_excel(path, dtype=str, keep_default_na=False, sheet_name=sheet_name)
    else:
        raise ValueError(f"Unsupported table type: {path.suffix or path.name}")
    df.columns = [str(c).strip() for c in df.columns]
    return df


def load_transaction_table(
    path: Union[str, Path], *, sheet_name: Union[int, str] = 0
) -> List[Transaction]:
    """Load a transaction table.

    Parameters
    ----------
    path : Path
        ``.csv`` file or Excel workbook (``.xlsx``/``.xlsm``/``.xls``).
    sheet_name : int | str
        Worksheet to read from a workbook; ignored for CSV.

    Returns
    -------
    List[Transaction]
        One transaction per data row, in file order. Rows without an ``Id``
        are numbered ``<file stem>-1``, ``<file stem>-2``, ...

    Raises
    ------
    ValueError
        If the file type is unsupported or a required column is missing.
    MalformedRecordError
        If a row carries an unparseable date, type, amount or timestamp.
    """
    path = Path(path)
    df = read_table(path, sheet_name=sheet_name)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Transaction table is missing columns: {missing}")

    delimiter = EXPORT_DEFAULTS["tag_delimiter"]
    txns: List[Transaction] = []
    for i, (_, r) in enumerate(df.iterrows()):
        tags = _cell(r, "Tags")
        txns.append(
            Transaction(
                id=_cell(r, "Id", strip=True) or f"{path.stem}-{i + 1}",
                date=_cell(r, "Date", strip=True),  # type: ignore[arg-type]
                type=_cell(r, "Type", strip=True),  # type: ignore[arg-type]
                amount=_cell(r, "Amount", strip=True),  # type: ignore[arg-type]
                tags=tuple(tags.split(delimiter)) if tags else (),
                created_at=_cell(r, "Created At", strip=True) or None,  # type: ignore[arg-type]
                updated_at=_cell(r, "Updated At", strip=True) or None,  # type: ignore[arg-type]
                **{name: _cell(r, col) for name, col in _OPTIONAL_TEXT.items()},
            )
        )
    log.info("Loaded %d transactions from %s", len(txns), path)
    return txns
