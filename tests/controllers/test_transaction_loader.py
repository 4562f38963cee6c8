from __future__ import annotations

from decimal import Decimal

import pandas as pd
import pytest

from finance_tracker.controllers.transaction_loader import load_transaction_table
from finance_tracker.data_model import Transaction, TransactionType
from finance_tracker.serializers import CsvTransactionParserEmitter


def test_loads_exported_csv(tmp_path):
    """An exported CSV loads back with the same field values."""
    original = [
        Transaction(id="a", date="2024-01-05", type="expense", amount="50.25", category="Food",
                    tags=("lunch", "work"), payee="Cafe, Main St"),
        Transaction(id="b", date="2024-01-06", type="income", amount="200", status="pending"),
    ]
    path = tmp_path / "ledger.csv"
    path.write_text(CsvTransactionParserEmitter().emit(original), encoding="utf-8")

    loaded = load_transaction_table(path)

    assert [t.id for t in loaded] == ["ledger-1", "ledger-2"]
    assert loaded[0].amount == Decimal("50.25")
    assert loaded[0].payee == "Cafe, Main St"
    assert loaded[0].tags == ("lunch", "work")
    assert loaded[1].type is TransactionType.INCOME
    assert loaded[1].status.value == "pending"


def test_loads_excel_with_id_column(tmp_path):
    path = tmp_path / "book.xlsx"
    pd.DataFrame(
        {
            "Id": ["x1", "x2"],
            "Date": ["2024-02-01", "2024-02-02"],
            "Type": ["Expense", "income"],
            "Amount": ["9.99", "1,000"],
            "Category": ["Coffee", ""],
        }
    ).to_excel(path, index=False)

    loaded = load_transaction_table(path)

    assert [t.id for t in loaded] == ["x1", "x2"]
    assert loaded[1].amount == Decimal("1000")
    assert loaded[0].category == "Coffee"


def test_missing_required_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("Date,Payee\n2024-01-01,Shop\n", encoding="utf-8")
    with pytest.raises(ValueError, match=r"\['Type', 'Amount'\]"):
        load_transaction_table(path)


def test_unsupported_extension(tmp_path):
    path = tmp_path / "ledger.txt"
    path.write_text("Date,Type,Amount\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported table type"):
        load_transaction_table(path)


def test_whitespace_in_text_and_tags_survives_reload(tmp_path):
    """Loading an export and exporting it again reproduces the file, padding included."""
    pe = CsvTransactionParserEmitter()
    original = [
        Transaction(id="a", date="2024-01-05", type="expense", amount="7",
                    notes="  indented", payee="Shop ", tags=(" a", "b ")),
    ]
    text = pe.emit(original)
    path = tmp_path / "ledger.csv"
    path.write_text(text, encoding="utf-8")

    loaded = load_transaction_table(path)

    assert loaded[0].notes == "  indented"
    assert loaded[0].payee == "Shop "
    assert loaded[0].tags == (" a", "b ")
    assert pe.emit(loaded) == text
