from __future__ import annotations

import json

import pytest

from finance_tracker.cli import main
from finance_tracker.data_model import Transaction
from finance_tracker.serializers import CsvTransactionParserEmitter


@pytest.fixture
def ledger(tmp_path):
    txns = [
        Transaction(id="1", date="2024-01-05", type="expense", amount="50", category="Food"),
        Transaction(id="2", date="2024-01-06", type="income", amount="200", category="Salary"),
        Transaction(id="3", date="2024-02-07", type="expense", amount="30", category="Food"),
    ]
    path = tmp_path / "ledger.csv"
    path.write_text(CsvTransactionParserEmitter().emit(txns), encoding="utf-8")
    return path


def test_cli_exports_filtered_json(ledger, tmp_path, capsys):
    out_dir = tmp_path / "out"
    rc = main([str(ledger), "--format", "json", "--out", str(out_dir), "--category", "Food",
               "--currency", "USD"])

    assert rc == 0
    written = list(out_dir.glob("transactions-*.json"))
    assert len(written) == 1
    doc = json.loads(written[0].read_text(encoding="utf-8"))
    assert doc["currency"] == "USD"
    assert doc["totalTransactions"] == 2
    assert str(written[0]) in capsys.readouterr().out


def test_cli_date_bounds_are_open_ended(ledger, tmp_path):
    out_dir = tmp_path / "out"
    assert main([str(ledger), "--out", str(out_dir), "--date-from", "2024-02-01"]) == 0
    text = next(out_dir.glob("*.csv")).read_text(encoding="utf-8")
    assert text.count("\n") == 1, "header plus one row"


def test_cli_summary_prints_totals(ledger, capsys):
    assert main([str(ledger), "--summary", "--scope", "all"]) == 0
    out = capsys.readouterr().out
    assert "All 3 transactions" in out
    assert "Income:   200" in out
    assert "Expenses: 80" in out
    assert "Net:      120" in out


def test_cli_nothing_to_export(ledger, tmp_path, capsys):
    """Negative: an empty filter result exits 1 with the message on stderr."""
    rc = main([str(ledger), "--out", str(tmp_path), "--person", "Nobody"])
    assert rc == 1
    assert "No transactions match the current filters" in capsys.readouterr().err
    assert list(tmp_path.glob("transactions-*")) == []


def test_cli_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "nope.csv")]) == 1
    assert "Input table not found" in capsys.readouterr().err
