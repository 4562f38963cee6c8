from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from finance_tracker.data_model import ExportSettings, Transaction
from finance_tracker.exceptions import EmptyInputError
from finance_tracker.serializers import JsonTransactionParserEmitter, parser_emitter_for

FIXED = datetime(2024, 1, 10, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def txns() -> list[Transaction]:
    return [
        Transaction(id="a", date="2024-01-05", type="expense", amount="50.00", category="Food"),
        Transaction(id="b", date="2024-01-06", type="income", amount="200", category="Salary",
                    tags=["monthly"]),
    ]


def test_document_keys_and_header_fields(txns):
    """Positive: fixed key order, schema version, currency and count."""
    pe = JsonTransactionParserEmitter(currency="USD", schema_version="2.0.0", clock=lambda: FIXED)
    doc = json.loads(pe.emit(txns))

    assert list(doc) == [
        "exportDate", "version", "currency", "totalTransactions", "summary", "transactions",
    ]
    assert doc["exportDate"] == "2024-01-10T09:30:00.000Z"
    assert doc["version"] == "2.0.0"
    assert doc["currency"] == "USD"
    assert doc["totalTransactions"] == 2


def test_summary_matches_aggregate(txns):
    pe = JsonTransactionParserEmitter(clock=lambda: FIXED)
    summary = json.loads(pe.emit(txns))["summary"]

    assert summary["totalIncome"] == 200
    assert summary["totalExpenses"] == 50
    assert summary["netAmount"] == 150
    assert summary["incomeTransactions"] == 1
    assert summary["expenseTransactions"] == 1
    assert summary["uniqueCategories"] == 2
    assert summary["categories"] == ["Food", "Salary"]
    assert summary["dateRange"] == {"earliest": "2024-01-05", "latest": "2024-01-06"}
    assert summary["averageTransactionAmount"] == 125


def test_emit_is_indented_and_keeps_unicode():
    t = Transaction(id="u", date="2024-01-05", type="expense", amount="4", payee="Café")
    text = JsonTransactionParserEmitter(clock=lambda: FIXED).emit([t])
    assert '\n  "version"' in text
    assert "Café" in text


def test_parse_round_trips_records(txns):
    pe = JsonTransactionParserEmitter(clock=lambda: FIXED)
    back = pe.parse(pe.emit(txns))
    assert back == txns


def test_emit_empty_raises():
    with pytest.raises(EmptyInputError):
        JsonTransactionParserEmitter().emit([])


@pytest.mark.parametrize("text", ["{not json", "[]", '{"transactions": {}}'])
def test_parse_rejects_non_documents(text):
    with pytest.raises(ValueError):
        JsonTransactionParserEmitter().parse(text)


def test_factory_uses_settings():
    pe = parser_emitter_for("json", ExportSettings(currency="EUR"), clock=lambda: FIXED)
    t = Transaction(id="a", date="2024-01-05", type="income", amount="1")
    assert json.loads(pe.emit([t]))["currency"] == "EUR"
