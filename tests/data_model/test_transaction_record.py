from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from finance_tracker.data_model import (
    ITransaction,
    IToDict,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from finance_tracker.exceptions import MalformedRecordError

NOW = datetime(2024, 1, 10, 9, 30, tzinfo=timezone.utc)


def _t(**overrides) -> Transaction:
    fields = dict(id="t1", date="2024-01-05", type="expense", amount="50.00", category="Food")
    fields.update(overrides)
    return Transaction(**fields)


def test_fields_are_coerced_to_domain_types():
    """Positive: string inputs become date / enum / Decimal; status defaults to posted."""
    t = _t(type="Expense", tags=["weekly", "shop"])
    assert t.date == date(2024, 1, 5)
    assert t.type is TransactionType.EXPENSE
    assert t.amount == Decimal("50.00")
    assert t.status is TransactionStatus.POSTED
    assert t.tags == ("weekly", "shop")
    assert t.payee == ""


def test_transaction_satisfies_protocols():
    t = _t()
    assert isinstance(t, ITransaction)
    assert isinstance(t, IToDict)


@pytest.mark.parametrize(
    "overrides,field",
    [
        ({"amount": "-5"}, "amount"),
        ({"amount": "lots"}, "amount"),
        ({"date": "someday"}, "date"),
        ({"type": "transfer"}, "type"),
        ({"status": "void"}, "status"),
        ({"id": ""}, "id"),
    ],
)
def test_malformed_fields_raise_with_field_name(overrides, field):
    """Negative: conversion failures name the offending field."""
    with pytest.raises(MalformedRecordError) as ei:
        _t(**overrides)
    assert ei.value.field == field


def test_signed_amount_follows_type():
    assert _t(type="income", amount="10").signed_amount == Decimal("10")
    assert _t(type="expense", amount="10").signed_amount == Decimal("-10")


def test_from_record_accepts_store_key_spellings():
    """camelCase, snake_case and the bare created/updated keys all map to timestamps."""
    rec = {
        "id": 7,
        "date": "2024-01-05",
        "type": "income",
        "amount": 1200,
        "tags": "salary, monthly",
        "createdAt": "2024-01-05T10:00:00.000Z",
        "updated": "2024-01-06T11:00:00Z",
        "unrelated": "ignored",
    }
    t = Transaction.from_record(rec)
    assert t.id == "7"
    assert t.tags == ("salary", "monthly")
    assert t.created_at == datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc)
    assert t.updated_at == datetime(2024, 1, 6, 11, 0, tzinfo=timezone.utc)


def test_from_record_requires_core_fields():
    with pytest.raises(MalformedRecordError) as ei:
        Transaction.from_record({"id": "x", "date": "2024-01-05", "type": "income"})
    assert ei.value.field == "amount"


def test_create_and_with_changes_manage_timestamps():
    """created_at is set once; with_changes refreshes updated_at and keeps the id."""
    t = Transaction.create(now=NOW, id="a", date="2024-01-05", type="expense", amount="3")
    assert t.created_at == NOW and t.updated_at == NOW

    later = datetime(2024, 2, 1, tzinfo=timezone.utc)
    t2 = t.with_changes(now=later, amount="4.5", category="Coffee")
    assert t2.amount == Decimal("4.5")
    assert t2.category == "Coffee"
    assert t2.created_at == NOW
    assert t2.updated_at == later
    assert t.amount == Decimal("3"), "original must be unchanged"

    with pytest.raises(ValueError):
        t.with_changes(id="b")


def test_to_dict_shape():
    t = _t(tags=("a",), created_at=NOW)
    d = t.to_dict()
    assert list(d) == [
        "id", "date", "type", "amount", "category", "payee", "notes",
        "tags", "account", "person", "status", "createdAt", "updatedAt",
    ]
    assert d["date"] == "2024-01-05"
    assert d["amount"] == 50
    assert d["tags"] == ["a"]
    assert d["createdAt"] == "2024-01-10T09:30:00.000Z"
    assert d["updatedAt"] is None
