from __future__ import annotations

from datetime import date

import pytest

from finance_tracker.controllers.filters import (
    QUICK_FILTERS,
    apply_filters,
    last_12_months,
    last_month,
    matches,
    this_month,
)
from finance_tracker.data_model import DateRange, FilterSpec, Transaction


def _t(i: str, d: str, typ: str, amt: str, **kw) -> Transaction:
    return Transaction(id=i, date=d, type=typ, amount=amt, **kw)


@pytest.fixture
def txns() -> list[Transaction]:
    return [
        _t("1", "2024-01-05", "expense", "50", category="Food", payee="Corner Cafe", person="Ann"),
        _t("2", "2024-01-20", "income", "2000", category="Salary", person="Ben"),
        _t("3", "2024-02-03", "expense", "80", category="Food", notes="Weekly SHOP", tags=("groceries",)),
        _t("4", "2024-03-01", "expense", "15", category="Transport", person="Ann", tags=("Bus",)),
    ]


def _ids(items) -> list[str]:
    return [t.id for t in items]


def test_empty_spec_is_identity(txns):
    """Positive: no active constraint returns the full collection in order."""
    assert _ids(apply_filters(txns, FilterSpec())) == ["1", "2", "3", "4"]
    assert _ids(apply_filters(txns, None)) == ["1", "2", "3", "4"]


@pytest.mark.parametrize(
    "spec,expected",
    [
        (FilterSpec(category="Food"), ["1", "3"]),
        (FilterSpec(person="Ann"), ["1", "4"]),
        (FilterSpec(type="income"), ["2"]),
        (FilterSpec(date_range=DateRange("2024-01-20", "2024-02-03")), ["2", "3"]),
        (FilterSpec(search_text="cafe"), ["1"]),
        (FilterSpec(search_text="shop"), ["3"]),
        (FilterSpec(search_text="bus"), ["4"]),
        (FilterSpec(search_text="transport"), ["4"]),
    ],
)
def test_each_constraint_in_isolation(txns, spec, expected):
    assert _ids(apply_filters(txns, spec)) == expected


def test_constraints_combine_with_and(txns):
    spec = FilterSpec(category="Food", person="Ann")
    assert _ids(apply_filters(txns, spec)) == ["1"]


def test_exact_category_match_is_case_sensitive(txns):
    """Negative: category equality is exact, unlike the free-text search."""
    assert apply_filters(txns, FilterSpec(category="food")) == []


def test_result_is_subset_and_input_untouched(txns):
    before = list(txns)
    out = apply_filters(txns, FilterSpec(type="expense"))
    assert all(t in txns for t in out)
    assert txns == before


def test_matches_single(txns):
    assert matches(txns[0], FilterSpec(search_text="CORNER"))
    assert not matches(txns[1], FilterSpec(search_text="CORNER"))


# ---------- quick presets ----------
def test_this_and_last_month():
    today = date(2024, 3, 15)
    assert this_month(today) == DateRange(date(2024, 3, 1), date(2024, 3, 31))
    assert last_month(today) == DateRange(date(2024, 2, 1), date(2024, 2, 29))
    assert last_month(date(2024, 1, 10)) == DateRange(date(2023, 12, 1), date(2023, 12, 31))


def test_last_12_months_clamps_leap_day():
    assert last_12_months(date(2024, 2, 29)) == DateRange(date(2023, 2, 28), date(2024, 2, 29))
    assert last_12_months(date(2024, 6, 10)).start == date(2023, 6, 10)


def test_quick_filter_names():
    assert list(QUICK_FILTERS) == ["This Month", "Last Month", "Last 12 Months"]
