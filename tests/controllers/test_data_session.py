from __future__ import annotations

from pathlib import Path

from finance_tracker.controllers import data_session as ds_mod
from finance_tracker.controllers.data_session import DataSession
from finance_tracker.data_model import Transaction


def _fake_loader(calls):
    def load(path, *, sheet_name=0):
        calls.append(Path(path))
        return [Transaction(id=f"{Path(path).stem}-1", date="2024-01-01", type="expense", amount="1")]
    return load


def test_load_is_memoized_per_path(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(ds_mod, "load_transaction_table", _fake_loader(calls))
    s = DataSession()

    first = s.load(tmp_path / "a.csv")
    again = s.load(tmp_path / "a.csv")
    assert first is again
    assert calls == [tmp_path / "a.csv"]

    s.load(tmp_path / "b.csv")
    assert calls[-1] == tmp_path / "b.csv"
    assert s.table_path == tmp_path / "b.csv"


def test_snapshot_and_invalidate(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(ds_mod, "load_transaction_table", _fake_loader(calls))
    s = DataSession()
    s.load(tmp_path / "a.csv")

    snap = s.snapshot()
    assert isinstance(snap, tuple) and len(snap) == 1

    s.invalidate()
    assert s.table_path is None and s.transactions == []
    assert snap[0].id == "a-1", "snapshots survive invalidation"

    s.load(tmp_path / "a.csv")
    assert len(calls) == 2
