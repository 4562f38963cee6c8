from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from finance_tracker.utilities import to_date, to_decimal, to_optional_datetime


@dataclass(frozen=True)
class Category:
    """A category list entry (``type`` is 'income' or 'expense')."""

    name: str
    type: str
    color: str = ""
    icon: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "created_at", to_optional_datetime(self.created_at))
        object.__setattr__(self, "updated_at", to_optional_datetime(self.updated_at))


@dataclass(frozen=True)
class Budget:
    """A spending limit for one category over a period."""

    category: str
    amount: Decimal
    period: str = "monthly"
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "period", self.period or "monthly")
        for name in ("start_date", "end_date"):
            value = getattr(self, name)
            if value is not None and value != "":
                object.__setattr__(self, name, to_date(value))
            else:
                object.__setattr__(self, name, None)
        object.__setattr__(self, "created_at", to_optional_datetime(self.created_at))
        object.__setattr__(self, "updated_at", to_optional_datetime(self.updated_at))
