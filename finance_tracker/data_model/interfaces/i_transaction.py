# finance_tracker/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Protocol, runtime_checkable

from .enum_transaction_status import TransactionStatus
from .enum_transaction_type import TransactionType
from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """Structural shape of a transaction sufficient for filtering and export."""

    id: str
    date: date
    type: TransactionType
    amount: Decimal
    category: str
    payee: str
    notes: str
    account: str
    person: str
    tags: tuple[str, ...]
    status: TransactionStatus
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @property
    def signed_amount(self) -> Decimal: ...
