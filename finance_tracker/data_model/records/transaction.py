from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from finance_tracker.data_model.interfaces import (
    ITransaction,
    IToDict,
    JsonValue,
    TransactionStatus,
    TransactionType,
)
from finance_tracker.exceptions import MalformedRecordError
from finance_tracker.utilities import (
    amount_to_json,
    format_date,
    format_iso_timestamp,
    normalize_tags,
    to_date,
    to_decimal,
    to_optional_datetime,
)

# Store records arrive with either naming convention.
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("id",),
    "date": ("date",),
    "type": ("type",),
    "amount": ("amount",),
    "category": ("category",),
    "payee": ("payee",),
    "notes": ("notes",),
    "account": ("account",),
    "person": ("person",),
    "tags": ("tags",),
    "status": ("status",),
    "created_at": ("created_at", "createdAt", "created"),
    "updated_at": ("updated_at", "updatedAt", "updated"),
}

_TEXT_FIELDS = ("category", "payee", "notes", "account", "person")


@dataclass(frozen=True)
class Transaction:
    """
    A single recorded income or expense event.

    Instances are immutable snapshots. Field values are coerced on
    construction so the rest of the package only ever sees domain types:
    ``date`` is a calendar date, ``amount`` a non-negative ``Decimal``,
    ``tags`` an ordered tuple of strings. Conversion failures raise
    ``MalformedRecordError`` naming the field.
    """

    # region Core Fields

    id: str
    date: date
    type: TransactionType
    amount: Decimal
    category: str = ""
    payee: str = ""
    notes: str = ""
    account: str = ""
    person: str = ""
    tags: tuple[str, ...] = ()
    status: TransactionStatus = TransactionStatus.POSTED
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # endregion Core Fields

    def __post_init__(self) -> None:
        if self.id is None or str(self.id).strip() == "":
            raise MalformedRecordError("id", self.id, "missing identifier")
        object.__setattr__(self, "id", str(self.id))

        self._coerce("date", to_date)
        self._coerce("type", TransactionType.from_value)
        self._coerce("amount", to_decimal)
        self._coerce("status", TransactionStatus.from_value)
        self._coerce("tags", normalize_tags)
        self._coerce("created_at", to_optional_datetime)
        self._coerce("updated_at", to_optional_datetime)
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            object.__setattr__(self, name, "" if value is None else str(value))

        if self.amount < 0:
            raise MalformedRecordError(
                "amount", self.amount, "amount must be non-negative", self.id
            )

    def _coerce(self, name: str, convert: Callable[[Any], Any]) -> None:
        value = getattr(self, name)
        try:
            object.__setattr__(self, name, convert(value))
        except (TypeError, ValueError) as e:
            if isinstance(e, MalformedRecordError):
                raise
            raise MalformedRecordError(name, value, str(e), self.id) from e

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.type is TransactionType.INCOME else -self.amount

    # region Construction / Mutation

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Transaction:
        """
        Build a Transaction from a store record.

        Accepts camelCase or snake_case keys (``createdAt``/``created_at``,
        plus the bare ``created``/``updated`` the store uses). Unknown keys are
        ignored. ``status`` defaults to posted when absent or blank.
        """
        kwargs: dict[str, Any] = {}
        for name, aliases in _KEY_ALIASES.items():
            for key in aliases:
                if key in record:
                    kwargs[name] = record[key]
                    break
        for required in ("id", "date", "type", "amount"):
            if required not in kwargs:
                raise MalformedRecordError(
                    required, None, "missing field", str(record.get("id") or "") or None
                )
        return cls(**kwargs)

    @classmethod
    def create(cls, *, now: Optional[datetime] = None, **fields: Any) -> Transaction:
        """New transaction with ``created_at`` and ``updated_at`` both set to ``now``."""
        stamp = now or datetime.now(timezone.utc)
        fields.pop("created_at", None)
        fields.pop("updated_at", None)
        return cls(created_at=stamp, updated_at=stamp, **fields)

    def with_changes(self, *, now: Optional[datetime] = None, **changes: Any) -> Transaction:
        """Copy with ``changes`` applied and ``updated_at`` refreshed."""
        if "id" in changes and changes["id"] != self.id:
            raise ValueError("Transaction id is immutable")
        changes.pop("created_at", None)
        changes["updated_at"] = now or datetime.now(timezone.utc)
        return replace(self, **changes)

    # endregion Construction / Mutation

    def to_dict(self) -> dict[str, JsonValue]:
        """
        JSON-ready record: ``date`` as YYYY-MM-DD, timestamps as ISO-8601
        (``None`` when absent), tags as a list.
        """
        return {
            "id": self.id,
            "date": format_date(self.date),
            "type": self.type.value,
            "amount": amount_to_json(self.amount),
            "category": self.category,
            "payee": self.payee,
            "notes": self.notes,
            "tags": list(self.tags),
            "account": self.account,
            "person": self.person,
            "status": self.status.value,
            "createdAt": format_iso_timestamp(self.created_at),
            "updatedAt": format_iso_timestamp(self.updated_at),
        }


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = Transaction
    _is_IToDict: type[IToDict] = Transaction
