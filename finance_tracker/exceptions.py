# finance_tracker/exceptions.py
"""
Error taxonomy for the export pipeline.

Input problems are ``ValueError`` subclasses so callers that already guard
conversions with ``except ValueError`` keep working. Delivery problems are
``RuntimeError``: the payload was fine, the save mechanism was not.

A user cancelling the save dialog is *not* an error; see
``ExportStatus.CANCELLED``.
"""

from __future__ import annotations

from typing import Optional


class FinanceTrackerError(Exception):
    """Base class for all errors raised by ``finance_tracker``."""


class EmptyInputError(FinanceTrackerError, ValueError):
    """A serializer was handed zero records."""

    def __init__(self, what: str = "transactions") -> None:
        super().__init__(f"No {what} to export")
        self.what = what


class NothingToExportError(FinanceTrackerError, ValueError):
    """The resolved export scope is empty (e.g. filters eliminated everything)."""

    def __init__(self, message: str = "No transactions match the current filters") -> None:
        super().__init__(message)


class UnsupportedFormatError(FinanceTrackerError, ValueError):
    """The export format token is not recognized."""

    def __init__(self, token: object) -> None:
        super().__init__(f"Unsupported export format: {token}")
        self.token = token


class MalformedRecordError(FinanceTrackerError, ValueError):
    """A record field could not be converted to its domain type."""

    def __init__(
        self, field: str, value: object, reason: str, record_id: Optional[str] = None
    ) -> None:
        where = f" (record {record_id!r})" if record_id else ""
        super().__init__(f"Malformed {field}{where}: {value!r}: {reason}")
        self.field = field
        self.value = value
        self.record_id = record_id


class DeliveryFailure(FinanceTrackerError, RuntimeError):
    """The delivery collaborator failed for a reason other than cancellation."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Failed to deliver {filename}: {reason}")
        self.filename = filename
