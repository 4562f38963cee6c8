from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from finance_tracker.data_model.interfaces import ExportFormat, ExportStatus
from finance_tracker.utilities import EXPORT_DEFAULTS


@dataclass(frozen=True)
class ExportSettings:
    """Export configuration; defaults come from ``EXPORT_DEFAULTS``."""

    currency: str = EXPORT_DEFAULTS["currency"]
    filename_prefix: str = EXPORT_DEFAULTS["filename_prefix"]
    include_timestamp: bool = EXPORT_DEFAULTS["include_timestamp"]
    schema_version: str = EXPORT_DEFAULTS["schema_version"]

    @classmethod
    def from_mapping(cls, m: Optional[Mapping[str, Any]]) -> ExportSettings:
        """
        Overlay a settings mapping on the defaults. Both ``filename_prefix``
        and ``filenamePrefix`` spellings are accepted; unknown keys are
        ignored (the app-wide settings blob carries many unrelated entries).
        """
        if not m:
            return cls()
        merged: dict[str, Any] = {
            "currency": m.get("currency") or EXPORT_DEFAULTS["currency"],
            "filename_prefix": m.get("filename_prefix", m.get("filenamePrefix"))
            or EXPORT_DEFAULTS["filename_prefix"],
            "include_timestamp": bool(
                m.get(
                    "include_timestamp",
                    m.get("includeTimestamp", EXPORT_DEFAULTS["include_timestamp"]),
                )
            ),
            "schema_version": m.get("schema_version", EXPORT_DEFAULTS["schema_version"]),
        }
        return cls(**merged)


@dataclass(frozen=True)
class ExportOutcome:
    """
    Result of a finished export. ``filename``/``method`` are only set when
    the payload was delivered.
    """

    status: ExportStatus
    format: ExportFormat
    transaction_count: int
    filename: Optional[str] = None
    method: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.status is ExportStatus.DELIVERED

    @property
    def cancelled(self) -> bool:
        return self.status is ExportStatus.CANCELLED


@dataclass(frozen=True)
class ExportPreview:
    """What an export would contain, for display before the user confirms."""

    count: int
    description: str
