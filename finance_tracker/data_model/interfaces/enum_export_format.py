from __future__ import annotations

from enum import Enum

from finance_tracker.exceptions import UnsupportedFormatError


class ExportFormat(Enum):
    """
    Export file formats. The value is the user-facing token and the file
    extension.
    """
    CSV = "csv"
    JSON = "json"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @classmethod
    def parse(cls, token: object) -> ExportFormat:
        """Case-insensitive lookup; anything unknown raises UnsupportedFormatError."""
        if isinstance(token, cls):
            return token
        text = str(token or "").strip().lower()
        for fmt in cls:
            if fmt.value == text:
                return fmt
        raise UnsupportedFormatError(token)


_MIME_TYPES = {
    ExportFormat.CSV: "text/csv",
    ExportFormat.JSON: "application/json",
}
