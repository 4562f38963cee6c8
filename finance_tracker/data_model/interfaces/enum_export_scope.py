from __future__ import annotations

from enum import Enum


class ExportScope(Enum):
    """
    Which subset of the collection an export targets.

    SELECTED only takes effect when the selection is non-empty; otherwise the
    export falls back to FILTERED.
    """
    ALL = "all"
    FILTERED = "filtered"
    SELECTED = "selected"

    @classmethod
    def parse(cls, value: object) -> ExportScope:
        if isinstance(value, cls):
            return value
        if value is None or str(value).strip() == "":
            return cls.FILTERED
        text = str(value).strip().lower()
        for scope in cls:
            if scope.value == text:
                return scope
        raise ValueError(f"Unknown export scope: {value!r}")
