from .config_export import EXPORT_DEFAULTS
from .config_logging import LOGGING
from .converters_scalar import (
    amount_to_json,
    format_amount,
    format_date,
    format_iso_timestamp,
    format_timestamp,
    to_date,
    to_datetime,
    to_decimal,
    to_optional_datetime,
)
from .core_util import is_null_or_whitespace, normalize_tags, open_for_write

__all__ = [
    "is_null_or_whitespace",
    "normalize_tags",
    "open_for_write",
    "to_date",
    "to_datetime",
    "to_optional_datetime",
    "to_decimal",
    "format_amount",
    "amount_to_json",
    "format_date",
    "format_timestamp",
    "format_iso_timestamp",
    "LOGGING",
    "EXPORT_DEFAULTS",
]
