# finance_tracker/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Optional, overload


def _bad(value: Any, target: str) -> ValueError:
    return ValueError(f"Cannot convert {type(value).__name__} to {target}")


@overload
def to_datetime(value: datetime, /) -> datetime: ...
@overload
def to_datetime(value: date, /) -> datetime: ...
@overload
def to_datetime(value: int, /) -> datetime: ...
@overload
def to_datetime(value: float, /) -> datetime: ...
@overload
def to_datetime(value: str, /) -> datetime: ...


def to_datetime(value: object, /) -> datetime:
    """
    Convert a datetime-like input into a `datetime`.

    Accepts:
      • datetime → returned as-is
      • date     → combined with midnight (00:00:00)
      • int/float (POSIX timestamp, seconds) → UTC-aware datetime
      • str (ISO 8601; trailing 'Z' accepted as UTC, or 'YYYY-MM-DD HH:MM:SS')

    Raises
    ------
    ValueError
        If the value cannot be converted.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, bool):
        raise _bad(value, "datetime")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        s = value.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(s)
        except ValueError:
            pass
    raise _bad(value, "datetime")


def to_optional_datetime(value: object) -> Optional[datetime]:
    """Like `to_datetime`, but ``None`` and blank strings map to ``None``."""
    if value is None:
        return None
    if isinstance(value, str) and value.strip() == "":
        return None
    return to_datetime(value)


def to_date(value: object, /) -> date:
    """
    Parse a calendar date. Time-of-day and offsets are discarded.

    Supported examples:
      - date / datetime objects
      - 2024-12-31            (ISO)
      - 2024-12-31T23:59:59Z  (ISO datetime)
      - 2024-12-31 23:59:59
      - 12/31/2024, 2024/12/31, 20241231

    Raises:
        ValueError: if the value is empty or not recognized.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        raise ValueError("Missing date")

    txt = str(value).strip()
    if not txt:
        raise ValueError("Missing date")

    if "T" in txt or " " in txt:
        try:
            return to_datetime(txt).date()
        except ValueError:
            pass  # fall through

    for fmt in _DATE_PATTERNS:
        try:
            return datetime.strptime(txt, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Unrecognized date format: {value!r}")


def to_decimal(value: Any) -> Decimal:
    """
    Convert a numeric-looking input to Decimal.

    Strings may carry surrounding whitespace and thousands commas
    ("1,234.50"). Floats are routed through ``str`` to avoid binary
    artifacts. Booleans and other types are rejected.

    Raises:
        ValueError: if the value cannot be parsed or is not finite.
    """
    if isinstance(value, bool):
        raise _bad(value, "Decimal")
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, int):
        d = Decimal(value)
    elif isinstance(value, float):
        d = Decimal(str(value))
    elif isinstance(value, str):
        cleaned = _THOUSANDS_RE.sub("", value.strip())
        if not cleaned:
            raise ValueError("Empty string cannot be converted to Decimal")
        try:
            d = Decimal(cleaned)
        except InvalidOperation as e:
            raise ValueError(
                f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
            ) from e
    else:
        raise _bad(value, "Decimal")

    if not d.is_finite():
        raise ValueError(f"Non-finite amount: {value!r}")
    return d


# region Formatting


def format_amount(amount: Decimal) -> str:
    """
    Plain numeric text for an amount: no symbol, no grouping, no exponent,
    trailing fractional zeros dropped ("50", "12.5", "0.05").
    """
    text = format(amount.normalize(), "f")
    return "0" if text in ("-0", "") else text


def amount_to_json(amount: Decimal) -> int | float:
    """JSON number for an amount; integral values stay integers."""
    normalized = amount.normalize()
    if normalized == normalized.to_integral_value():
        return int(normalized)
    return float(format_amount(amount))


def format_date(d: date) -> str:
    return d.isoformat()


def format_timestamp(dt: Optional[datetime]) -> str:
    """'YYYY-MM-DD HH:MM:SS', or '' when absent."""
    if dt is None:
        return ""
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def format_iso_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """
    ISO-8601 in UTC with millisecond precision and a 'Z' suffix
    (e.g. '2024-01-05T10:00:00.000Z'). Naive datetimes are taken as UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


# endregion Formatting


_DATE_PATTERNS: Final[tuple[str, ...]] = (
    "%Y-%m-%d",  # 2025-01-02
    "%Y/%m/%d",  # 2025/01/02
    "%m/%d/%Y",  # 01/02/2025
    "%Y%m%d",  # 20250102
)
_THOUSANDS_RE: Final[re.Pattern[str]] = re.compile(r",(?=\d{3}(\D|$))")
