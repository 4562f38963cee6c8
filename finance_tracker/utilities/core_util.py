#!/usr/bin/env python3
"""
Core Utilities

Features:
- String utilities
- Tag normalization
- File I/O helpers
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import IO, Any, Literal, Optional, cast, overload

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def normalize_tags(value: Any) -> tuple[str, ...]:
    """
    Canonical ordered tag sequence.

    - ``None`` → ``()``
    - ``"a, b,,c"`` → ``("a", "b", "c")`` (comma-joined store format; items
      trimmed, empties dropped)
    - any other iterable → items in order, each coerced to ``str``; ``None``
      items are dropped
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, Iterable):
        return tuple(str(t) for t in value if t is not None)
    raise TypeError(f"Unsupported tags value: {type(value).__name__}")


# endregion Common functions

# region File I/O


@overload
def open_for_write(
    path: Path, binary: Literal[True], *, ensure_parent: bool = ..., **kwargs: Any
) -> IO[bytes]: ...
@overload
def open_for_write(
    path: Path, binary: Literal[False] = False, *, ensure_parent: bool = ..., **kwargs: Any
) -> IO[str]: ...


def open_for_write(
    path: Path,
    binary: bool = False,
    *,
    ensure_parent: bool = True,
    **kwargs: Any,
) -> IO[Any]:
    if ensure_parent:
        path.parent.mkdir(parents=True, exist_ok=True)

    if binary:
        return cast(IO[bytes], open(path, "xb", **kwargs))

    kwargs.setdefault("encoding", "utf-8")
    kwargs.setdefault("newline", "")
    return cast(IO[str], open(path, "x", **kwargs))


# endregion File I/O
