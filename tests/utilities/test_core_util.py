from __future__ import annotations

import pytest

from finance_tracker.utilities.core_util import (
    is_null_or_whitespace,
    normalize_tags,
    open_for_write,
)


@pytest.mark.parametrize("s,expected", [(None, True), ("", True), ("  \t", True), ("x", False)])
def test_is_null_or_whitespace(s, expected):
    assert is_null_or_whitespace(s) is expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, ()),
        ("", ()),
        ("groceries, weekly,, ", ("groceries", "weekly")),
        (["b", "a", None, 3], ("b", "a", "3")),
        (("x",), ("x",)),
    ],
)
def test_normalize_tags(raw, expected):
    """Strings are comma-split and trimmed; sequences keep their order."""
    assert normalize_tags(raw) == expected


def test_normalize_tags_rejects_scalars():
    with pytest.raises(TypeError):
        normalize_tags(42)


def test_open_for_write_creates_parent_and_writes_utf8(tmp_path):
    target = tmp_path / "nested" / "dir" / "out.csv"
    with open_for_write(target) as f:
        f.write("café\n")
    assert target.read_bytes() == "café\n".encode("utf-8")


def test_open_for_write_never_overwrites(tmp_path):
    """Negative: an existing file is left untouched and FileExistsError is raised."""
    target = tmp_path / "out.bin"
    target.write_bytes(b"original")
    with pytest.raises(FileExistsError):
        with open_for_write(target, binary=True) as f:
            f.write(b"new")
    assert target.read_bytes() == b"original"
