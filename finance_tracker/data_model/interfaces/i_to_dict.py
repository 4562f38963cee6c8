# finance_tracker/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

from typing_extensions import TypeAlias

JsonValue: TypeAlias = Union[
    str, int, float, bool, None, list["JsonValue"], dict[str, "JsonValue"]
]


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> dict[str, JsonValue]: ...
