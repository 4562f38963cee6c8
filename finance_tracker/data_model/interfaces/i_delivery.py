# finance_tracker/data_model/interfaces/i_delivery.py
"""
Delivery collaborator protocol.

A delivery hands a finished export payload to the user's device. It is a
single-shot, blocking call with exactly three results:

- return a ``Delivered`` (with the method used and the final file name),
- return a ``Cancelled`` (the user dismissed the save mechanism), or
- raise any exception (the save mechanism failed).

The core never retries and never inspects how the payload was stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class Delivered:
    method: str
    filename: str


@dataclass(frozen=True)
class Cancelled:
    pass


DeliveryResult = Union[Delivered, Cancelled]


@runtime_checkable
class IDelivery(Protocol):
    def deliver(self, payload: bytes, filename: str, mime_type: str) -> DeliveryResult:
        """Store ``payload`` under (at most) ``filename``; see module docstring."""
        ...
