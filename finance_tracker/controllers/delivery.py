# finance_tracker/controllers/delivery.py
"""
Delivery implementations. Both satisfy ``IDelivery`` and are interchangeable
from the orchestrator's point of view.

- ``DirectoryDelivery`` saves into a fixed directory without asking (the
  implicit-download variant). It never overwrites: a name already taken gets
  a ``-2``, ``-3``, ... suffix and the final name is reported back.
- ``PromptDelivery`` asks a callback for the destination (the save-dialog
  variant). The callback returning ``None`` means the user cancelled.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional

from finance_tracker.data_model import Cancelled, Delivered, DeliveryResult, IDelivery
from finance_tracker.utilities import open_for_write

log = logging.getLogger(__name__)

MAX_NAME_ATTEMPTS = 1000


class DirectoryDelivery:
    method = "filesystem"

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def _candidate(self, filename: str, n: int) -> Path:
        first = self.directory / filename
        if n == 1:
            return first
        return first.with_name(f"{first.stem}-{n}{first.suffix}")

    def deliver(self, payload: bytes, filename: str, mime_type: str) -> DeliveryResult:
        # A file in the directory's place fails here, not as a name collision.
        self.directory.mkdir(parents=True, exist_ok=True)
        for n in range(1, MAX_NAME_ATTEMPTS + 1):
            target = self._candidate(filename, n)
            try:
                with open_for_write(target, binary=True, ensure_parent=False) as f:
                    f.write(payload)
            except FileExistsError:
                log.debug("%s exists; trying next name", target)
                continue
            log.info("Saved %s (%s, %d bytes)", target, mime_type, len(payload))
            return Delivered(method=self.method, filename=target.name)
        raise FileExistsError(
            f"No free name for {filename} in {self.directory} after {MAX_NAME_ATTEMPTS} attempts"
        )


class PromptDelivery:
    method = "save_dialog"

    def __init__(self, choose_path: Callable[[str, str], Optional[Path | str]]):
        """``choose_path(suggested_name, mime_type)`` returns a path, or None to cancel."""
        self._choose_path = choose_path

    def deliver(self, payload: bytes, filename: str, mime_type: str) -> DeliveryResult:
        chosen = self._choose_path(filename, mime_type)
        if chosen is None or str(chosen) == "":
            log.info("Save of %s cancelled by user", filename)
            return Cancelled()
        target = Path(chosen)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(payload)
        log.info("Saved %s (%s, %d bytes)", target, mime_type, len(payload))
        return Delivered(method=self.method, filename=target.name)


if TYPE_CHECKING:
    _is_directory_delivery: type[IDelivery] = DirectoryDelivery
    _is_prompt_delivery: type[IDelivery] = PromptDelivery
