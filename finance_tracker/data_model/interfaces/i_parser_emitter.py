# finance_tracker/data_model/interfaces/i_parser_emitter.py
"""
Generic, runtime-checkable protocol for bidirectional text ↔ object converters.

This protocol models a *pair* of operations over one export format (CSV or
JSON): an **emitter** that serializes records to text, and a **parser** that
reads such text back into records.

The protocol is generic in the item type ``T`` so call sites stay strongly
typed (e.g., ``IParserEmitter[Transaction]``).

### Expectations for implementers

- **Determinism:** Given the same items, ``emit`` must produce the same text.
  Encoders that stamp the export time take it from an injectable clock.
- **Round-trip stability:** ``emit(parse(emit(items))) == emit(items)`` byte
  for byte, for every column the format carries.
- **Order preservation:** ``parse`` yields items in document order.
- **Purity:** ``parse`` and ``emit`` hold no global state and do not mutate
  their arguments.
- **Errors:** ``emit`` raises ``EmptyInputError`` for zero items; ``parse``
  raises ``ValueError`` (``MalformedRecordError`` for field-level problems)
  with enough context to find the offending row.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, TypeVar, runtime_checkable

from .enum_export_format import ExportFormat

T = TypeVar("T")


@runtime_checkable
class IParserEmitter(Protocol[T]):
    """
    Paired parser/emitter for a single export format.

    Attributes
    ----------
    file_format : ExportFormat
        The format handled by this implementation. A per-class constant used
        for dispatch and for choosing the file extension and MIME type.
    """

    file_format: ExportFormat

    def parse(self, unparsed_string: str) -> list[T]:
        """
        Parse a complete document into items, in document order.

        Raises
        ------
        ValueError
            If the document is not in the expected layout.
        """
        ...

    def emit(self, items: Sequence[T] | Iterable[T]) -> str:
        """
        Serialize items into a single document.

        Raises
        ------
        EmptyInputError
            If ``items`` is empty.
        """
        ...
