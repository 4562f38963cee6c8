# finance_tracker/controllers/export_orchestrator.py
"""
Export orchestration.

This module turns UI state into a delivered export file:

• Resolve which transactions to export (all / filtered / explicitly selected).
• Pick the serializer for the requested format.
• Build the ``<prefix>-<YYYY-MM-DD-HHmm>.<ext>`` filename.
• Hand the UTF-8 payload to a delivery collaborator and report the outcome.

Exactly three things can come back from ``export``: an ``ExportOutcome``
with status DELIVERED, one with status CANCELLED, or a raised
``DeliveryFailure``. Nothing is retried.
"""

from __future__ import annotations

import logging
import logging.config
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from finance_tracker.data_model import (
    Cancelled,
    Delivered,
    ExportFormat,
    ExportOutcome,
    ExportPreview,
    ExportScope,
    ExportSettings,
    ExportStatus,
    FilterSpec,
    IDelivery,
    ITransaction,
    Selection,
    ViewState,
)
from finance_tracker.exceptions import (
    DeliveryFailure,
    EmptyInputError,
    NothingToExportError,
)
from finance_tracker.serializers import parser_emitter_for
from finance_tracker.utilities import EXPORT_DEFAULTS, LOGGING

from .filters import apply_filters
from .view_composer import select_by_ids

logging.config.dictConfig(LOGGING)
log = logging.getLogger(__name__)

T = TypeVar("T", bound=ITransaction)


# --- Scope resolution --------------------------------------------------------


def _scoped(
    all_transactions: Sequence[T],
    scope: ExportScope | str | None,
    filter_spec: Optional[FilterSpec],
    selected_ids: Iterable[str],
) -> tuple[ExportScope, list[T]]:
    """Effective scope and the transactions in it (possibly empty)."""
    scope = ExportScope.parse(scope)
    ids = list(selected_ids or ())
    if scope is ExportScope.SELECTED and ids:
        return scope, select_by_ids(all_transactions, ids)
    if scope is ExportScope.ALL:
        return scope, list(all_transactions)
    return ExportScope.FILTERED, apply_filters(all_transactions, filter_spec)


def resolve_export_set(
    all_transactions: Sequence[T],
    scope: ExportScope | str | None = ExportScope.FILTERED,
    filter_spec: Optional[FilterSpec] = None,
    selected_ids: Iterable[str] = (),
) -> list[T]:
    """
    Transactions an export targets.

    - ``selected`` with a non-empty id set → those transactions, in their
      original order; ``filter_spec`` is ignored.
    - ``all`` → the whole collection.
    - ``filtered`` (default, and ``selected`` with no ids) → the filter result.

    Raises
    ------
    NothingToExportError
        If the resolved set is empty.
    """
    effective, txns = _scoped(all_transactions, scope, filter_spec, selected_ids)
    if not txns:
        log.warning("Export scope %s resolved to no transactions", effective.value)
        raise NothingToExportError()
    log.debug("Export scope %s resolved to %d transactions", effective.value, len(txns))
    return txns


def export_preview(
    all_transactions: Sequence[ITransaction],
    scope: ExportScope | str | None = ExportScope.FILTERED,
    filter_spec: Optional[FilterSpec] = None,
    selected_ids: Iterable[str] = (),
) -> ExportPreview:
    """Count and one-line description of what an export would contain."""
    effective, txns = _scoped(all_transactions, scope, filter_spec, selected_ids)
    n = len(txns)
    if effective is ExportScope.SELECTED:
        description = f"{n} selected transactions"
    elif effective is ExportScope.ALL:
        description = f"All {n} transactions"
    else:
        description = f"{n} filtered transactions"
    return ExportPreview(count=n, description=description)


# --- Filenames ---------------------------------------------------------------


def generate_filename(
    prefix: str,
    extension: str,
    now: Optional[datetime] = None,
    include_timestamp: bool = True,
) -> str:
    """
    ``<prefix>-<YYYY-MM-DD-HHmm>.<extension>``, or ``<prefix>.<extension>``
    without the timestamp. Minute resolution: two exports in the same minute
    get the same name.
    """
    if not include_timestamp:
        return f"{prefix}.{extension}"
    stamp = (now or datetime.now()).strftime(EXPORT_DEFAULTS["filename_timestamp_format"])
    return f"{prefix}-{stamp}.{extension}"


# --- Export ------------------------------------------------------------------


def export(
    transactions: Iterable[ITransaction],
    fmt: ExportFormat | str,
    settings: Optional[ExportSettings],
    delivery: IDelivery,
    *,
    now: Optional[datetime] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> ExportOutcome:
    """
    Serialize ``transactions`` as ``fmt`` and deliver the file.

    Parameters
    ----------
    fmt
        ``"csv"`` or ``"json"`` in any case, or an ``ExportFormat``.
    settings
        Currency, filename prefix and schema version; defaults when None.
    delivery
        Collaborator that stores the payload.
    now
        Wall-clock time for the filename (defaults to the current local time).
    clock
        Time source for the JSON ``exportDate`` (defaults to UTC now).

    Raises
    ------
    EmptyInputError
        If ``transactions`` is empty.
    UnsupportedFormatError
        If ``fmt`` is not a known format.
    DeliveryFailure
        If the delivery collaborator raises.
    """
    txns = list(transactions)
    if not txns:
        raise EmptyInputError()
    fmt = ExportFormat.parse(fmt)
    settings = settings or ExportSettings()

    payload = parser_emitter_for(fmt, settings, clock).emit(txns).encode("utf-8")
    filename = generate_filename(
        settings.filename_prefix, fmt.extension, now, settings.include_timestamp
    )
    log.info("Exporting %d transactions as %s → %s", len(txns), fmt.value, filename)

    try:
        result = delivery.deliver(payload, filename, fmt.mime_type)
    except Exception as e:
        log.error("Delivery of %s failed: %s", filename, e)
        raise DeliveryFailure(filename, str(e)) from e

    if isinstance(result, Cancelled):
        log.info("Export of %s cancelled", filename)
        return ExportOutcome(
            status=ExportStatus.CANCELLED, format=fmt, transaction_count=len(txns)
        )
    if isinstance(result, Delivered):
        log.info("Exported %s via %s", result.filename, result.method)
        return ExportOutcome(
            status=ExportStatus.DELIVERED,
            format=fmt,
            transaction_count=len(txns),
            filename=result.filename,
            method=result.method,
        )
    raise DeliveryFailure(filename, f"unexpected delivery result {result!r}")


def export_filtered(
    all_transactions: Sequence[ITransaction],
    filter_spec: Optional[FilterSpec],
    selected_ids: Iterable[str],
    fmt: ExportFormat | str,
    settings: Optional[ExportSettings],
    delivery: IDelivery,
    **kwargs,
) -> ExportOutcome:
    """Export the selection when there is one, otherwise the filtered view."""
    txns = resolve_export_set(
        all_transactions, ExportScope.SELECTED, filter_spec, selected_ids
    )
    return export(txns, fmt, settings, delivery, **kwargs)


def export_view(
    all_transactions: Sequence[ITransaction],
    state: ViewState,
    settings: Optional[ExportSettings],
    delivery: IDelivery,
    **kwargs,
) -> ExportOutcome:
    """Export according to a UI state snapshot (scope, filters, selection, format)."""
    selection: Selection = state.selection
    txns = resolve_export_set(all_transactions, state.scope, state.filters, selection)
    return export(txns, state.export_format, settings, delivery, **kwargs)
