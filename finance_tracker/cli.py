#!/usr/bin/env python3
"""
finance-tracker: export a transaction table as CSV or JSON.

Reads a CSV/Excel transaction table, narrows it with the same filters the
transaction list offers, and writes the export file into a directory.

Examples
--------
  finance-tracker ledger.xlsx --format json --out exports/
  finance-tracker ledger.csv --category Food --date-from 2024-01-01 --date-to 2024-03-31
  finance-tracker ledger.csv --summary
"""

# finance_tracker/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from finance_tracker.controllers.aggregator import display_totals
from finance_tracker.controllers.data_session import DataSession
from finance_tracker.controllers.delivery import DirectoryDelivery
from finance_tracker.controllers.export_orchestrator import (
    export,
    export_preview,
    resolve_export_set,
)
from finance_tracker.data_model import DateRange, ExportScope, ExportSettings, FilterSpec
from finance_tracker.exceptions import FinanceTrackerError
from finance_tracker.utilities import EXPORT_DEFAULTS, format_amount, to_date

log = logging.getLogger(__name__)


def _filter_spec(args: argparse.Namespace) -> FilterSpec:
    date_range = None
    if args.date_from or args.date_to:
        start = to_date(args.date_from) if args.date_from else date.min
        end = to_date(args.date_to) if args.date_to else date.max
        date_range = DateRange(start, end)
    return FilterSpec(
        date_range=date_range,
        category=args.category or "",
        person=args.person or "",
        type=args.type or "",
        search_text=args.search or "",
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="finance-tracker",
        description="Export personal finance transactions to CSV or JSON.",
    )
    ap.add_argument("input", type=Path, help="Path to a .csv or .xlsx transaction table")
    ap.add_argument("--sheet", default=0,
                    help="Worksheet name or index when reading a workbook (default: first)")
    ap.add_argument("--format", dest="fmt", choices=["csv", "json"], default="csv",
                    help="Export format (default: csv)")
    ap.add_argument("--out", type=Path, default=Path("."),
                    help="Directory to write the export into (default: current directory)")
    ap.add_argument("--scope", choices=["all", "filtered"], default="filtered",
                    help="Export everything, or only what the filters keep (default)")
    ap.add_argument("--prefix", default=EXPORT_DEFAULTS["filename_prefix"],
                    help="Export filename prefix (default: %(default)s)")
    ap.add_argument("--currency", default=EXPORT_DEFAULTS["currency"],
                    help="Currency code recorded in JSON exports (default: %(default)s)")

    # Filters
    ap.add_argument("--date-from", help="Filter: earliest date to include (yyyy-mm-dd or mm/dd/yyyy)")
    ap.add_argument("--date-to", help="Filter: latest date to include (yyyy-mm-dd or mm/dd/yyyy)")
    ap.add_argument("--category", help="Filter: exact category")
    ap.add_argument("--person", help="Filter: exact person")
    ap.add_argument("--type", choices=["income", "expense"], help="Filter: transaction type")
    ap.add_argument("--search", help="Filter: case-insensitive text in payee, notes, category or tags")

    ap.add_argument("--summary", action="store_true",
                    help="Print totals for the export set and exit without writing a file")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.input.exists():
        print(f"Input table not found: {args.input}", file=sys.stderr)
        return 1
    if not args.input.is_file():
        print(f"Input path is not a file: {args.input}", file=sys.stderr)
        return 1

    sheet = int(args.sheet) if str(args.sheet).isdigit() else args.sheet
    try:
        spec = _filter_spec(args)
        txns = DataSession().load(args.input, sheet_name=sheet)
        scope = ExportScope.parse(args.scope)

        if args.summary:
            preview = export_preview(txns, scope, spec)
            totals = display_totals(resolve_export_set(txns, scope, spec))
            print(preview.description)
            print(f"Income:   {format_amount(totals.income)}")
            print(f"Expenses: {format_amount(totals.expenses)}")
            print(f"Net:      {format_amount(totals.net)}")
            print(f"Average:  {format_amount(totals.average)}")
            return 0

        settings = ExportSettings(currency=args.currency, filename_prefix=args.prefix)
        outcome = export(
            resolve_export_set(txns, scope, spec),
            args.fmt,
            settings,
            DirectoryDelivery(args.out),
        )
    except (FinanceTrackerError, ValueError) as e:
        log.debug("Export aborted: %s", e)
        print(str(e), file=sys.stderr)
        return 1

    print(args.out / outcome.filename)
    return 0


if __name__ == "__main__":
    sys.exit(main())
