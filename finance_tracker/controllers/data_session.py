# finance_tracker/controllers/data_session.py
from __future__ import annotations

import logging
import logging.config
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from finance_tracker.controllers.transaction_loader import load_transaction_table
from finance_tracker.data_model import Transaction
from finance_tracker.utilities import LOGGING

logging.config.dictConfig(LOGGING)
log = logging.getLogger(__name__)


@dataclass
class DataSession:
    """
    Holds the loaded transaction collection for one working session.

    Responsibilities:
    • Load and memoize the transaction table once per path.
    • Hand out immutable snapshots so exports never see a half-updated list.
    • Provide lightweight invalidation when the source file changes.
    """

    table_path: Optional[Path] = None
    transactions: List[Transaction] = field(default_factory=list)

    def load(self, path: Path, *, sheet_name: int | str = 0) -> List[Transaction]:
        path = Path(path)
        if self.table_path != path or not self.transactions:
            log.info("Loading transactions: %s", path)
            self.transactions = load_transaction_table(path, sheet_name=sheet_name)
            self.table_path = path
            log.debug("Loaded %d transactions from %s", len(self.transactions), path)
        else:
            log.debug(
                "Reusing cached transactions for %s (%d txns)",
                path,
                len(self.transactions),
            )
        return self.transactions

    def snapshot(self) -> tuple[Transaction, ...]:
        return tuple(self.transactions)

    def invalidate(self) -> None:
        log.debug("Dropping cached transactions for %s", self.table_path)
        self.table_path = None
        self.transactions = []
