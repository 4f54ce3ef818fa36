import logging
from datetime import datetime
from typing import List, Optional

from wms.schemas.transaction import TransactionCreate
from wms.store import InventoryStore

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M"


class TransactionService:
    """
    Service class for the stock movement ledger.

    The ledger is append-only and is never reconciled against catalog
    quantities: recording a movement does not change any product's qty.
    """

    def __init__(self, store: InventoryStore):
        self.store = store

    def list(self, limit: Optional[int] = None) -> List[dict]:
        """Ledger entries in stored order, optionally only the first `limit`."""
        transactions = self.store.transactions
        if limit is None:
            return list(transactions)
        return transactions[:limit]

    def record(self, transaction_data: TransactionCreate) -> dict:
        """
        Append a movement to the ledger and persist it.

        Args:
            transaction_data: Movement to record

        Returns:
            The stored ledger entry
        """
        entry = {
            "date": transaction_data.date or datetime.now().strftime(DATE_FORMAT),
            "sku": transaction_data.sku,
            "name": transaction_data.name,
            "type": transaction_data.type.value,
            "qty": transaction_data.qty,
        }

        with self.store.lock:
            self.store.save_transactions([*self.store.transactions, entry])

        logger.info(f"Recorded {entry['type']} of {entry['qty']} x {entry['sku']}")
        return entry
