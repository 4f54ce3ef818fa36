from wms.services.catalog import is_low_stock, parse_quantity
from wms.store import InventoryStore

RECENT_TRANSACTIONS = 5


class DashboardService:
    """Computes the dashboard figures from the current catalog and ledger."""

    def __init__(self, store: InventoryStore):
        self.store = store

    def stats(self) -> dict:
        """
        Dashboard statistics.

        Raises:
            InvalidQuantityError: If a stored product has a non-numeric or
                negative qty
        """
        quantities = [parse_quantity(item.get("qty")) for item in self.store.products]
        transactions = self.store.transactions

        return {
            "total_stock": sum(quantities),
            "low_stock": sum(1 for qty in quantities if is_low_stock(qty)),
            # Stand-in: the whole ledger is counted, not just today's entries
            "today_transactions": len(transactions),
            "recent_transactions": transactions[:RECENT_TRANSACTIONS],
        }
