from pydantic import BaseModel

from wms.schemas.transaction import TransactionResponse


class DashboardStats(BaseModel):
    """Headline numbers shown on the dashboard."""
    total_stock: int
    low_stock: int
    # Counts every ledger entry; no date filtering is applied
    today_transactions: int
    recent_transactions: list[TransactionResponse]
