import enum
from pydantic import BaseModel, Field
from typing import Optional


class TransactionType(str, enum.Enum):
    """Direction of a stock movement."""
    IN = "IN"
    OUT = "OUT"


class TransactionCreate(BaseModel):
    """Schema for recording a stock movement."""
    sku: str = Field(..., min_length=1, max_length=64, description="SKU of the moved product")
    name: str = Field(..., min_length=1, max_length=255, description="Product name at the time of the movement")
    type: TransactionType = Field(..., description="IN for receipts, OUT for issues")
    qty: int = Field(..., gt=0, description="Moved quantity (must be positive)")
    date: Optional[str] = Field(None, description="Free-form timestamp; defaults to now")


class TransactionResponse(BaseModel):
    """Schema for a ledger entry."""
    date: str
    sku: str
    name: str
    type: TransactionType
    qty: int
