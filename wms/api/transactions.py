from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from wms.store import InventoryStore, get_store
from wms.services.transaction_service import TransactionService
from wms.schemas.transaction import TransactionCreate, TransactionResponse

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get(
    "/",
    response_model=list[TransactionResponse],
    summary="List ledger entries",
    description="Stock movements in ledger order."
)
def list_transactions(
    limit: Optional[int] = Query(None, ge=1, description="Return only the first N entries"),
    store: InventoryStore = Depends(get_store)
):
    return TransactionService(store).list(limit)


@router.post(
    "/",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a stock movement",
    description="""
    Append an IN or OUT movement to the ledger.

    The ledger is not reconciled with the catalog: recording a movement
    does **not** change the product's quantity.
    """
)
def record_transaction(
    transaction_data: TransactionCreate,
    store: InventoryStore = Depends(get_store)
):
    """
    Record a movement.

    - **sku** / **name**: Product the movement refers to
    - **type**: IN or OUT
    - **qty**: Positive quantity
    - **date**: Optional free-form timestamp (defaults to now)
    """
    return TransactionService(store).record(transaction_data)
