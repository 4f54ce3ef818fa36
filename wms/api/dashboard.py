from fastapi import APIRouter, Depends, HTTPException, status

from wms.store import InventoryStore, get_store
from wms.services.catalog import InvalidQuantityError
from wms.services.dashboard_service import DashboardService
from wms.schemas.dashboard import DashboardStats

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Dashboard statistics",
    description="Total stock, low-stock count, transaction count and the five most recent movements."
)
def dashboard_stats(store: InventoryStore = Depends(get_store)):
    try:
        return DashboardService(store).stats()
    except InvalidQuantityError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )
