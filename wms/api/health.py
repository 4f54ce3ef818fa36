from fastapi import APIRouter, Depends

from wms.store import InventoryStore, get_store

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check that the store is open and its storage backend answers."
)
def readiness_check(store: InventoryStore = Depends(get_store)):
    """
    Readiness check.

    Returns status of:
    - The inventory store (loaded or not)
    - The storage backend (SQL database or Redis)
    """
    checks = {
        "store": store.is_open,
        "storage": False
    }

    try:
        checks["storage"] = store.ping()
    except Exception as e:
        checks["storage_error"] = str(e)

    all_healthy = all([checks["store"], checks["storage"]])

    return {
        "status": "ready" if all_healthy else "not_ready",
        "checks": checks
    }
