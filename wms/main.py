from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from wms.config import get_settings
from wms.database import engine, Base
from wms.store import build_store
from wms.services.catalog import InvalidQuantityError
from wms.api import products, transactions, dashboard, health, pages

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    The inventory store is opened here and closed on shutdown; a malformed
    stored snapshot aborts startup.
    """
    # Startup
    logger.info("Starting up application...")

    if settings.STORAGE_BACKEND == "sql":
        logger.info("Creating snapshot table...")
        Base.metadata.create_all(bind=engine)

    store = build_store(settings)
    store.open()
    app.state.store = store
    logger.info(f"Inventory store ready ({settings.STORAGE_BACKEND} backend)")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    store.close()


# Create FastAPI application
app = FastAPI(
    title="WMS Inventory",
    description="""
    A small warehouse inventory manager with:

    - **Catalog**: products with SKU, category, quantity and image
    - **Ledger**: append-only IN/OUT stock movements
    - **Dashboard**: total stock, low-stock count and recent movements
    - **Browser UI**: inventory table with add/edit modal and delete confirmation

    ## Storage
    Each collection is kept in memory and saved as a whole JSON snapshot
    under its own key, in a SQL table (default) or in Redis.

    ## Stock status
    qty 0 is *Out of Stock*, 1-9 is *Low Stock*, 10 and above is *In Stock*.
    """,
    version="1.0.0",
    lifespan=lifespan
)


@app.exception_handler(InvalidQuantityError)
async def invalid_quantity_handler(request: Request, exc: InvalidQuantityError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)}
    )


# Include API routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(products.router, prefix="/api/v1")
app.include_router(transactions.router, prefix="/api/v1")
app.include_router(dashboard.router, prefix="/api/v1")

# Browser UI
app.include_router(pages.router)


@app.get("/api", tags=["Root"])
def api_root():
    """Root endpoint with API information."""
    return {
        "name": "WMS Inventory",
        "version": "1.0.0",
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/api/v1/health"
    }
