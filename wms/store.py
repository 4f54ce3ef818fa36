import logging
import threading

from fastapi import Request

from wms.config import Settings
from wms.seed import SEED_PRODUCTS, SEED_TRANSACTIONS
from wms.utils.storage import (
    KeyValueBackend,
    RedisKeyValueBackend,
    SnapshotStorage,
    SqlKeyValueBackend,
)

logger = logging.getLogger(__name__)


class StoreNotOpenError(RuntimeError):
    """Exception raised when a store is used before open() or after close()."""
    pass


class InventoryStore:
    """
    Owner of the in-memory catalog and ledger.

    Both collections are loaded from snapshot storage by `open()` and written
    back as whole snapshots by `save_products()` / `save_transactions()`.
    Callers build the new list and hand it to the save; memory only changes
    once storage has accepted it. The two saves are independent; nothing makes them atomic together.

    Mutations must hold `lock`: FastAPI runs sync endpoints in a threadpool.
    """

    def __init__(self, storage: SnapshotStorage, catalog_key: str = "wms_data", ledger_key: str = "wms_transactions"):
        self.storage = storage
        self.catalog_key = catalog_key
        self.ledger_key = ledger_key
        self.lock = threading.RLock()
        self._products: list[dict] = []
        self._transactions: list[dict] = []
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def products(self) -> list[dict]:
        self._ensure_open()
        return self._products

    @property
    def transactions(self) -> list[dict]:
        self._ensure_open()
        return self._transactions

    def open(self) -> "InventoryStore":
        """Load both collections. Malformed snapshots propagate SnapshotDecodeError."""
        with self.lock:
            self._products = self.storage.load(self.catalog_key, SEED_PRODUCTS)
            self._transactions = self.storage.load(self.ledger_key, SEED_TRANSACTIONS)
            self._is_open = True
        logger.info(
            f"Inventory store opened: {len(self._products)} products, "
            f"{len(self._transactions)} transactions"
        )
        return self

    def close(self) -> None:
        with self.lock:
            self._is_open = False
            self._products = []
            self._transactions = []
        self.storage.close()
        logger.info("Inventory store closed")

    def save_products(self, products: list[dict]) -> None:
        """Persist a new catalog, then make it the in-memory one."""
        self._ensure_open()
        self.storage.save(self.catalog_key, products)
        self._products = products

    def save_transactions(self, transactions: list[dict]) -> None:
        """Persist a new ledger, then make it the in-memory one."""
        self._ensure_open()
        self.storage.save(self.ledger_key, transactions)
        self._transactions = transactions

    def ping(self) -> bool:
        return self.storage.ping()

    def _ensure_open(self) -> None:
        if not self._is_open:
            raise StoreNotOpenError("Inventory store is not open")


def build_backend(settings: Settings, session_factory=None) -> KeyValueBackend:
    if settings.STORAGE_BACKEND == "redis":
        return RedisKeyValueBackend.from_url(settings.REDIS_URL)
    if settings.STORAGE_BACKEND == "sql":
        if session_factory is None:
            from wms.database import SessionLocal
            session_factory = SessionLocal
        return SqlKeyValueBackend(session_factory)
    raise ValueError(f"Unknown storage backend: {settings.STORAGE_BACKEND!r}")


def build_store(settings: Settings, session_factory=None) -> InventoryStore:
    """Create an unopened store wired to the configured backend."""
    backend = build_backend(settings, session_factory)
    return InventoryStore(
        SnapshotStorage(backend),
        catalog_key=settings.CATALOG_KEY,
        ledger_key=settings.LEDGER_KEY,
    )


def get_store(request: Request) -> InventoryStore:
    """
    Dependency to get the inventory store opened by the app lifespan.
    """
    return request.app.state.store
