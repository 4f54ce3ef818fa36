import os

# Point the app at a shared in-memory SQLite database before it is imported
os.environ["WMS_DATABASE_URL"] = "sqlite://"
os.environ["WMS_STORAGE_BACKEND"] = "sql"

import pytest
from fastapi.testclient import TestClient

from wms.main import app
from wms.database import Base, SessionLocal, engine
from wms.store import InventoryStore
from wms.utils.storage import SnapshotStorage, SqlKeyValueBackend


@pytest.fixture(scope="function")
def client():
    """Create test client with a freshly seeded store for each test."""
    # Create tables
    Base.metadata.create_all(bind=engine)

    with TestClient(app) as test_client:
        yield test_client

    # Drop tables after test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def storage():
    """Snapshot storage on the test database, emptied after each test."""
    Base.metadata.create_all(bind=engine)

    yield SnapshotStorage(SqlKeyValueBackend(SessionLocal))

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def store(storage):
    """An opened inventory store holding the seed data."""
    inventory_store = InventoryStore(storage).open()

    yield inventory_store

    if inventory_store.is_open:
        inventory_store.close()
