import copy
import json
import logging
from typing import Any, Optional, Protocol

import redis
from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from wms.models.snapshot import Snapshot

logger = logging.getLogger(__name__)


class SnapshotDecodeError(Exception):
    """Exception raised when a stored snapshot is not valid JSON."""
    pass


class KeyValueBackend(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def ping(self) -> bool: ...

    def close(self) -> None: ...


class SqlKeyValueBackend:
    """
    Key-value backend storing each snapshot as a row of the `snapshots` table.

    A new session is opened per call, so the backend can be shared across
    request threads.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        with self.session_factory() as db:
            row = db.get(Snapshot, key)
            return row.value if row else None

    def set(self, key: str, value: str) -> None:
        with self.session_factory() as db:
            row = db.get(Snapshot, key)
            if row:
                row.value = value
            else:
                db.add(Snapshot(key=key, value=value))
            db.commit()

    def ping(self) -> bool:
        with self.session_factory() as db:
            db.execute(text("SELECT 1"))
        return True

    def close(self) -> None:
        pass


class RedisKeyValueBackend:
    """Key-value backend over plain Redis strings. Keys never expire."""

    def __init__(self, client: redis.Redis):
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisKeyValueBackend":
        return cls(redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> Optional[str]:
        return self.client.get(key)

    def set(self, key: str, value: str) -> None:
        self.client.set(key, value)

    def ping(self) -> bool:
        return bool(self.client.ping())

    def close(self) -> None:
        self.client.close()


class SnapshotStorage:
    """
    Whole-collection JSON snapshots on top of a key-value backend.

    Every save overwrites the full stored value; there is no diffing and no
    schema versioning. Backend errors propagate to the caller.
    """

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    def load(self, key: str, default: list[dict]) -> list[Any]:
        """
        Load the collection stored under a key.

        Args:
            key: Storage key
            default: Collection to return when nothing is stored yet

        Returns:
            The parsed collection, or a copy of `default`

        Raises:
            SnapshotDecodeError: If the stored value is not valid JSON
        """
        raw = self.backend.get(key)
        if raw is None:
            logger.info(f"No snapshot under '{key}', using seed data")
            return copy.deepcopy(default)

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Snapshot '{key}' is not valid JSON: {e}")
            raise SnapshotDecodeError(f"Snapshot '{key}' is not valid JSON: {e}") from e

        logger.info(f"Loaded snapshot '{key}'")
        return data

    def save(self, key: str, collection: list[Any]) -> None:
        self.backend.set(key, json.dumps(collection, ensure_ascii=False))

    def ping(self) -> bool:
        return self.backend.ping()

    def close(self) -> None:
        self.backend.close()
