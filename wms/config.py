import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    DATABASE_URL: str = os.getenv("WMS_DATABASE_URL", "sqlite:///./wms.db")
    REDIS_URL: str = os.getenv("WMS_REDIS_URL", "redis://localhost:6379/0")

    # "sql" or "redis"
    STORAGE_BACKEND: str = os.getenv("WMS_STORAGE_BACKEND", "sql").lower()

    # Snapshot keys for the two persisted collections
    CATALOG_KEY: str = os.getenv("WMS_CATALOG_KEY", "wms_data")
    LEDGER_KEY: str = os.getenv("WMS_LEDGER_KEY", "wms_transactions")

    LOG_LEVEL: str = os.getenv("WMS_LOG_LEVEL", "INFO").upper()
    DEFAULT_IMAGE: str = os.getenv("WMS_DEFAULT_IMAGE", "https://placehold.co/50x50/png")


@lru_cache
def get_settings() -> Settings:
    return Settings()
