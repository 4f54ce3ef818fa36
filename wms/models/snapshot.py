from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from wms.database import Base


class Snapshot(Base):
    """
    One stored JSON snapshot of a whole collection.

    Attributes:
        key: Storage key (e.g. 'wms_data' for the catalog)
        value: JSON text of the full collection
        updated_at: Timestamp of the last overwrite
    """
    __tablename__ = "snapshots"

    key = Column(String(128), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Snapshot(key='{self.key}', size={len(self.value or '')})>"
