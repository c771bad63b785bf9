"""
Database table definitions and it stores:
- Storage slots for the fallback plan store (one key -> one serialized value)

Main purpose:
Durable on-device key/value storage when no remote store is configured.
"""


from datetime import datetime

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from studio_planner.db.base import Base

class StorageSlot(Base):
    __tablename__ = "storage_slots"
    key: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
