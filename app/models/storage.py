# app/models/storage.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class StorageEntry(SQLModel, table=True):
    """
    One persisted collection, stored as JSON text under a key.

    Keys in use:
      - products, vendors, orders
      - cartItems (and cartItems:<session> for named cart sessions)
    """

    __tablename__ = "storage_entries"

    key: str = Field(
        primary_key=True,
        max_length=255,
        description="Collection name",
    )

    value: str = Field(
        description="JSON-encoded collection",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last write timestamp (UTC)",
    )
