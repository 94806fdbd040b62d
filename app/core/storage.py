# app/core/storage.py
"""
Key/value storage backends for the marketplace collections.

Every collection (products, vendors, orders, cart items) is stored as a
single JSON text value under its own key, the same way a browser keeps
data in local storage. Backends only move text around; parsing and
validation live in the repositories.

Two backends:
  - SQLStorage    : rows in the `storage_entries` table (SQLModel engine)
  - MemoryStorage : plain dict, optional byte quota (tests, scripts)
"""
from collections.abc import Mapping
from datetime import datetime, timezone

from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.models.storage import StorageEntry


class StorageQuotaExceededError(RuntimeError):
    """Raised when a write would push a backend past its byte quota."""


class KeyValueStorage:
    """
    Interface shared by all backends.

    set_many() must apply all keys or none of them: the catalog relies on
    it for the vendor -> products cascade.
    """

    def get(self, key: str) -> str | None:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, str]) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    def __init__(self, initial: Mapping[str, str] | None = None, quota_bytes: int | None = None):
        self._data: dict[str, str] = dict(initial or {})
        self.quota_bytes = quota_bytes

    def _size_with(self, values: Mapping[str, str]) -> int:
        merged = {**self._data, **values}
        return sum(len(k.encode()) + len(v.encode()) for k, v in merged.items())

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set_many(self, values: Mapping[str, str]) -> None:
        if self.quota_bytes is not None and self._size_with(values) > self.quota_bytes:
            raise StorageQuotaExceededError(
                f"Storage quota of {self.quota_bytes} bytes exceeded"
            )
        self._data.update(values)


class SQLStorage(KeyValueStorage):
    """
    Storage backed by a single SQL table.

    Each call opens its own Session so the backend can be used from
    worker threads.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def get(self, key: str) -> str | None:
        with Session(self.engine) as session:
            entry = session.get(StorageEntry, key)
            return entry.value if entry else None

    def set_many(self, values: Mapping[str, str]) -> None:
        # One commit for all keys
        with Session(self.engine) as session:
            for key, value in values.items():
                entry = session.get(StorageEntry, key)
                if entry is None:
                    entry = StorageEntry(key=key, value=value)
                else:
                    entry.value = value
                    entry.updated_at = datetime.now(timezone.utc)
                session.add(entry)
            session.commit()

