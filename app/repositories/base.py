# app/repositories/base.py
import logging
from typing import Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from sqlmodel import SQLModel

from app.core.storage import KeyValueStorage

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SQLModel)


class CollectionRepository(Generic[T]):
    """
    Data access for one JSON-encoded collection stored under `key`.

    - Pure storage operations (load whole list / save whole list).
    - No business logic.

    Unparseable stored data is treated as an empty collection; write
    errors from the backend propagate to the caller.
    """

    key: str
    model: type[T]
    _adapter: TypeAdapter

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._adapter = TypeAdapter(list[cls.model])

    def __init__(self, storage: KeyValueStorage, key: str | None = None):
        self.storage = storage
        if key is not None:
            self.key = key

    def load(self) -> list[T]:
        raw = self.storage.get(self.key)
        if raw is None:
            return []
        try:
            return self._adapter.validate_json(raw)
        except (ValidationError, ValueError) as e:
            logger.warning("Failed to parse %s from storage: %s", self.key, e)
            return []

    def dump(self, items: list[T]) -> str:
        return self._adapter.dump_json(items).decode()

    def save(self, items: list[T]) -> None:
        self.storage.set(self.key, self.dump(items))
