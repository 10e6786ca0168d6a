"""Key-value storage backends.

The participant store keeps everything in a single serialized blob under one
key, so a backend only needs string get / set / remove.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from sqlalchemy.orm import Session, sessionmaker

from party_draw.models.storage_entry import StorageEntry

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class InMemoryStorage:
    """Process-local storage, used by tests and STORAGE_BACKEND=memory."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class SqlStorage:
    """One `storage_entries` row per key. Each call runs in its own transaction."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_item(self, key: str) -> str | None:
        with self._session_factory() as session:
            entry = session.get(StorageEntry, key)
            return entry.value if entry is not None else None

    def set_item(self, key: str, value: str) -> None:
        with self._session_factory.begin() as session:
            entry = session.get(StorageEntry, key)
            if entry is None:
                session.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value

    def remove_item(self, key: str) -> None:
        with self._session_factory.begin() as session:
            entry = session.get(StorageEntry, key)
            if entry is not None:
                session.delete(entry)


class MongoStorage:
    """One `{_id: key, value: blob}` document per key."""

    def __init__(self, database: Any, collection: str = "storage_entries") -> None:
        self._collection = database[collection]

    def get_item(self, key: str) -> str | None:
        doc = self._collection.find_one({"_id": key})
        if not doc:
            return None
        value = doc.get("value")
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        self._collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)

    def remove_item(self, key: str) -> None:
        self._collection.delete_one({"_id": key})


def build_storage(config: Mapping[str, Any], session_factory: sessionmaker[Session] | None = None) -> KeyValueStorage:
    """Instantiate the backend named by STORAGE_BACKEND."""

    backend = str(config.get("STORAGE_BACKEND") or "sql").lower().strip()
    logger.info("Using %s storage backend", backend)

    if backend == "memory":
        return InMemoryStorage()

    if backend == "sql":
        if session_factory is None:
            raise RuntimeError("SQLAlchemy session factory required for sql backend")
        return SqlStorage(session_factory)

    if backend == "mongo":
        from pymongo import MongoClient

        client: MongoClient = MongoClient(str(config.get("MONGODB_URI") or "mongodb://localhost:27017"))
        return MongoStorage(client[str(config.get("MONGODB_DB") or "party_draw")])

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r} (expected memory|sql|mongo)")
