"""Key-value storage backends for persisted application state.

Every backend exposes the same small async surface (``get_item``,
``set_item``, ``remove_item``, ``close``) over string keys and string
values. A missing key reads as ``None``. Backend failures are raised as
``StorageError`` so callers can decide how to degrade.
"""
import asyncio
import os
from pathlib import Path
from typing import Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from .config import settings
from .exceptions import StorageError
from .logging import logger


class KeyValueStorage:
    """Base class for storage backends"""

    name = "base"

    async def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    async def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    async def remove_item(self, key: str) -> None:
        raise NotImplementedError

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass


class MemoryStorage(KeyValueStorage):
    """Process-local storage, lost on restart"""

    name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage(KeyValueStorage):
    """One file per key inside a directory"""

    name = "file"

    def __init__(self, directory: str):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    async def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    async def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(value, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e

    async def remove_item(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot remove {key}: {e}") from e

    async def ping(self) -> bool:
        return self.directory.is_dir() or not self.directory.exists()


class MongoStorage(KeyValueStorage):
    """Slots stored as {key, value} documents in a MongoDB collection"""

    name = "mongo"

    def __init__(self, url: str, db_name: str, collection: str = "storage", client=None):
        self.url = url
        self.db_name = db_name
        self.collection_name = collection
        self.client = client
        self._collection = None
        self._lock = asyncio.Lock()

    async def _get_collection(self):
        """Get or create the collection handle, connecting on first use"""
        async with self._lock:
            if self._collection is None:
                try:
                    if self.client is None:
                        self.client = AsyncIOMotorClient(self.url, serverSelectionTimeoutMS=5000)
                    await self.client.admin.command('ping')
                    collection = self.client[self.db_name][self.collection_name]
                    await collection.create_index("key", unique=True)
                    self._collection = collection
                    logger.info(f"Connected to MongoDB: {self.url}")
                except Exception as e:
                    logger.error(f"MongoDB connection failed: {e}")
                    raise StorageError(f"Database unavailable: {e}") from e
        return self._collection

    async def get_item(self, key: str) -> Optional[str]:
        collection = await self._get_collection()
        try:
            doc = await collection.find_one({"key": key}, {"_id": 0})
        except Exception as e:
            raise StorageError(f"Cannot read {key}: {e}") from e
        if not doc:
            return None
        return doc.get("value")

    async def set_item(self, key: str, value: str) -> None:
        collection = await self._get_collection()
        try:
            await collection.update_one({"key": key}, {"$set": {"value": value}}, upsert=True)
        except Exception as e:
            raise StorageError(f"Cannot write {key}: {e}") from e

    async def remove_item(self, key: str) -> None:
        collection = await self._get_collection()
        try:
            await collection.delete_one({"key": key})
        except Exception as e:
            raise StorageError(f"Cannot remove {key}: {e}") from e

    async def ping(self) -> bool:
        try:
            await self._get_collection()
            return True
        except StorageError:
            return False

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            self._collection = None
            logger.info("Database connection closed")


def create_storage(backend: Optional[str] = None) -> KeyValueStorage:
    """Build the storage backend named in settings"""
    backend = (backend or settings.STORAGE_BACKEND).lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "file":
        return FileStorage(settings.STORAGE_DIR)
    if backend == "mongo":
        return MongoStorage(settings.MONGO_URL, settings.DB_NAME)
    raise ValueError(f"Unknown storage backend: {backend}")
