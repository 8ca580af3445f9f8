from .config import settings, STORAGE_KEY, ROOT_DIR
from .logging import logger
from .exceptions import NotFoundException, StorageError
from .storage import KeyValueStorage, MemoryStorage, FileStorage, MongoStorage, create_storage

__all__ = [
    'settings', 'STORAGE_KEY', 'ROOT_DIR',
    'logger',
    'NotFoundException', 'StorageError',
    'KeyValueStorage', 'MemoryStorage', 'FileStorage', 'MongoStorage', 'create_storage'
]
