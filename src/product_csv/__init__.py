"""Flat-file CRUD for an ``id,name,price`` product catalog."""

from .errors import CatalogError, DuplicateKeyError, NotFoundError
from .records import Record
from .storage import FileStorage, MemoryStorage, Storage
from .store import RecordStore, add, delete, get, update

__all__ = [
    "CatalogError",
    "DuplicateKeyError",
    "NotFoundError",
    "Record",
    "Storage",
    "FileStorage",
    "MemoryStorage",
    "RecordStore",
    "add",
    "get",
    "update",
    "delete",
]
