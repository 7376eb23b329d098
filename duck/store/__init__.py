from duck.store.base import DuckStore
from duck.store.errors import DuckNotFound, StoreError, StoreUnavailable
from duck.store.memory import InMemoryStore
from duck.store.sqlite import SQLiteStore

__all__ = [
    "DuckStore",
    "DuckNotFound",
    "InMemoryStore",
    "SQLiteStore",
    "StoreError",
    "StoreUnavailable",
]
