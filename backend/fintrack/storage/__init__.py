from .base import LedgerStore
from .memory import MemoryStore
from .database import SqliteStore
from .factory import create_store

__all__ = ["LedgerStore", "MemoryStore", "SqliteStore", "create_store"]
