"""Factory for creating the ledger store."""
import logging
from fintrack.config import Settings
from fintrack.storage.base import LedgerStore
from fintrack.storage.memory import MemoryStore
from fintrack.storage.database import SqliteStore

logger = logging.getLogger(__name__)


def create_store(settings: Settings) -> LedgerStore:
    """
    Create the storage backend named by ``settings.storage_backend``.

    Args:
        settings: Application settings

    Returns:
        LedgerStore instance

    Raises:
        ValueError: For an unknown backend name
    """
    backend = settings.storage_backend.lower()
    if backend == "memory":
        logger.info("Using in-memory ledger store")
        return MemoryStore()
    elif backend == "sqlite":
        logger.info("Using SQLite ledger store at %s", settings.database_path)
        return SqliteStore(settings.database_path)
    else:
        raise ValueError(f"Unknown storage backend: {settings.storage_backend}")
