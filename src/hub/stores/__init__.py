"""Collection stores - the document database behind the repositories."""

from src.hub.core.config import Settings, get_settings
from src.hub.core.db import create_engine_from_settings
from src.hub.stores.base import CollectionStore, Document, QueryFilter, QuerySort
from src.hub.stores.memory import MemoryCollectionStore
from src.hub.stores.sql import SqlCollectionStore


def create_store(settings: Settings | None = None) -> CollectionStore:
    """Build the store selected by ``store_backend``.

    The postgres store gets its own engine; dispose it through
    ``store.engine`` when shutting down.
    """
    if settings is None:
        settings = get_settings()
    if settings.store_backend == "postgres":
        return SqlCollectionStore(create_engine_from_settings(settings))
    return MemoryCollectionStore()


__all__ = [
    "CollectionStore",
    "Document",
    "MemoryCollectionStore",
    "QueryFilter",
    "QuerySort",
    "SqlCollectionStore",
    "create_store",
]
