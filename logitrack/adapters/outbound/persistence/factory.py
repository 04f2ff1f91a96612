# logitrack/adapters/outbound/persistence/factory.py

import logging

from logitrack.adapters.configuration.config import Settings
from logitrack.adapters.outbound.persistence.local.key_value_store import JsonFileKeyValueStore
from logitrack.adapters.outbound.persistence.local.local_storage_adapter import LocalStorageAdapter
from logitrack.adapters.outbound.persistence.sql.sql_adapter import SqlDatabaseAdapter
from logitrack.application.ports.outbound import IDatabaseAdapter

logger = logging.getLogger(__name__)


def build_key_value_store(settings: Settings) -> JsonFileKeyValueStore:
    return JsonFileKeyValueStore(path=settings.LOCAL_STORAGE_PATH or None, prefix=settings.STORAGE_PREFIX)


def build_database_adapter(settings: Settings, store: JsonFileKeyValueStore) -> IDatabaseAdapter:
    """Pick the storage backend configured by DB_PROVIDER."""
    if settings.DB_PROVIDER == "SQL":
        logger.info("Using relational storage backend")
        return SqlDatabaseAdapter(str(settings.DATABASE_URL))

    logger.info("Using local storage backend")
    return LocalStorageAdapter(store)
