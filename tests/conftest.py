# tests/conftest.py

import pytest

from logitrack.adapters.outbound.persistence.local.key_value_store import JsonFileKeyValueStore
from logitrack.adapters.outbound.persistence.local.local_storage_adapter import LocalStorageAdapter
from logitrack.adapters.outbound.persistence.sql.sql_adapter import SqlDatabaseAdapter
from logitrack.domain.models import Actor
from tests.factories import SequentialIds, TickingClock


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def actor():
    return Actor(name="Maria Souza", id="user-1")


@pytest.fixture
async def local_adapter(tmp_path, clock, ids):
    store = JsonFileKeyValueStore(path=str(tmp_path / "logitrack.json"))
    adapter = LocalStorageAdapter(store, id_factory=ids, clock=clock)
    await adapter.initialize()
    return adapter


@pytest.fixture
async def sql_adapter(tmp_path, clock, ids):
    adapter = SqlDatabaseAdapter(f"sqlite+aiosqlite:///{tmp_path / 'logitrack.db'}", id_factory=ids, clock=clock)
    await adapter.initialize()
    yield adapter
    await adapter.dispose()


@pytest.fixture(params=["local", "sql"])
async def adapter(request, tmp_path, clock, ids):
    """Every storage contract test runs against both backends."""
    if request.param == "local":
        store = JsonFileKeyValueStore(path=str(tmp_path / "logitrack.json"))
        backend = LocalStorageAdapter(store, id_factory=ids, clock=clock)
    else:
        backend = SqlDatabaseAdapter(
            f"sqlite+aiosqlite:///{tmp_path / 'logitrack.db'}", id_factory=ids, clock=clock
        )
    await backend.initialize()
    yield backend
    if request.param == "sql":
        await backend.dispose()
