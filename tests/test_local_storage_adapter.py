# tests/test_local_storage_adapter.py

import json

import pytest

from logitrack.adapters.outbound.persistence.local.key_value_store import JsonFileKeyValueStore
from logitrack.adapters.outbound.persistence.local.local_storage_adapter import LocalStorageAdapter
from logitrack.domain.exceptions import DatabaseOperationException
from tests.factories import make_client, make_service


async def test_collections_are_stored_under_prefixed_keys(local_adapter, tmp_path):
    await local_adapter.save_client(make_client())
    await local_adapter.save_service(make_service())

    document = json.loads((tmp_path / "logitrack.json").read_text(encoding="utf-8"))

    assert set(document) >= {"logitrack_clients", "logitrack_services", "logitrack_logs"}
    assert document["logitrack_services"][0]["deliveryAddresses"] == ["Rua B, 20"]
    assert "deletedAt" not in document["logitrack_services"][0]


async def test_data_survives_a_new_adapter(tmp_path):
    path = str(tmp_path / "data" / "store.json")
    first = LocalStorageAdapter(JsonFileKeyValueStore(path=path))
    await first.initialize()
    await first.save_client(make_client())

    second = LocalStorageAdapter(JsonFileKeyValueStore(path=path))
    await second.initialize()

    assert [c.id for c in await second.get_clients("user-1")] == ["client-1"]


async def test_memory_only_store():
    adapter = LocalStorageAdapter(JsonFileKeyValueStore(path=None))
    await adapter.initialize()
    await adapter.save_service(make_service())
    assert len(await adapter.get_services("user-1")) == 1


async def test_corrupted_file_raises_storage_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    adapter = LocalStorageAdapter(JsonFileKeyValueStore(path=str(path)))

    with pytest.raises(DatabaseOperationException):
        await adapter.get_clients("user-1")


async def test_corrupted_record_raises_storage_error(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"logitrack_services": [{"id": "x"}]}), encoding="utf-8")
    adapter = LocalStorageAdapter(JsonFileKeyValueStore(path=str(path)))

    with pytest.raises(DatabaseOperationException):
        await adapter.get_services("user-1")


def test_store_update_list_is_atomic_per_call(tmp_path):
    store = JsonFileKeyValueStore(path=str(tmp_path / "kv.json"), prefix="t_")
    store.save_list("items", [{"id": "1"}])
    store.update_list("items", lambda records: records + [{"id": "2"}])

    assert store.get_list("items") == [{"id": "1"}, {"id": "2"}]
    assert not (tmp_path / "kv.json.tmp").exists()

    store.remove("items")
    assert store.get_list("items") == []
