# tests/test_backup.py

import json

import httpx
import pytest

from logitrack.adapters.outbound.backup.connection_repository import LocalBackupConnectionRepository
from logitrack.adapters.outbound.backup.http_backup_client import HttpBackupClient
from logitrack.application.dtos import ConnectionCreate, ConnectionUpdate
from logitrack.application.use_cases import BackupUseCases
from logitrack.domain.exceptions import ResourceNotFoundException
from logitrack.domain.models import BackupStatus, DbProvider
from tests.factories import make_service


@pytest.fixture
def received():
    return []


@pytest.fixture
def backups(local_adapter, received, ids, clock):
    def handler(request: httpx.Request) -> httpx.Response:
        received.append(request)
        if "broken" in request.url.host:
            return httpx.Response(503, json={"error": "unavailable"})
        return httpx.Response(200, json={"ok": True})

    return BackupUseCases(
        connections=LocalBackupConnectionRepository(local_adapter.store),
        adapter=local_adapter,
        client=HttpBackupClient(transport=httpx.MockTransport(handler)),
        id_factory=ids,
        clock=clock,
    )


async def test_connection_crud_hides_api_key(backups):
    created = await backups.create_connection(ConnectionCreate(
        provider=DbProvider.WEBHOOK, name="Webhook", endpoint_url="https://backup.logitrack.com/hook", api_key="k1",
    ))

    assert created.last_backup_status == BackupStatus.NEVER
    assert "api_key" not in created.model_dump()

    updated = await backups.update_connection(created.id, ConnectionUpdate(is_active=False))
    assert updated.is_active is False

    await backups.delete_connection(created.id)
    assert await backups.list_connections() == []

    with pytest.raises(ResourceNotFoundException):
        await backups.delete_connection(created.id)


async def test_backup_is_sent_to_active_connections(backups, local_adapter, received):
    await local_adapter.save_service(make_service())
    ok = await backups.create_connection(ConnectionCreate(
        provider=DbProvider.SUPABASE, name="Supabase", endpoint_url="https://store.logitrack.com/backup", api_key="k1",
    ))
    await backups.create_connection(ConnectionCreate(
        provider=DbProvider.WEBHOOK, name="Desligado", endpoint_url="https://off.logitrack.com", is_active=False,
    ))

    results = await backups.run_backup()

    assert [(r.connection_id, r.status) for r in results] == [(ok.id, BackupStatus.SUCCESS)]
    assert len(received) == 1
    assert received[0].headers["Authorization"] == "Bearer k1"
    body = json.loads(received[0].content)
    assert body["data"]["services"][0]["id"] == "svc-1"

    (stored,) = [c for c in await backups.list_connections() if c.id == ok.id]
    assert stored.last_backup_status == BackupStatus.SUCCESS
    assert stored.last_backup_time is not None


async def test_failed_target_does_not_stop_others(backups):
    await backups.create_connection(ConnectionCreate(
        provider=DbProvider.WEBHOOK, name="Quebrado", endpoint_url="https://broken.logitrack.com/hook",
    ))
    await backups.create_connection(ConnectionCreate(
        provider=DbProvider.WEBHOOK, name="Ok", endpoint_url="https://ok.logitrack.com/hook",
    ))

    results = await backups.run_backup()

    assert [(r.name, r.status) for r in results] == [("Quebrado", BackupStatus.ERROR), ("Ok", BackupStatus.SUCCESS)]
    assert "503" in results[0].error


async def test_nothing_to_do_without_active_connections(backups, received):
    assert await backups.run_backup() == []
    assert received == []
