# tests/test_storage_adapters.py

"""
Storage contract shared by the local and relational backends.
"""

import math

import pytest

from logitrack.domain.exceptions import (
    InvalidInputException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from logitrack.domain.models import Actor, LogAction, PaymentMethod, ServiceStatus, User, UserRole
from tests.factories import make_client, make_expense, make_service


async def test_service_round_trip_keeps_every_field(adapter):
    service = make_service(
        pickup_addresses=["Rua A", "Rua A2"],
        delivery_addresses=["Rua B"],
        payment_method=PaymentMethod.CARD,
        status=ServiceStatus.IN_PROGRESS,
        waiting_time=15.5,
        extra_fee=7.0,
        manual_order_id="OS-99",
        notes="Entregar na recepção",
        image_url="https://cdn.logitrack.com/os-99.png",
        paid=True,
    )

    await adapter.save_service(service)

    assert await adapter.get_service(service.id) == service
    assert await adapter.get_services("user-1") == [service]


async def test_first_save_logs_creation_with_actor(adapter, actor):
    await adapter.save_service(make_service(), actor)

    logs = await adapter.get_service_logs("svc-1")

    assert len(logs) == 1
    assert logs[0].action == LogAction.CRIACAO
    assert logs[0].user_name == "Maria Souza"
    assert logs[0].changes == {}


async def test_cost_edit_logs_single_diff(adapter):
    await adapter.save_service(make_service(cost=100))
    await adapter.update_service(make_service(cost=150))

    logs = await adapter.get_service_logs("svc-1")

    assert [log.action for log in logs] == [LogAction.EDICAO, LogAction.CRIACAO]
    assert logs[0].changes == {"Valor": {"old": 100, "new": 150}}
    assert logs[0].user_name == "System"


async def test_unchanged_update_writes_no_log(adapter):
    await adapter.save_service(make_service())
    await adapter.update_service(make_service(notes="só observação"))

    assert len(await adapter.get_service_logs("svc-1")) == 1
    assert (await adapter.get_service("svc-1")).notes == "só observação"


async def test_soft_delete_and_restore_cycle(adapter, actor):
    await adapter.save_service(make_service())

    await adapter.delete_service("svc-1", actor)
    deleted_at = (await adapter.get_service("svc-1")).deleted_at
    assert deleted_at is not None
    assert await adapter.get_services("user-1") == []
    assert len(await adapter.get_services("user-1", include_deleted=True)) == 1

    await adapter.restore_service("svc-1", actor)
    assert (await adapter.get_service("svc-1")).deleted_at is None

    await adapter.delete_service("svc-1", actor)
    assert (await adapter.get_service("svc-1")).deleted_at is not None

    actions = [log.action for log in await adapter.get_service_logs("svc-1")]
    assert actions == [LogAction.EXCLUSAO, LogAction.RESTAURACAO, LogAction.EXCLUSAO, LogAction.CRIACAO]


async def test_restore_of_live_service_is_noop(adapter):
    await adapter.save_service(make_service())
    await adapter.restore_service("svc-1")

    actions = [log.action for log in await adapter.get_service_logs("svc-1")]
    assert LogAction.RESTAURACAO not in actions


async def test_repeated_delete_keeps_first_timestamp(adapter):
    await adapter.save_service(make_service())
    await adapter.delete_service("svc-1")
    first = (await adapter.get_service("svc-1")).deleted_at

    await adapter.delete_service("svc-1")

    assert (await adapter.get_service("svc-1")).deleted_at == first
    assert len(await adapter.get_service_logs("svc-1")) == 2


async def test_delete_unknown_service(adapter):
    with pytest.raises(ResourceNotFoundException):
        await adapter.delete_service("missing")


async def test_invalid_service_never_reaches_storage(adapter):
    with pytest.raises(InvalidInputException):
        await adapter.save_service(make_service(pickup_addresses=[]))

    assert await adapter.get_service("svc-1") is None
    assert await adapter.get_service_logs("svc-1") == []


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
async def test_non_finite_amounts_never_reach_storage(adapter, value):
    with pytest.raises(InvalidInputException) as exc:
        await adapter.save_service(make_service(cost=value))
    assert "cost" in exc.value.fields

    with pytest.raises(InvalidInputException):
        await adapter.save_expense(make_expense(amount=value))

    assert await adapter.get_service("svc-1") is None
    assert await adapter.get_service_logs("svc-1") == []
    assert await adapter.get_expenses("user-1") == []


async def test_non_finite_update_keeps_stored_service(adapter):
    await adapter.save_service(make_service(cost=100))

    with pytest.raises(InvalidInputException):
        await adapter.update_service(make_service(cost=math.nan))

    assert (await adapter.get_service("svc-1")).cost == 100
    assert len(await adapter.get_service_logs("svc-1")) == 1


async def test_owner_is_immutable(adapter):
    await adapter.save_service(make_service())
    with pytest.raises(InvalidInputException):
        await adapter.update_service(make_service(owner_id="user-2"))


async def test_services_date_range_and_client_filter(adapter):
    await adapter.save_service(make_service(id="a", date="2024-01-05"))
    await adapter.save_service(make_service(id="b", date="2024-01-15T18:30:00.000Z", client_id="client-2"))
    await adapter.save_service(make_service(id="c", date="2024-02-01"))

    in_january = await adapter.get_services("user-1", "2024-01-01", "2024-01-31")
    assert sorted(s.id for s in in_january) == ["a", "b"]

    of_client = await adapter.get_services("user-1", client_id="client-2")
    assert [s.id for s in of_client] == ["b"]


async def test_clients_are_isolated_by_owner(adapter):
    await adapter.save_client(make_client(id="c1", owner_id="user-1"))
    await adapter.save_client(make_client(id="c2", owner_id="user-2"))
    await adapter.save_client(make_client(id="c3", owner_id="user-1", name="Padaria Pão Quente"))

    clients = await adapter.get_clients("user-1")

    assert sorted(c.id for c in clients) == ["c1", "c3"]
    assert all(c.owner_id == "user-1" for c in clients)


async def test_client_soft_delete(adapter):
    await adapter.save_client(make_client())
    await adapter.delete_client("client-1")

    assert await adapter.get_clients("user-1") == []
    assert (await adapter.get_client("client-1")).deleted_at is not None

    await adapter.restore_client("client-1")
    assert [c.id for c in await adapter.get_clients("user-1")] == ["client-1"]


async def test_client_upsert_replaces_by_id(adapter):
    await adapter.save_client(make_client())
    await adapter.save_client(make_client(name="Farmácia Nova", address="Av. Brasil, 100"))

    client = await adapter.get_client("client-1")
    assert client.name == "Farmácia Nova"
    assert client.address == "Av. Brasil, 100"


async def test_expenses_are_hard_deleted(adapter):
    await adapter.save_expense(make_expense(id="e1", date="2024-05-01"))
    await adapter.save_expense(make_expense(id="e2", date="2024-06-01", category="LUNCH"))

    assert [e.id for e in await adapter.get_expenses("user-1", "2024-05-01", "2024-05-31")] == ["e1"]

    await adapter.delete_expense("e1")
    assert [e.id for e in await adapter.get_expenses("user-1")] == ["e2"]

    with pytest.raises(ResourceNotFoundException):
        await adapter.delete_expense("e1")


async def test_users_crud(adapter):
    user = User(id="u1", name="Ana", email="ana@logitrack.com", password="hash")
    await adapter.save_user(user)

    await adapter.update_user(user.model_copy(update={"role": UserRole.ADMIN}))
    assert (await adapter.get_users())[0].role == UserRole.ADMIN

    with pytest.raises(ResourceNotFoundException):
        await adapter.update_user(user.model_copy(update={"id": "ghost"}))

    await adapter.delete_user("u1")
    assert await adapter.get_users() == []


async def test_duplicate_email_is_rejected(adapter):
    await adapter.save_user(User(id="u1", name="Ana", email="ana@logitrack.com", password="h"))

    with pytest.raises(ResourceAlreadyExistsException):
        await adapter.save_user(User(id="u2", name="Outra Ana", email="ana@logitrack.com", password="h"))
    with pytest.raises(ResourceAlreadyExistsException):
        await adapter.save_user(User(id="u3", name="Ana Maiúscula", email="ANA@logitrack.com", password="h"))

    assert [u.id for u in await adapter.get_users()] == ["u1"]


async def test_duplicate_user_id_is_rejected(adapter):
    await adapter.save_user(User(id="u1", name="Ana", email="ana@logitrack.com", password="h"))

    with pytest.raises(ResourceAlreadyExistsException):
        await adapter.save_user(User(id="u1", name="Bia", email="bia@logitrack.com", password="h"))

    assert [u.email for u in await adapter.get_users()] == ["ana@logitrack.com"]


async def test_logs_do_not_break_the_write(adapter, monkeypatch):
    async def broken(entry):
        raise RuntimeError("log storage offline")

    monkeypatch.setattr(adapter.audit, "append_log", broken)

    await adapter.save_service(make_service(), Actor(name="Ana", id="user-1"))

    assert await adapter.get_service("svc-1") is not None


async def test_export_snapshot_is_camel_case(adapter):
    await adapter.save_client(make_client())
    await adapter.save_service(make_service())

    snapshot = await adapter.export_snapshot()

    assert set(snapshot) == {"users", "clients", "services", "expenses"}
    assert snapshot["services"][0]["pickupAddresses"] == ["Rua A, 10"]
    assert snapshot["clients"][0]["ownerId"] == "user-1"


async def test_initialize_is_idempotent(adapter):
    await adapter.save_client(make_client())
    await adapter.initialize()
    assert len(await adapter.get_clients("user-1")) == 1
