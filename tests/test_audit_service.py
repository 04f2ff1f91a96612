# tests/test_audit_service.py

from datetime import datetime, timezone

import pytest

from logitrack.domain.models import Actor, LogAction, TrackedField
from logitrack.domain.services import AuditLogWriter, AuditService
from tests.factories import make_service


def test_first_save_is_creation():
    action, changes = AuditService.classify(None, make_service())
    assert action == LogAction.CRIACAO
    assert changes == []


def test_cost_change_is_single_edit_entry():
    old = make_service(cost=100)
    new = make_service(cost=150)

    action, changes = AuditService.classify(old, new)

    assert action == LogAction.EDICAO
    assert len(changes) == 1
    assert changes[0].field == TrackedField.COST
    assert changes[0].as_entry() == {"old": 100, "new": 150}


def test_identical_tracked_fields_produce_nothing():
    old = make_service()
    # Untracked fields do not count
    new = make_service(notes="portaria lateral", requester_name="João")
    assert AuditService.classify(old, new) is None


def test_missing_numeric_equals_zero():
    old = make_service(waiting_time=None, extra_fee=None)
    new = make_service(waiting_time=0, extra_fee=0.0)
    assert AuditService.diff(old, new) == []


def test_paid_is_rendered_as_label():
    changes = AuditService.diff(make_service(paid=False), make_service(paid=True))
    assert [(c.field.label, c.old, c.new) for c in changes] == [("Pagamento", "Pendente", "Pago")]


def test_addresses_compared_as_whole_sequence():
    old = make_service(delivery_addresses=["Rua B", "Rua C"])
    new = make_service(delivery_addresses=["Rua C", "Rua B"])

    changes = AuditService.diff(old, new)

    assert len(changes) == 1
    assert changes[0].field.label == "Entrega"
    assert changes[0].old == ["Rua B", "Rua C"]
    assert changes[0].new == ["Rua C", "Rua B"]


def test_delete_logs_only_exclusion():
    old = make_service()
    new = make_service(deleted_at="2024-05-11T00:00:00+00:00", cost=999)
    assert AuditService.classify(old, new) == (LogAction.EXCLUSAO, [])


def test_restore_logs_only_restoration():
    old = make_service(deleted_at="2024-05-11T00:00:00+00:00")
    new = make_service(cost=1)
    assert AuditService.classify(old, new) == (LogAction.RESTAURACAO, [])


def _writer(entries):
    async def append(entry):
        entries.append(entry)

    return AuditLogWriter(
        append,
        id_factory=lambda: "log-1",
        clock=lambda: datetime(2024, 5, 10, tzinfo=timezone.utc),
    )


async def test_writer_uses_actor_name():
    entries = []
    entry = await _writer(entries).record(make_service(cost=100), make_service(cost=150), Actor(name="Ana", id="u1"))

    assert entries == [entry]
    assert entry.user_name == "Ana"
    assert entry.changes == {"Valor": {"old": 100, "new": 150}}
    assert entry.created_at == "2024-05-10T00:00:00+00:00"


async def test_writer_falls_back_to_system():
    entries = []
    entry = await _writer(entries).record(None, make_service())
    assert entry.user_name == "System"
    assert entry.action == LogAction.CRIACAO


async def test_writer_swallows_failures(caplog):
    async def broken(entry):
        raise RuntimeError("disk full")

    writer = AuditLogWriter(broken, id_factory=lambda: "x", clock=lambda: datetime.now(timezone.utc))

    assert await writer.record(None, make_service()) is None
    assert "disk full" in caplog.text


@pytest.mark.parametrize("field,label", [
    (TrackedField.COST, "Valor"),
    (TrackedField.DRIVER_FEE, "Repasse"),
    (TrackedField.WAITING_TIME, "Tempo de Espera"),
    (TrackedField.EXTRA_FEE, "Taxa Extra"),
    (TrackedField.PAID, "Pagamento"),
    (TrackedField.PICKUP_ADDRESSES, "Coleta"),
    (TrackedField.DELIVERY_ADDRESSES, "Entrega"),
])
def test_tracked_field_labels(field, label):
    assert field.label == label
