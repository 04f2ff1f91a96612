# tests/factories.py

from datetime import datetime, timedelta, timezone

from logitrack.domain.models import Client, ExpenseRecord, ServiceRecord

START = datetime(2024, 5, 10, 12, 0, 0, tzinfo=timezone.utc)


class TickingClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime = START):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + timedelta(seconds=1)
        return now


class SequentialIds:

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


def make_service(**overrides) -> ServiceRecord:
    data = dict(
        id="svc-1",
        owner_id="user-1",
        client_id="client-1",
        pickup_addresses=["Rua A, 10"],
        delivery_addresses=["Rua B, 20"],
        cost=100.0,
        driver_fee=40.0,
        requester_name="Maria",
        date="2024-05-10",
        paid=False,
    )
    data.update(overrides)
    return ServiceRecord(**data)


def make_client(**overrides) -> Client:
    data = dict(
        id="client-1",
        owner_id="user-1",
        name="Farmácia Central",
        email="contato@farmacia.com",
        phone="11999990000",
        category="Saúde",
        created_at="2024-05-01T10:00:00+00:00",
    )
    data.update(overrides)
    return Client(**data)


def make_expense(**overrides) -> ExpenseRecord:
    data = dict(
        id="exp-1",
        owner_id="user-1",
        category="GAS",
        amount=50.0,
        date="2024-05-10",
    )
    data.update(overrides)
    return ExpenseRecord(**data)
