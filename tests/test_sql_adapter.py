# tests/test_sql_adapter.py

import pytest

from logitrack.adapters.outbound.persistence.sql.database import to_async_url
from logitrack.adapters.outbound.persistence.sql.models import (
    Client as ClientModel,
    Expense as ExpenseModel,
    Service as ServiceModel,
    ServiceLog as ServiceLogModel,
    User as UserModel,
)
from logitrack.adapters.outbound.persistence.sql.sql_adapter import SqlDatabaseAdapter
from logitrack.domain.exceptions import DatabaseOperationException
from logitrack.domain.models import Client, ExpenseRecord, ServiceLog, ServiceRecord, User


@pytest.mark.parametrize("model,domain", [
    (UserModel, User),
    (ClientModel, Client),
    (ServiceModel, ServiceRecord),
    (ServiceLogModel, ServiceLog),
    (ExpenseModel, ExpenseRecord),
])
def test_every_domain_field_has_a_column(model, domain):
    assert set(model.__table__.columns.keys()) == set(domain.model_fields)


def test_sync_urls_use_asyncpg():
    assert to_async_url("postgresql://u:p@db/logitrack") == "postgresql+asyncpg://u:p@db/logitrack"
    assert to_async_url("postgres://u:p@db/logitrack") == "postgresql+asyncpg://u:p@db/logitrack"
    assert to_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"


async def test_not_initialized_adapter_raises_storage_error(tmp_path):
    adapter = SqlDatabaseAdapter(f"sqlite+aiosqlite:///{tmp_path / 'unused.db'}")

    with pytest.raises(DatabaseOperationException):
        await adapter.get_users()
