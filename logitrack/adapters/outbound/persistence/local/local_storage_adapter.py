# logitrack/adapters/outbound/persistence/local/local_storage_adapter.py

"""
Backend de armazenamento local.

Persiste cada coleção como uma lista camelCase no ``JsonFileKeyValueStore``.
O acesso ao arquivo é síncrono e por isso roda no threadpool, mantendo a
mesma interface assíncrona do backend relacional.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from starlette.concurrency import run_in_threadpool

from logitrack.adapters.outbound.persistence.base_adapter import BaseDatabaseAdapter
from logitrack.adapters.outbound.persistence.local.key_value_store import JsonFileKeyValueStore, Records
from logitrack.domain.exceptions import (
    DatabaseOperationException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from logitrack.domain.models import (
    Client,
    DomainModel,
    ExpenseRecord,
    ServiceLog,
    ServiceRecord,
    User,
)
from logitrack.domain.services import RecordValidator
from logitrack.domain.services.query_service import filter_by_date_range, exclude_deleted
from logitrack.shared.utils.identity import new_id, utc_now

RecordType = TypeVar("RecordType", bound=DomainModel)

STORAGE_KEYS = {
    "CLIENTS": "clients",
    "SERVICES": "services",
    "USERS": "users",
    "EXPENSES": "expenses",
    "LOGS": "logs",
    "DB_CONNECTIONS": "db_connections",
}


def _upsert(records: Records, record: Dict[str, Any]) -> Records:
    for idx, existing in enumerate(records):
        if existing.get("id") == record["id"]:
            records[idx] = record
            return records
    records.append(record)
    return records


class LocalStorageAdapter(BaseDatabaseAdapter):
    """
    Embedded single-process backend.

    Attributes:
        store: Key-value store holding the collections
    """

    def __init__(
            self,
            store: JsonFileKeyValueStore,
            id_factory: Callable[[], str] = new_id,
            clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__(id_factory=id_factory, clock=clock)
        self.store = store

    async def initialize(self) -> None:
        try:
            await run_in_threadpool(self.store.initialize)
        except OSError as e:
            self.logger.error(f"Error initializing local storage: {str(e)}")
            raise DatabaseOperationException(detail="Error initializing local storage", original_error=e)
        self.logger.info("Local storage initialized")

    # Low level access

    async def _read(self, key: str) -> Records:
        try:
            return await run_in_threadpool(self.store.get_list, key)
        except (OSError, ValueError) as e:
            self.logger.error(f"Error reading '{key}' from local storage: {str(e)}")
            raise DatabaseOperationException(detail=f"Error reading {key}", original_error=e)

    async def _mutate(self, key: str, mutate: Callable[[Records], Records]) -> None:
        try:
            await run_in_threadpool(self.store.update_list, key, mutate)
        except (OSError, ValueError) as e:
            self.logger.error(f"Error writing '{key}' to local storage: {str(e)}")
            raise DatabaseOperationException(detail=f"Error writing {key}", original_error=e)

    async def _load(self, key: str, model: Type[RecordType]) -> List[RecordType]:
        records = await self._read(key)
        try:
            return [model.from_record(r) for r in records]
        except ValueError as e:
            self.logger.error(f"Corrupted record in '{key}': {str(e)}")
            raise DatabaseOperationException(detail=f"Corrupted data in {key}", original_error=e)

    async def _find(self, key: str, model: Type[RecordType], id: str) -> Optional[RecordType]:
        return next((r for r in await self._load(key, model) if r.id == id), None)

    async def _remove(self, key: str, id: str, label: str) -> None:
        def mutate(records: Records) -> Records:
            remaining = [r for r in records if r.get("id") != id]
            if len(remaining) == len(records):
                raise ResourceNotFoundException(detail=f"{label} não encontrado", resource_id=id)
            return remaining

        await self._mutate(key, mutate)

    # Users

    async def get_users(self) -> List[User]:
        return await self._load(STORAGE_KEYS["USERS"], User)

    async def save_user(self, user: User) -> None:
        record = user.to_record()
        email = user.email.lower()

        def mutate(records: Records) -> Records:
            for existing in records:
                if existing.get("id") == user.id:
                    raise ResourceAlreadyExistsException(detail="User already exists", resource_id=user.id)
                if (existing.get("email") or "").lower() == email:
                    raise ResourceAlreadyExistsException(detail=f"User with email '{user.email}' already exists")
            return records + [record]

        await self._mutate(STORAGE_KEYS["USERS"], mutate)
        self.logger.info(f"User created with email: {user.email}")

    async def update_user(self, user: User) -> None:
        record = user.to_record()

        def mutate(records: Records) -> Records:
            for idx, existing in enumerate(records):
                if existing.get("id") == user.id:
                    records[idx] = record
                    return records
            raise ResourceNotFoundException(detail="Usuário não encontrado", resource_id=user.id)

        await self._mutate(STORAGE_KEYS["USERS"], mutate)
        self.logger.info(f"User {user.id} updated")

    async def delete_user(self, id: str) -> None:
        await self._remove(STORAGE_KEYS["USERS"], id, "Usuário")
        self.logger.info(f"User {id} removed")

    # Clients

    async def get_clients(self, owner_id: str, include_deleted: bool = False) -> List[Client]:
        clients = [c for c in await self._load(STORAGE_KEYS["CLIENTS"], Client) if c.owner_id == owner_id]
        return clients if include_deleted else exclude_deleted(clients)

    async def _find_client(self, id: str) -> Optional[Client]:
        return await self._find(STORAGE_KEYS["CLIENTS"], Client, id)

    async def _write_client(self, client: Client) -> None:
        record = client.to_record()
        await self._mutate(STORAGE_KEYS["CLIENTS"], lambda records: _upsert(records, record))

    # Services

    async def get_services(
            self,
            owner_id: str,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
            client_id: Optional[str] = None,
            include_deleted: bool = False,
    ) -> List[ServiceRecord]:
        services = [s for s in await self._load(STORAGE_KEYS["SERVICES"], ServiceRecord) if s.owner_id == owner_id]
        if start_date or end_date:
            services = filter_by_date_range(services, start_date, end_date)
        if client_id:
            services = [s for s in services if s.client_id == client_id]
        return services if include_deleted else exclude_deleted(services)

    async def _find_service(self, id: str) -> Optional[ServiceRecord]:
        return await self._find(STORAGE_KEYS["SERVICES"], ServiceRecord, id)

    async def _write_service(self, service: ServiceRecord) -> None:
        record = service.to_record()
        await self._mutate(STORAGE_KEYS["SERVICES"], lambda records: _upsert(records, record))

    async def _append_log(self, entry: ServiceLog) -> None:
        record = entry.to_record()
        await self._mutate(STORAGE_KEYS["LOGS"], lambda records: records + [record])

    async def get_service_logs(self, service_id: str) -> List[ServiceLog]:
        logs = [log for log in await self._load(STORAGE_KEYS["LOGS"], ServiceLog) if log.service_id == service_id]
        return sorted(logs, key=lambda log: log.created_at, reverse=True)

    # Expenses

    async def get_expenses(
            self,
            owner_id: str,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
    ) -> List[ExpenseRecord]:
        expenses = [e for e in await self._load(STORAGE_KEYS["EXPENSES"], ExpenseRecord) if e.owner_id == owner_id]
        return filter_by_date_range(expenses, start_date, end_date)

    async def save_expense(self, expense: ExpenseRecord) -> None:
        expense = RecordValidator.validate_expense(expense)
        record = expense.to_record()
        await self._mutate(STORAGE_KEYS["EXPENSES"], lambda records: _upsert(records, record))
        self.logger.info(f"Expense {expense.id} saved")

    async def delete_expense(self, id: str) -> None:
        await self._remove(STORAGE_KEYS["EXPENSES"], id, "Despesa")
        self.logger.info(f"Expense {id} removed")

    # Backups

    async def export_snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "users": await self._read(STORAGE_KEYS["USERS"]),
            "clients": await self._read(STORAGE_KEYS["CLIENTS"]),
            "services": await self._read(STORAGE_KEYS["SERVICES"]),
            "expenses": await self._read(STORAGE_KEYS["EXPENSES"]),
        }
