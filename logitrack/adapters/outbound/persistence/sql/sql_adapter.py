# logitrack/adapters/outbound/persistence/sql/sql_adapter.py (async version)

"""
Backend relacional.

Implementa o contrato de armazenamento sobre SQLAlchemy assíncrono. As
entidades de domínio são convertidas campo a campo para as colunas
snake_case das tabelas e de volta, sem descartar nenhum campo.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncGenerator, Callable, Dict, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.future import select

from logitrack.adapters.outbound.persistence.base_adapter import BaseDatabaseAdapter
from logitrack.adapters.outbound.persistence.sql.database import build_engine, build_session_factory, session_scope
from logitrack.adapters.outbound.persistence.sql.models import (
    Base,
    Client as ClientModel,
    Expense as ExpenseModel,
    Service as ServiceModel,
    ServiceLog as ServiceLogModel,
    User as UserModel,
)
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
from logitrack.domain.services.query_service import date_key
from logitrack.shared.utils.identity import new_id, utc_now

RecordType = TypeVar("RecordType", bound=DomainModel)


class SqlDatabaseAdapter(BaseDatabaseAdapter):
    """
    Async relational backend (PostgreSQL via asyncpg, SQLite via aiosqlite).

    Attributes:
        database_url: SQLAlchemy URL of the database
    """

    def __init__(
            self,
            database_url: str,
            id_factory: Callable[[], str] = new_id,
            clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__(id_factory=id_factory, clock=clock)
        self.database_url = database_url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    async def initialize(self) -> None:
        if self._engine is not None:
            return
        try:
            engine = build_engine(self.database_url)
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            self.logger.error(f"Error connecting to database: {str(e)}")
            raise DatabaseOperationException(detail="Error connecting to database", original_error=e)

        self._engine = engine
        self._session_factory = build_session_factory(engine)
        self.logger.info("Async database connection configured successfully")

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession, None]:
        if self._session_factory is None:
            raise DatabaseOperationException(detail="Database adapter not initialized")
        async with session_scope(self._session_factory) as session:
            yield session

    def _error(self, action: str, error: Exception) -> DatabaseOperationException:
        self.logger.error(f"Error {action}: {str(error)}")
        return DatabaseOperationException(detail=f"Error {action}", original_error=error)

    # Field mapping

    @staticmethod
    def _to_row(model: Type[Base], entity: DomainModel) -> Base:
        """Map a domain entity onto its table row (attribute names are the column names)."""
        return model(**entity.model_dump(mode="json"))

    @staticmethod
    def _to_domain(domain: Type[RecordType], row: Base) -> RecordType:
        data = {column.key: getattr(row, column.key) for column in row.__table__.columns}
        return domain.model_validate(data)

    async def _fetch_all(self, query, domain: Type[RecordType], action: str) -> List[RecordType]:
        try:
            async with self._session() as db:
                result = await db.execute(query)
                return [self._to_domain(domain, row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            raise self._error(action, e)

    async def _fetch_one(self, model: Type[Base], domain: Type[RecordType], id: str) -> Optional[RecordType]:
        try:
            async with self._session() as db:
                row = await db.get(model, id)
                return self._to_domain(domain, row) if row is not None else None
        except SQLAlchemyError as e:
            raise self._error(f"fetching {model.__name__} with ID {id}", e)

    async def _merge(self, model: Type[Base], entity: DomainModel) -> None:
        try:
            async with self._session() as db:
                await db.merge(self._to_row(model, entity))
        except SQLAlchemyError as e:
            raise self._error(f"saving {model.__name__}", e)

    async def _delete_row(self, model: Type[Base], id: str, label: str) -> None:
        try:
            async with self._session() as db:
                row = await db.get(model, id)
                if row is None:
                    raise ResourceNotFoundException(detail=f"{label} não encontrado", resource_id=id)
                await db.delete(row)
        except IntegrityError as e:
            raise self._error(f"removing {model.__name__}, it is being used by other entities", e)
        except SQLAlchemyError as e:
            raise self._error(f"removing {model.__name__}", e)

    # Users

    async def get_users(self) -> List[User]:
        return await self._fetch_all(select(UserModel), User, "listing users")

    async def save_user(self, user: User) -> None:
        try:
            async with self._session() as db:
                taken = await db.execute(
                    select(UserModel.id).where(func.lower(UserModel.email) == user.email.lower())
                )
                if taken.first() is not None:
                    raise ResourceAlreadyExistsException(detail=f"User with email '{user.email}' already exists")
                db.add(self._to_row(UserModel, user))
        except IntegrityError as e:
            self.logger.warning(f"Attempt to create duplicate user: {str(e)}")
            raise ResourceAlreadyExistsException(detail=f"User with email '{user.email}' already exists")
        except SQLAlchemyError as e:
            raise self._error("creating user", e)
        self.logger.info(f"User created with email: {user.email}")

    async def update_user(self, user: User) -> None:
        try:
            async with self._session() as db:
                if await db.get(UserModel, user.id) is None:
                    raise ResourceNotFoundException(detail="Usuário não encontrado", resource_id=user.id)
                await db.merge(self._to_row(UserModel, user))
        except IntegrityError as e:
            self.logger.warning(f"Uniqueness violation updating user: {str(e)}")
            raise ResourceAlreadyExistsException(detail="Could not update user: email already in use")
        except SQLAlchemyError as e:
            raise self._error("updating user", e)
        self.logger.info(f"User {user.id} updated")

    async def delete_user(self, id: str) -> None:
        await self._delete_row(UserModel, id, "Usuário")
        self.logger.info(f"User {id} removed")

    # Clients

    async def get_clients(self, owner_id: str, include_deleted: bool = False) -> List[Client]:
        query = select(ClientModel).where(ClientModel.owner_id == owner_id)
        if not include_deleted:
            query = query.where(ClientModel.deleted_at.is_(None))
        return await self._fetch_all(query, Client, "listing clients")

    async def _find_client(self, id: str) -> Optional[Client]:
        return await self._fetch_one(ClientModel, Client, id)

    async def _write_client(self, client: Client) -> None:
        await self._merge(ClientModel, client)

    # Services

    async def get_services(
            self,
            owner_id: str,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
            client_id: Optional[str] = None,
            include_deleted: bool = False,
    ) -> List[ServiceRecord]:
        query = select(ServiceModel).where(ServiceModel.owner_id == owner_id)

        # Compare only the YYYY-MM-DD portion so ISO datetimes match too
        day = func.substr(ServiceModel.date, 1, 10)
        if start_date:
            query = query.where(day >= date_key(start_date))
        if end_date:
            query = query.where(day <= date_key(end_date))
        if client_id:
            query = query.where(ServiceModel.client_id == client_id)
        if not include_deleted:
            query = query.where(ServiceModel.deleted_at.is_(None))

        return await self._fetch_all(query, ServiceRecord, "listing services")

    async def _find_service(self, id: str) -> Optional[ServiceRecord]:
        return await self._fetch_one(ServiceModel, ServiceRecord, id)

    async def _write_service(self, service: ServiceRecord) -> None:
        await self._merge(ServiceModel, service)

    async def _append_log(self, entry: ServiceLog) -> None:
        try:
            async with self._session() as db:
                db.add(self._to_row(ServiceLogModel, entry))
        except SQLAlchemyError as e:
            raise self._error("writing service log", e)

    async def get_service_logs(self, service_id: str) -> List[ServiceLog]:
        query = (
            select(ServiceLogModel)
            .where(ServiceLogModel.service_id == service_id)
            .order_by(ServiceLogModel.created_at.desc())
        )
        return await self._fetch_all(query, ServiceLog, "listing service logs")

    # Expenses

    async def get_expenses(
            self,
            owner_id: str,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
    ) -> List[ExpenseRecord]:
        query = select(ExpenseModel).where(ExpenseModel.owner_id == owner_id)
        day = func.substr(ExpenseModel.date, 1, 10)
        if start_date:
            query = query.where(day >= date_key(start_date))
        if end_date:
            query = query.where(day <= date_key(end_date))
        return await self._fetch_all(query, ExpenseRecord, "listing expenses")

    async def save_expense(self, expense: ExpenseRecord) -> None:
        expense = RecordValidator.validate_expense(expense)
        await self._merge(ExpenseModel, expense)
        self.logger.info(f"Expense {expense.id} saved")

    async def delete_expense(self, id: str) -> None:
        await self._delete_row(ExpenseModel, id, "Despesa")
        self.logger.info(f"Expense {id} removed")

    # Backups

    async def export_snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        users = await self._fetch_all(select(UserModel), User, "exporting users")
        clients = await self._fetch_all(select(ClientModel), Client, "exporting clients")
        services = await self._fetch_all(select(ServiceModel), ServiceRecord, "exporting services")
        expenses = await self._fetch_all(select(ExpenseModel), ExpenseRecord, "exporting expenses")
        return {
            "users": [u.to_record() for u in users],
            "clients": [c.to_record() for c in clients],
            "services": [s.to_record() for s in services],
            "expenses": [e.to_record() for e in expenses],
        }
