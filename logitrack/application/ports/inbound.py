# logitrack/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import List, Optional

from logitrack.application.dtos import (
    BackupResult,
    BulkServiceUpdate,
    ClientCreate,
    ClientOutput,
    ClientUpdate,
    ConnectionCreate,
    ConnectionOutput,
    ConnectionUpdate,
    ExpenseCreate,
    ExpenseOutput,
    ReportSummaryOutput,
    ServiceCreate,
    ServiceLogOutput,
    ServiceOutput,
    ServiceUpdate,
    TokenData,
    UserCreate,
    UserOutput,
    UserSelfUpdate,
)
from logitrack.domain.models import Actor, User
from logitrack.domain.services.query_service import TimeFrame


class IUserUseCase(ABC):
    """Interface for user-related use cases."""

    @abstractmethod
    async def register_user(self, user_data: UserCreate) -> UserOutput:
        """Register a new user."""
        pass

    @abstractmethod
    async def authenticate_user(self, email: str, password: str) -> TokenData:
        """Authenticate a user and return access token."""
        pass

    @abstractmethod
    async def get_user(self, user_id: str) -> User:
        """Get user by ID."""
        pass

    @abstractmethod
    async def update_profile(self, user_id: str, data: UserSelfUpdate) -> UserOutput:
        """Update the authenticated user's own data."""
        pass

    @abstractmethod
    async def list_users(self) -> List[UserOutput]:
        """List every user."""
        pass

    @abstractmethod
    async def toggle_role(self, actor: Actor, user_id: str) -> UserOutput:
        """Switch a user between ADMIN and USER."""
        pass

    @abstractmethod
    async def toggle_status(self, actor: Actor, user_id: str) -> UserOutput:
        """Block or unblock a user."""
        pass


class IClientUseCase(ABC):
    """Interface for client-related use cases."""

    @abstractmethod
    async def list_clients(self, actor: Actor) -> List[ClientOutput]:
        pass

    @abstractmethod
    async def get_client(self, actor: Actor, client_id: str) -> ClientOutput:
        pass

    @abstractmethod
    async def create_client(self, actor: Actor, data: ClientCreate) -> ClientOutput:
        pass

    @abstractmethod
    async def update_client(self, actor: Actor, client_id: str, data: ClientUpdate) -> ClientOutput:
        pass

    @abstractmethod
    async def delete_client(self, actor: Actor, client_id: str) -> None:
        pass

    @abstractmethod
    async def restore_client(self, actor: Actor, client_id: str) -> ClientOutput:
        pass

    @abstractmethod
    async def list_trash(self, actor: Actor) -> List[ClientOutput]:
        pass


class IServiceUseCase(ABC):
    """Interface for delivery order use cases."""

    @abstractmethod
    async def list_services(self, actor: Actor, start_date: Optional[str] = None,
                            end_date: Optional[str] = None,
                            client_id: Optional[str] = None) -> List[ServiceOutput]:
        pass

    @abstractmethod
    async def get_service(self, actor: Actor, service_id: str) -> ServiceOutput:
        pass

    @abstractmethod
    async def create_service(self, actor: Actor, data: ServiceCreate) -> ServiceOutput:
        pass

    @abstractmethod
    async def update_service(self, actor: Actor, service_id: str, data: ServiceUpdate) -> ServiceOutput:
        pass

    @abstractmethod
    async def delete_service(self, actor: Actor, service_id: str) -> None:
        pass

    @abstractmethod
    async def restore_service(self, actor: Actor, service_id: str) -> ServiceOutput:
        pass

    @abstractmethod
    async def list_trash(self, actor: Actor) -> List[ServiceOutput]:
        pass

    @abstractmethod
    async def get_logs(self, actor: Actor, service_id: str) -> List[ServiceLogOutput]:
        pass

    @abstractmethod
    async def bulk_update(self, actor: Actor, data: BulkServiceUpdate) -> List[ServiceOutput]:
        pass


class IExpenseUseCase(ABC):
    """Interface for expense use cases."""

    @abstractmethod
    async def list_expenses(self, actor: Actor, start_date: Optional[str] = None,
                            end_date: Optional[str] = None) -> List[ExpenseOutput]:
        pass

    @abstractmethod
    async def create_expense(self, actor: Actor, data: ExpenseCreate) -> ExpenseOutput:
        pass

    @abstractmethod
    async def delete_expense(self, actor: Actor, expense_id: str) -> None:
        pass


class IReportUseCase(ABC):
    """Interface for dashboard reports."""

    @abstractmethod
    async def summary(self, actor: Actor, timeframe: TimeFrame, start_date: Optional[str] = None,
                      end_date: Optional[str] = None) -> ReportSummaryOutput:
        pass


class IBackupUseCase(ABC):
    """Interface for backup target management."""

    @abstractmethod
    async def list_connections(self) -> List[ConnectionOutput]:
        pass

    @abstractmethod
    async def create_connection(self, data: ConnectionCreate) -> ConnectionOutput:
        pass

    @abstractmethod
    async def update_connection(self, connection_id: str, data: ConnectionUpdate) -> ConnectionOutput:
        pass

    @abstractmethod
    async def delete_connection(self, connection_id: str) -> None:
        pass

    @abstractmethod
    async def run_backup(self) -> List[BackupResult]:
        pass
