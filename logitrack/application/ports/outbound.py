# logitrack/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from logitrack.domain.models import (
    Actor,
    Client,
    DatabaseConnection,
    ExpenseRecord,
    ServiceLog,
    ServiceRecord,
    User,
)


class IDatabaseAdapter(ABC):
    """
    Storage backend contract.

    Every backend implements the same coroutines so that use cases are
    backend-agnostic. Failures raise DatabaseOperationException; validation
    problems raise InvalidInputException before anything is written.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare the backend. Safe to call more than once."""
        pass

    # Users

    @abstractmethod
    async def get_users(self) -> List[User]:
        """List every user."""
        pass

    @abstractmethod
    async def save_user(self, user: User) -> None:
        """Insert a new user."""
        pass

    @abstractmethod
    async def update_user(self, user: User) -> None:
        """Replace an existing user by id."""
        pass

    @abstractmethod
    async def delete_user(self, id: str) -> None:
        """Remove a user permanently."""
        pass

    # Clients

    @abstractmethod
    async def get_clients(self, owner_id: str, include_deleted: bool = False) -> List[Client]:
        """List the clients of one owner."""
        pass

    @abstractmethod
    async def get_client(self, id: str) -> Optional[Client]:
        """Get a client by id, deleted or not."""
        pass

    @abstractmethod
    async def save_client(self, client: Client) -> None:
        """Insert or replace a client by id."""
        pass

    @abstractmethod
    async def delete_client(self, id: str) -> None:
        """Soft-delete a client."""
        pass

    @abstractmethod
    async def restore_client(self, id: str) -> None:
        """Clear the deletion mark of a client."""
        pass

    # Services

    @abstractmethod
    async def get_services(
            self,
            owner_id: str,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
            client_id: Optional[str] = None,
            include_deleted: bool = False,
    ) -> List[ServiceRecord]:
        """List the services of one owner, optionally by date range and client."""
        pass

    @abstractmethod
    async def get_service(self, id: str) -> Optional[ServiceRecord]:
        """Get a service by id, deleted or not."""
        pass

    @abstractmethod
    async def save_service(self, service: ServiceRecord, actor: Optional[Actor] = None) -> None:
        """Insert or replace a service, writing the audit entry."""
        pass

    @abstractmethod
    async def update_service(self, service: ServiceRecord, actor: Optional[Actor] = None) -> None:
        """Replace a service, writing a diff-based audit entry."""
        pass

    @abstractmethod
    async def delete_service(self, id: str, actor: Optional[Actor] = None) -> None:
        """Soft-delete a service."""
        pass

    @abstractmethod
    async def restore_service(self, id: str, actor: Optional[Actor] = None) -> None:
        """Restore a soft-deleted service."""
        pass

    @abstractmethod
    async def get_service_logs(self, service_id: str) -> List[ServiceLog]:
        """Audit entries of a service, newest first."""
        pass

    # Expenses

    @abstractmethod
    async def get_expenses(
            self,
            owner_id: str,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
    ) -> List[ExpenseRecord]:
        """List the expenses of one owner."""
        pass

    @abstractmethod
    async def save_expense(self, expense: ExpenseRecord) -> None:
        """Insert or replace an expense."""
        pass

    @abstractmethod
    async def delete_expense(self, id: str) -> None:
        """Remove an expense permanently."""
        pass

    # Backups

    @abstractmethod
    async def export_snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        """Every user, client, service and expense in camelCase form."""
        pass


class IBackupConnectionRepository(ABC):
    """Storage of the admin-configured backup targets."""

    @abstractmethod
    async def list(self) -> List[DatabaseConnection]:
        pass

    @abstractmethod
    async def save(self, connection: DatabaseConnection) -> None:
        pass

    @abstractmethod
    async def delete(self, id: str) -> None:
        pass


class IBackupClient(ABC):
    """Pushes a dataset snapshot to a backup target."""

    @abstractmethod
    async def push(self, connection: DatabaseConnection, payload: Dict[str, Any]) -> None:
        pass
