# logitrack/domain/models/__init__.py

"""
Entidades de domínio do LogiTrack.
"""

from logitrack.domain.models.actor import Actor, SYSTEM_ACTOR_NAME
from logitrack.domain.models.base_domain_model import DomainModel
from logitrack.domain.models.user_domain_model import User, UserRole, UserStatus
from logitrack.domain.models.client_domain_model import Client, CLIENT_CATEGORIES
from logitrack.domain.models.service_domain_model import ServiceRecord, PaymentMethod, ServiceStatus
from logitrack.domain.models.expense_domain_model import ExpenseRecord, ExpenseCategory
from logitrack.domain.models.service_log_domain_model import (
    ServiceLog,
    LogAction,
    TrackedField,
    FieldChange,
)
from logitrack.domain.models.db_connection_domain_model import (
    DatabaseConnection,
    DbProvider,
    BackupStatus,
)

__all__ = [
    "Actor",
    "SYSTEM_ACTOR_NAME",
    "DomainModel",
    "User",
    "UserRole",
    "UserStatus",
    "Client",
    "CLIENT_CATEGORIES",
    "ServiceRecord",
    "PaymentMethod",
    "ServiceStatus",
    "ExpenseRecord",
    "ExpenseCategory",
    "ServiceLog",
    "LogAction",
    "TrackedField",
    "FieldChange",
    "DatabaseConnection",
    "DbProvider",
    "BackupStatus",
]
