# logitrack/domain/models/user_domain_model.py

from enum import Enum
from typing import Optional

from logitrack.domain.models.base_domain_model import DomainModel


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    BLOCKED = "BLOCKED"


class User(DomainModel):
    """Domain model for a user account."""
    id: str
    name: str
    email: str
    password: str  # bcrypt hash
    phone: str = ""
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE

    # Company details printed on reports
    company_name: Optional[str] = None
    company_address: Optional[str] = None
    company_cnpj: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_blocked(self) -> bool:
        return self.status == UserStatus.BLOCKED
