# logitrack/domain/models/db_connection_domain_model.py

from enum import Enum
from typing import Optional

from logitrack.domain.models.base_domain_model import DomainModel


class DbProvider(str, Enum):
    FIREBASE = "FIREBASE"
    SUPABASE = "SUPABASE"
    MONGODB = "MONGODB"
    WEBHOOK = "WEBHOOK"
    GOOGLE_DRIVE = "GOOGLE_DRIVE"


class BackupStatus(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    PENDING = "PENDING"
    NEVER = "NEVER"


class DatabaseConnection(DomainModel):
    """Admin-configured target that receives dataset backups."""
    id: str
    provider: DbProvider
    name: str
    is_active: bool = True
    endpoint_url: str
    api_key: Optional[str] = None
    last_backup_status: BackupStatus = BackupStatus.NEVER
    last_backup_time: Optional[str] = None
