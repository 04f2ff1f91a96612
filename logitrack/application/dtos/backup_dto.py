# logitrack/application/dtos/backup_dto.py

from typing import Optional

from logitrack.application.dtos.base_dto import CustomBaseModel
from logitrack.domain.models import BackupStatus, DbProvider


class ConnectionCreate(CustomBaseModel):
    provider: DbProvider
    name: str
    endpoint_url: str
    api_key: Optional[str] = None
    is_active: bool = True


class ConnectionUpdate(CustomBaseModel):
    name: Optional[str] = None
    endpoint_url: Optional[str] = None
    api_key: Optional[str] = None
    is_active: Optional[bool] = None


class ConnectionOutput(CustomBaseModel):
    """Conexão de backup sem expor a chave de API."""
    id: str
    provider: DbProvider
    name: str
    is_active: bool
    endpoint_url: str
    last_backup_status: BackupStatus
    last_backup_time: Optional[str] = None


class BackupResult(CustomBaseModel):
    """Resultado do envio do snapshot para uma conexão."""
    connection_id: str
    name: str
    status: BackupStatus
    error: Optional[str] = None
