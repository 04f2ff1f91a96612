# logitrack/application/dtos/__init__.py

from logitrack.application.dtos.base_dto import CustomBaseModel
from logitrack.application.dtos.user_dto import UserCreate, UserLogin, UserSelfUpdate, UserOutput, TokenData
from logitrack.application.dtos.client_dto import ClientCreate, ClientUpdate, ClientOutput
from logitrack.application.dtos.service_dto import (
    ServiceCreate,
    ServiceUpdate,
    BulkServiceUpdate,
    ServiceOutput,
    ServiceLogOutput,
)
from logitrack.application.dtos.expense_dto import ExpenseCreate, ExpenseOutput
from logitrack.application.dtos.report_dto import ReportSummaryOutput, SeriesPointOutput, ClientRankingOutput
from logitrack.application.dtos.backup_dto import ConnectionCreate, ConnectionUpdate, ConnectionOutput, BackupResult

__all__ = [
    "CustomBaseModel",
    "UserCreate",
    "UserLogin",
    "UserSelfUpdate",
    "UserOutput",
    "TokenData",
    "ClientCreate",
    "ClientUpdate",
    "ClientOutput",
    "ServiceCreate",
    "ServiceUpdate",
    "BulkServiceUpdate",
    "ServiceOutput",
    "ServiceLogOutput",
    "ExpenseCreate",
    "ExpenseOutput",
    "ReportSummaryOutput",
    "SeriesPointOutput",
    "ClientRankingOutput",
    "ConnectionCreate",
    "ConnectionUpdate",
    "ConnectionOutput",
    "BackupResult",
]
