# logitrack/application/use_cases/__init__.py

from logitrack.application.use_cases.user_use_cases import UserUseCases
from logitrack.application.use_cases.client_use_cases import ClientUseCases
from logitrack.application.use_cases.service_use_cases import ServiceUseCases
from logitrack.application.use_cases.expense_use_cases import ExpenseUseCases
from logitrack.application.use_cases.report_use_cases import ReportUseCases
from logitrack.application.use_cases.backup_use_cases import BackupUseCases

__all__ = [
    "UserUseCases",
    "ClientUseCases",
    "ServiceUseCases",
    "ExpenseUseCases",
    "ReportUseCases",
    "BackupUseCases",
]
