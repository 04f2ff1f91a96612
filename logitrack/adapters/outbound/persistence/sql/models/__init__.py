# logitrack/adapters/outbound/persistence/sql/models/__init__.py

"""
Módulo de modelos de dados.

Este módulo exporta todos os modelos SQLAlchemy do sistema,
facilitando a importação e uso em outros módulos.
"""

from logitrack.adapters.outbound.persistence.sql.models.base_model import Base
from logitrack.adapters.outbound.persistence.sql.models.user_model import User
from logitrack.adapters.outbound.persistence.sql.models.client_model import Client
from logitrack.adapters.outbound.persistence.sql.models.service_model import Service
from logitrack.adapters.outbound.persistence.sql.models.service_log_model import ServiceLog
from logitrack.adapters.outbound.persistence.sql.models.expense_model import Expense

__all__ = [
    "Base",
    "User",
    "Client",
    "Service",
    "ServiceLog",
    "Expense",
]
