# logitrack/domain/services/__init__.py

from logitrack.domain.services.audit_service import AuditService, AuditLogWriter
from logitrack.domain.services.validation_service import RecordValidator

__all__ = [
    "AuditService",
    "AuditLogWriter",
    "RecordValidator",
]
