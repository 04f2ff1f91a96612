# logitrack/domain/services/audit_service.py

"""
Histórico de alterações das corridas.

``AuditService`` decide, a partir da versão anterior e da nova versão de uma
corrida, qual entrada de log deve ser gerada (se alguma). ``AuditLogWriter``
grava essa entrada sem nunca derrubar a operação principal.
"""

import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, List, Optional, Tuple

from logitrack.domain.models import (
    Actor,
    FieldChange,
    LogAction,
    ServiceLog,
    ServiceRecord,
    TrackedField,
)
from logitrack.domain.models.service_log_domain_model import changes_to_mapping

logger = logging.getLogger(__name__)

PAID_LABEL = "Pago"
PENDING_LABEL = "Pendente"

_NUMERIC_FIELDS = {
    TrackedField.COST,
    TrackedField.DRIVER_FEE,
    TrackedField.WAITING_TIME,
    TrackedField.EXTRA_FEE,
}


class AuditService:
    """
    Domain service computing audit entries for service mutations.
    """

    @staticmethod
    def _normalize(field: TrackedField, value: Any) -> Any:
        if field in _NUMERIC_FIELDS:
            return value or 0
        if field == TrackedField.PAID:
            return PAID_LABEL if value else PENDING_LABEL
        if field in (TrackedField.PICKUP_ADDRESSES, TrackedField.DELIVERY_ADDRESSES):
            return list(value or [])
        return value

    @classmethod
    def diff(cls, old: ServiceRecord, new: ServiceRecord) -> List[FieldChange]:
        """
        Compare the tracked fields of two versions of the same service.

        Address sequences are compared as a whole (same elements, same order).
        """
        changes = []
        for field in TrackedField:
            old_value = cls._normalize(field, getattr(old, field.attribute))
            new_value = cls._normalize(field, getattr(new, field.attribute))
            if old_value != new_value:
                changes.append(FieldChange(field=field, old=old_value, new=new_value))
        return changes

    @classmethod
    def classify(cls, old: Optional[ServiceRecord],
                 new: ServiceRecord) -> Optional[Tuple[LogAction, List[FieldChange]]]:
        """
        Decide which log entry a mutation produces.

        Returns:
            ``(action, changes)`` or None when nothing worth logging changed
        """
        if old is None:
            return LogAction.CRIACAO, []
        if old.deleted_at is None and new.deleted_at is not None:
            return LogAction.EXCLUSAO, []
        if old.deleted_at is not None and new.deleted_at is None:
            return LogAction.RESTAURACAO, []

        changes = cls.diff(old, new)
        if not changes:
            return None
        return LogAction.EDICAO, changes


class AuditLogWriter:
    """
    Persists audit entries through an injected append function.

    Failures are logged and swallowed so the primary write always succeeds.
    """

    def __init__(
            self,
            append_log: Callable[[ServiceLog], Awaitable[None]],
            id_factory: Callable[[], str],
            clock: Callable[[], datetime],
    ):
        self.append_log = append_log
        self.id_factory = id_factory
        self.clock = clock

    def build_entry(self, old: Optional[ServiceRecord], new: ServiceRecord,
                    actor: Optional[Actor] = None) -> Optional[ServiceLog]:
        outcome = AuditService.classify(old, new)
        if outcome is None:
            return None

        action, changes = outcome
        return ServiceLog(
            id=self.id_factory(),
            service_id=new.id,
            user_name=(actor or Actor.system()).name,
            action=action,
            changes=changes_to_mapping(changes),
            created_at=self.clock().isoformat(),
        )

    async def record(self, old: Optional[ServiceRecord], new: ServiceRecord,
                     actor: Optional[Actor] = None) -> Optional[ServiceLog]:
        try:
            entry = self.build_entry(old, new, actor)
            if entry is None:
                return None
            await self.append_log(entry)
            logger.debug(f"Audit entry {entry.action.value} written for service {new.id}")
            return entry
        except Exception as e:
            logger.warning(f"Failed to write audit entry for service {new.id}: {str(e)}")
            return None
