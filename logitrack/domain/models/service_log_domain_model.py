# logitrack/domain/models/service_log_domain_model.py

"""
Modelos do histórico de alterações (auditoria) das corridas.

Os campos rastreados são enumerados em ``TrackedField``; cada alteração
detectada é um ``FieldChange`` tipado que só vira o mapeamento
``{rótulo: {old, new}}`` ao ser gravado.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from pydantic import Field

from logitrack.domain.models.base_domain_model import DomainModel


class LogAction(str, Enum):
    CRIACAO = "CRIACAO"
    EDICAO = "EDICAO"
    EXCLUSAO = "EXCLUSAO"
    RESTAURACAO = "RESTAURACAO"


class TrackedField(Enum):
    """Campos da corrida cujas alterações entram no histórico."""

    COST = ("cost", "Valor")
    DRIVER_FEE = ("driver_fee", "Repasse")
    WAITING_TIME = ("waiting_time", "Tempo de Espera")
    EXTRA_FEE = ("extra_fee", "Taxa Extra")
    PAID = ("paid", "Pagamento")
    PICKUP_ADDRESSES = ("pickup_addresses", "Coleta")
    DELIVERY_ADDRESSES = ("delivery_addresses", "Entrega")

    def __init__(self, attribute: str, label: str):
        self.attribute = attribute
        self.label = label


@dataclass(frozen=True)
class FieldChange:
    """One tracked field that differs between two versions of a service."""
    field: TrackedField
    old: Any
    new: Any

    def as_entry(self) -> Dict[str, Any]:
        return {"old": self.old, "new": self.new}


def changes_to_mapping(changes: List[FieldChange]) -> Dict[str, Dict[str, Any]]:
    return {change.field.label: change.as_entry() for change in changes}


class ServiceLog(DomainModel):
    """Immutable audit entry for a single service mutation."""
    id: str
    service_id: str
    user_name: str
    action: LogAction
    changes: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    created_at: str
