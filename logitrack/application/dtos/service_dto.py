# logitrack/application/dtos/service_dto.py

"""
Schemas para corridas (serviços de entrega) e seu histórico.
"""

from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import Field

from logitrack.application.dtos.base_dto import CustomBaseModel
from logitrack.domain.models import LogAction, PaymentMethod, ServiceStatus


class ServiceCreate(CustomBaseModel):
    client_id: str
    pickup_addresses: List[str] = Field(..., description="Endereços de coleta, em ordem")
    delivery_addresses: List[str] = Field(..., description="Endereços de entrega, em ordem")
    cost: float = Field(0.0, description="Valor cobrado do cliente")
    driver_fee: float = Field(0.0, description="Repasse ao motoboy")
    requester_name: str = ""
    date: Optional[str] = Field(None, description="YYYY-MM-DD; hoje quando ausente")
    paid: bool = False
    payment_method: PaymentMethod = PaymentMethod.PIX
    status: Optional[ServiceStatus] = None
    waiting_time: Optional[float] = None
    extra_fee: Optional[float] = None
    manual_order_id: Optional[str] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None


class ServiceUpdate(CustomBaseModel):
    clearable_fields: ClassVar[FrozenSet[str]] = frozenset({
        "status", "waiting_time", "extra_fee", "manual_order_id", "notes", "image_url",
    })

    client_id: Optional[str] = None
    pickup_addresses: Optional[List[str]] = None
    delivery_addresses: Optional[List[str]] = None
    cost: Optional[float] = None
    driver_fee: Optional[float] = None
    requester_name: Optional[str] = None
    date: Optional[str] = None
    paid: Optional[bool] = None
    payment_method: Optional[PaymentMethod] = None
    status: Optional[ServiceStatus] = None
    waiting_time: Optional[float] = None
    extra_fee: Optional[float] = None
    manual_order_id: Optional[str] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None


class BulkServiceUpdate(CustomBaseModel):
    """Mesma alteração aplicada a várias corridas (ex.: marcar como pagas)."""
    ids: List[str] = Field(..., min_length=1)
    paid: Optional[bool] = None
    payment_method: Optional[PaymentMethod] = None


class ServiceOutput(CustomBaseModel):
    id: str
    owner_id: str
    client_id: str
    pickup_addresses: List[str]
    delivery_addresses: List[str]
    cost: float
    driver_fee: float
    requester_name: str
    date: str
    paid: bool
    payment_method: Optional[PaymentMethod] = None
    status: Optional[ServiceStatus] = None
    waiting_time: Optional[float] = None
    extra_fee: Optional[float] = None
    manual_order_id: Optional[str] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None
    deleted_at: Optional[str] = None
    total: float = Field(0.0, description="Valor + espera + taxa extra")


class ServiceLogOutput(CustomBaseModel):
    id: str
    service_id: str
    user_name: str
    action: LogAction
    changes: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    created_at: str
