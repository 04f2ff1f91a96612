# logitrack/domain/models/service_domain_model.py

from enum import Enum
from typing import List, Optional

from logitrack.domain.models.base_domain_model import DomainModel


class PaymentMethod(str, Enum):
    PIX = "PIX"
    CASH = "CASH"
    CARD = "CARD"


class ServiceStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


class ServiceRecord(DomainModel):
    """
    Domain model for a delivery order ("corrida").

    ``date`` holds either ``YYYY-MM-DD`` or an ISO datetime; only the date
    portion takes part in comparisons.
    """
    id: str
    owner_id: str
    client_id: str
    pickup_addresses: List[str]
    delivery_addresses: List[str]
    cost: float = 0.0
    driver_fee: float = 0.0
    requester_name: str = ""
    date: str
    paid: bool = False
    payment_method: Optional[PaymentMethod] = None
    status: Optional[ServiceStatus] = None
    waiting_time: Optional[float] = None
    extra_fee: Optional[float] = None
    manual_order_id: Optional[str] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None
    deleted_at: Optional[str] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
