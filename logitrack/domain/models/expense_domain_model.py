# logitrack/domain/models/expense_domain_model.py

from enum import Enum
from typing import Optional

from logitrack.domain.models.base_domain_model import DomainModel


class ExpenseCategory(str, Enum):
    GAS = "GAS"
    LUNCH = "LUNCH"
    OTHER = "OTHER"


class ExpenseRecord(DomainModel):
    """Domain model for an operational expense. Hard-deleted, no trash."""
    id: str
    owner_id: str
    category: ExpenseCategory
    amount: float
    date: str
    description: Optional[str] = None
