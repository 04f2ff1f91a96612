# logitrack/application/dtos/expense_dto.py

from typing import Optional

from pydantic import Field

from logitrack.application.dtos.base_dto import CustomBaseModel
from logitrack.domain.models import ExpenseCategory


class ExpenseCreate(CustomBaseModel):
    category: ExpenseCategory
    amount: float = Field(..., ge=0)
    date: Optional[str] = Field(None, description="YYYY-MM-DD; hoje quando ausente")
    description: Optional[str] = None


class ExpenseOutput(CustomBaseModel):
    id: str
    owner_id: str
    category: ExpenseCategory
    amount: float
    date: str
    description: Optional[str] = None
