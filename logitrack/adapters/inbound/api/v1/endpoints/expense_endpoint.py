# logitrack/adapters/inbound/api/v1/endpoints/expense_endpoint.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query, status

from logitrack.adapters.inbound.api.deps import get_actor, get_expense_use_cases
from logitrack.application.dtos import ExpenseCreate, ExpenseOutput
from logitrack.application.use_cases import ExpenseUseCases
from logitrack.domain.models import Actor

router = APIRouter()


@router.get("", response_model=List[ExpenseOutput], summary="List Expenses")
async def list_expenses(
        start_date: Optional[str] = Query(None, alias="startDate"),
        end_date: Optional[str] = Query(None, alias="endDate"),
        actor: Actor = Depends(get_actor),
        expenses: ExpenseUseCases = Depends(get_expense_use_cases),
):
    return await expenses.list_expenses(actor, start_date, end_date)


@router.post("", response_model=ExpenseOutput, status_code=status.HTTP_201_CREATED,
             summary="Create Expense")
async def create_expense(
        data: ExpenseCreate,
        actor: Actor = Depends(get_actor),
        expenses: ExpenseUseCases = Depends(get_expense_use_cases),
):
    return await expenses.create_expense(actor, data)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Delete Expense - Permanent removal")
async def delete_expense(
        expense_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        expenses: ExpenseUseCases = Depends(get_expense_use_cases),
):
    await expenses.delete_expense(actor, expense_id)
