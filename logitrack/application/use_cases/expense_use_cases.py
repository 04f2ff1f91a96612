# logitrack/application/use_cases/expense_use_cases.py

from typing import List, Optional

from logitrack.application.dtos import ExpenseCreate, ExpenseOutput
from logitrack.application.ports.inbound import IExpenseUseCase
from logitrack.application.use_cases.base_use_cases import BaseUseCase
from logitrack.domain.models import Actor, ExpenseRecord
from logitrack.domain.services.query_service import sort_by_date_desc


class ExpenseUseCases(BaseUseCase, IExpenseUseCase):
    """
    Despesas operacionais (combustível, almoço, outros). Exclusão definitiva.
    """

    async def list_expenses(self, actor: Actor, start_date: Optional[str] = None,
                            end_date: Optional[str] = None) -> List[ExpenseOutput]:
        expenses = await self._resilient_list(
            lambda: self.adapter.get_expenses(actor.id, start_date, end_date), "expenses"
        )
        return [ExpenseOutput.model_validate(e.model_dump()) for e in sort_by_date_desc(expenses)]

    async def create_expense(self, actor: Actor, data: ExpenseCreate) -> ExpenseOutput:
        fields = data.model_dump()
        fields["date"] = fields.get("date") or self._today()
        expense = ExpenseRecord(id=self.id_factory(), owner_id=actor.id, **fields)

        await self.adapter.save_expense(expense)
        return ExpenseOutput.model_validate(expense.model_dump())

    async def delete_expense(self, actor: Actor, expense_id: str) -> None:
        expenses = await self.adapter.get_expenses(actor.id)
        expense = next((e for e in expenses if e.id == expense_id), None)
        self._ensure_owner(expense, actor, "Despesa", expense_id)
        await self.adapter.delete_expense(expense_id)
