# logitrack/application/use_cases/report_use_cases.py

"""
Relatórios do painel: resumo financeiro, série diária e ranking de clientes.
"""

from typing import Optional

from logitrack.application.dtos import ClientRankingOutput, ReportSummaryOutput, SeriesPointOutput
from logitrack.application.ports.inbound import IReportUseCase
from logitrack.application.use_cases.base_use_cases import BaseUseCase
from logitrack.domain.models import Actor
from logitrack.domain.services.query_service import (
    TimeFrame,
    count_by_status,
    daily_series,
    financial_summary,
    period_bounds,
    top_clients,
)


class ReportUseCases(BaseUseCase, IReportUseCase):

    async def summary(self, actor: Actor, timeframe: TimeFrame = TimeFrame.MONTHLY,
                      start_date: Optional[str] = None,
                      end_date: Optional[str] = None) -> ReportSummaryOutput:
        """
        Monta o resumo do período escolhido.

        Leituras que falham contam como coleções vazias; o painel nunca quebra.
        """
        start, end = period_bounds(timeframe, self.clock().date(), start_date, end_date)

        services = await self._resilient_list(lambda: self.adapter.get_services(actor.id, start, end), "services")
        expenses = await self._resilient_list(lambda: self.adapter.get_expenses(actor.id, start, end), "expenses")
        clients = await self._resilient_list(
            lambda: self.adapter.get_clients(actor.id, include_deleted=True), "clients"
        )

        totals = financial_summary(services, expenses)
        ranking = top_clients(services, clients)
        series = daily_series(services, expenses, timeframe)

        return ReportSummaryOutput(
            start_date=start,
            end_date=end,
            revenue=totals.revenue,
            driver_payout=totals.driver_payout,
            expenses=totals.expenses,
            net_profit=totals.net_profit,
            pending=totals.pending,
            service_count=totals.service_count,
            revenue_by_method=totals.revenue_by_method,
            expenses_by_category=totals.expenses_by_category,
            status_counts=count_by_status(services),
            series=[
                SeriesPointOutput(key=p.key, revenue=p.revenue, cost=p.cost, profit=p.profit)
                for p in series
            ],
            top_clients_by_revenue=[
                ClientRankingOutput(client_id=r.client_id, name=r.name, count=r.count, revenue=r.revenue)
                for r in ranking["by_revenue"]
            ],
            top_clients_by_count=[
                ClientRankingOutput(client_id=r.client_id, name=r.name, count=r.count, revenue=r.revenue)
                for r in ranking["by_count"]
            ],
        )
