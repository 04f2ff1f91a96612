# logitrack/application/dtos/report_dto.py

from typing import Dict, List

from logitrack.application.dtos.base_dto import CustomBaseModel


class SeriesPointOutput(CustomBaseModel):
    key: str
    revenue: float
    cost: float
    profit: float


class ClientRankingOutput(CustomBaseModel):
    client_id: str
    name: str
    count: int
    revenue: float


class ReportSummaryOutput(CustomBaseModel):
    start_date: str
    end_date: str
    revenue: float
    driver_payout: float
    expenses: float
    net_profit: float
    pending: float
    service_count: int
    revenue_by_method: Dict[str, float]
    expenses_by_category: Dict[str, float]
    status_counts: Dict[str, int]
    series: List[SeriesPointOutput]
    top_clients_by_revenue: List[ClientRankingOutput]
    top_clients_by_count: List[ClientRankingOutput]
