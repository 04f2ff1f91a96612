# logitrack/domain/services/query_service.py

"""
Filtros e agregações sobre coleções já carregadas.

Todas as funções são puras: recebem listas de entidades e devolvem novos
valores, sem acessar o armazenamento. Datas são comparadas pela porção
``YYYY-MM-DD`` como texto, o que é válido por ser um formato de largura fixa.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from logitrack.domain.exceptions import InvalidInputException
from logitrack.domain.models import (
    Client,
    ExpenseRecord,
    ExpenseCategory,
    PaymentMethod,
    ServiceRecord,
    ServiceStatus,
)

T = TypeVar("T")

DEFAULT_PAYMENT_METHOD = PaymentMethod.PIX
DEFAULT_STATUS = ServiceStatus.DONE
UNKNOWN_CLIENT_NAME = "Desconhecido"


class TimeFrame(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
    CUSTOM = "CUSTOM"


def date_key(value: Optional[str]) -> str:
    """Return the ``YYYY-MM-DD`` portion of a date or ISO datetime string."""
    if not value:
        return ""
    return value.split("T")[0]


def in_date_range(value: str, start_date: Optional[str] = None, end_date: Optional[str] = None) -> bool:
    key = date_key(value)
    if start_date and key < date_key(start_date):
        return False
    if end_date and key > date_key(end_date):
        return False
    return True


def filter_by_date_range(records: Iterable[T], start_date: Optional[str] = None,
                         end_date: Optional[str] = None) -> List[T]:
    """Keep records whose date lies in ``[start_date, end_date]`` (inclusive)."""
    return [r for r in records if in_date_range(r.date, start_date, end_date)]


def sort_by_date_desc(records: Iterable[T]) -> List[T]:
    return sorted(records, key=lambda r: date_key(r.date), reverse=True)


def exclude_deleted(records: Iterable[T]) -> List[T]:
    return [r for r in records if getattr(r, "deleted_at", None) is None]


def only_deleted(records: Iterable[T]) -> List[T]:
    """Trash view: records carrying a deletion timestamp."""
    return [r for r in records if getattr(r, "deleted_at", None) is not None]


def count_services_by_client(services: Iterable[ServiceRecord], client_id: str) -> int:
    # Deleted services are counted too; callers exclude them upstream if needed.
    return sum(1 for s in services if s.client_id == client_id)


def service_revenue(service: ServiceRecord) -> float:
    """Amount billed for the ride itself: cost plus waiting time."""
    return service.cost + (service.waiting_time or 0)


def service_total(service: ServiceRecord) -> float:
    """Total printed on client statements, extra fee included."""
    return service.cost + (service.waiting_time or 0) + (service.extra_fee or 0)


def revenue_by_payment_method(services: Iterable[ServiceRecord]) -> Dict[str, float]:
    totals = {method.value: 0.0 for method in PaymentMethod}
    for s in services:
        method = (s.payment_method or DEFAULT_PAYMENT_METHOD).value
        totals[method] += service_revenue(s)
    return totals


def count_by_status(services: Iterable[ServiceRecord]) -> Dict[str, int]:
    counts = {status.value: 0 for status in ServiceStatus}
    for s in services:
        counts[(s.status or DEFAULT_STATUS).value] += 1
    return counts


def paid_vs_pending(services: Iterable[ServiceRecord]) -> Dict[str, float]:
    totals = {"paid": 0.0, "pending": 0.0}
    for s in services:
        totals["paid" if s.paid else "pending"] += service_revenue(s)
    return totals


def expenses_by_category(expenses: Iterable[ExpenseRecord]) -> Dict[str, float]:
    totals = {category.value: 0.0 for category in ExpenseCategory}
    for e in expenses:
        totals[ExpenseCategory(e.category).value] += e.amount
    return totals


@dataclass
class FinancialSummary:
    revenue: float = 0.0
    driver_payout: float = 0.0
    expenses: float = 0.0
    net_profit: float = 0.0
    pending: float = 0.0
    service_count: int = 0
    revenue_by_method: Dict[str, float] = field(default_factory=dict)
    expenses_by_category: Dict[str, float] = field(default_factory=dict)


def financial_summary(services: Sequence[ServiceRecord], expenses: Sequence[ExpenseRecord]) -> FinancialSummary:
    """
    Aggregate revenue, driver payouts and expenses.

    Soft-deleted services never count towards financial figures.
    """
    active = exclude_deleted(services)
    revenue = sum(service_revenue(s) for s in active)
    driver_payout = sum(s.driver_fee or 0 for s in active)
    total_expenses = sum(e.amount for e in expenses)

    return FinancialSummary(
        revenue=revenue,
        driver_payout=driver_payout,
        expenses=total_expenses,
        net_profit=revenue - driver_payout - total_expenses,
        pending=paid_vs_pending(active)["pending"],
        service_count=len(active),
        revenue_by_method=revenue_by_payment_method(active),
        expenses_by_category=expenses_by_category(expenses),
    )


@dataclass
class ClientRanking:
    client_id: str
    name: str
    count: int = 0
    revenue: float = 0.0


def top_clients(services: Iterable[ServiceRecord], clients: Iterable[Client],
                limit: int = 5) -> Dict[str, List[ClientRanking]]:
    names = {c.id: c.name for c in clients}
    stats: Dict[str, ClientRanking] = {}
    for s in services:
        entry = stats.setdefault(
            s.client_id,
            ClientRanking(client_id=s.client_id, name=names.get(s.client_id, UNKNOWN_CLIENT_NAME)),
        )
        entry.count += 1
        entry.revenue += s.cost

    ranked = list(stats.values())
    return {
        "by_revenue": sorted(ranked, key=lambda r: r.revenue, reverse=True)[:limit],
        "by_count": sorted(ranked, key=lambda r: r.count, reverse=True)[:limit],
    }


@dataclass
class SeriesPoint:
    key: str
    revenue: float = 0.0
    cost: float = 0.0

    @property
    def profit(self) -> float:
        return self.revenue - self.cost


def daily_series(services: Iterable[ServiceRecord], expenses: Iterable[ExpenseRecord],
                 timeframe: TimeFrame = TimeFrame.MONTHLY) -> List[SeriesPoint]:
    """
    Revenue/cost per day, or per month when viewing a whole year.

    Cost is the driver fee of each ride plus the operational expenses.
    """
    def bucket(value: str) -> str:
        key = date_key(value)
        return key[:7] if timeframe == TimeFrame.YEARLY else key

    points: Dict[str, SeriesPoint] = {}
    for s in services:
        point = points.setdefault(bucket(s.date), SeriesPoint(key=bucket(s.date)))
        point.revenue += service_revenue(s)
        point.cost += s.driver_fee or 0
    for e in expenses:
        point = points.setdefault(bucket(e.date), SeriesPoint(key=bucket(e.date)))
        point.cost += e.amount

    return [points[k] for k in sorted(points)]


def period_bounds(timeframe: TimeFrame, today: date, custom_start: Optional[str] = None,
                  custom_end: Optional[str] = None) -> Tuple[str, str]:
    """
    Resolve a dashboard time frame into an inclusive ``(start, end)`` pair.

    Weeks run from Sunday to Saturday.
    """
    if timeframe == TimeFrame.DAILY:
        start = end = today
    elif timeframe == TimeFrame.WEEKLY:
        days_since_sunday = (today.weekday() + 1) % 7
        start = today - timedelta(days=days_since_sunday)
        end = start + timedelta(days=6)
    elif timeframe == TimeFrame.MONTHLY:
        start = today.replace(day=1)
        end = today.replace(day=calendar.monthrange(today.year, today.month)[1])
    elif timeframe == TimeFrame.YEARLY:
        start = date(today.year, 1, 1)
        end = date(today.year, 12, 31)
    else:
        if not custom_start or not custom_end:
            raise InvalidInputException(
                detail="Período personalizado incompleto",
                fields={"period": "informe data inicial e final"},
            )
        return date_key(custom_start), date_key(custom_end)

    return start.isoformat(), end.isoformat()
