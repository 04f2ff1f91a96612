# tests/test_query_service.py

from datetime import date

import pytest

from logitrack.domain.exceptions import InvalidInputException
from logitrack.domain.models import PaymentMethod, ServiceStatus
from logitrack.domain.services.query_service import (
    TimeFrame,
    count_by_status,
    count_services_by_client,
    daily_series,
    date_key,
    exclude_deleted,
    filter_by_date_range,
    financial_summary,
    only_deleted,
    period_bounds,
    revenue_by_payment_method,
    service_total,
    sort_by_date_desc,
    top_clients,
)
from tests.factories import make_client, make_expense, make_service


def test_date_key_strips_time():
    assert date_key("2024-01-15T23:59:59.000Z") == "2024-01-15"
    assert date_key("2024-01-15") == "2024-01-15"
    assert date_key(None) == ""


def test_date_range_is_inclusive_on_both_ends():
    services = [
        make_service(id="a", date="2024-01-05"),
        make_service(id="b", date="2024-01-15"),
        make_service(id="c", date="2024-02-01"),
    ]
    result = filter_by_date_range(services, "2024-01-01", "2024-01-31")
    assert [s.id for s in result] == ["a", "b"]

    edges = filter_by_date_range(services, "2024-01-05", "2024-02-01")
    assert [s.id for s in edges] == ["a", "b", "c"]


def test_date_range_matches_iso_datetimes():
    services = [make_service(id="a", date="2024-01-31T22:00:00.000Z")]
    assert filter_by_date_range(services, "2024-01-01", "2024-01-31") == services


def test_sort_newest_first():
    services = [make_service(id="old", date="2024-01-01"), make_service(id="new", date="2024-03-01")]
    assert [s.id for s in sort_by_date_desc(services)] == ["new", "old"]


def test_trash_helpers():
    alive = make_service(id="a")
    gone = make_service(id="b", deleted_at="2024-05-10T00:00:00+00:00")
    assert exclude_deleted([alive, gone]) == [alive]
    assert only_deleted([alive, gone]) == [gone]


def test_count_services_by_client():
    services = [make_service(id="a"), make_service(id="b"), make_service(id="c", client_id="other")]
    assert count_services_by_client(services, "client-1") == 2


def test_revenue_by_payment_method_defaults_to_pix():
    services = [
        make_service(id="a", cost=100, waiting_time=10, payment_method=PaymentMethod.CASH),
        make_service(id="b", cost=50, payment_method=None),
    ]
    assert revenue_by_payment_method(services) == {"PIX": 50.0, "CASH": 110.0, "CARD": 0.0}


def test_missing_status_counts_as_done():
    services = [make_service(id="a"), make_service(id="b", status=ServiceStatus.PENDING)]
    counts = count_by_status(services)
    assert counts["DONE"] == 1
    assert counts["PENDING"] == 1


def test_financial_summary_ignores_deleted_services():
    services = [
        make_service(id="a", cost=100, driver_fee=40, waiting_time=20, paid=True),
        make_service(id="b", cost=80, driver_fee=30, paid=False),
        make_service(id="c", cost=1000, driver_fee=500, deleted_at="2024-05-10T00:00:00+00:00"),
    ]
    expenses = [make_expense(amount=25), make_expense(id="exp-2", category="LUNCH", amount=15)]

    summary = financial_summary(services, expenses)

    assert summary.revenue == 200
    assert summary.driver_payout == 70
    assert summary.expenses == 40
    assert summary.net_profit == 90
    assert summary.pending == 80
    assert summary.service_count == 2
    assert summary.expenses_by_category == {"GAS": 25.0, "LUNCH": 15.0, "OTHER": 0.0}


def test_service_total_includes_extra_fee():
    assert service_total(make_service(cost=100, waiting_time=10, extra_fee=5)) == 115


def test_top_clients_rankings():
    clients = [make_client(id="c1", name="Alfa"), make_client(id="c2", name="Beta")]
    services = [
        make_service(id="1", client_id="c1", cost=500),
        make_service(id="2", client_id="c2", cost=100),
        make_service(id="3", client_id="c2", cost=100),
        make_service(id="4", client_id="ghost", cost=10),
    ]

    ranking = top_clients(services, clients)

    assert [r.name for r in ranking["by_revenue"]] == ["Alfa", "Beta", "Desconhecido"]
    assert ranking["by_count"][0].name == "Beta"
    assert ranking["by_count"][0].count == 2


def test_daily_series_groups_by_month_for_yearly_view():
    services = [
        make_service(id="1", date="2024-01-05", cost=100, driver_fee=40),
        make_service(id="2", date="2024-01-20", cost=50, driver_fee=20),
        make_service(id="3", date="2024-02-02", cost=10, driver_fee=0),
    ]
    expenses = [make_expense(date="2024-01-07", amount=5)]

    points = daily_series(services, expenses, TimeFrame.YEARLY)

    assert [p.key for p in points] == ["2024-01", "2024-02"]
    assert points[0].revenue == 150
    assert points[0].cost == 65
    assert points[0].profit == 85


def test_daily_series_per_day():
    points = daily_series([make_service(date="2024-01-05T10:00:00Z")], [], TimeFrame.MONTHLY)
    assert [p.key for p in points] == ["2024-01-05"]


@pytest.mark.parametrize("timeframe,expected", [
    (TimeFrame.DAILY, ("2024-05-15", "2024-05-15")),
    (TimeFrame.WEEKLY, ("2024-05-12", "2024-05-18")),
    (TimeFrame.MONTHLY, ("2024-05-01", "2024-05-31")),
    (TimeFrame.YEARLY, ("2024-01-01", "2024-12-31")),
])
def test_period_bounds(timeframe, expected):
    # 2024-05-15 is a Wednesday
    assert period_bounds(timeframe, date(2024, 5, 15)) == expected


def test_week_starting_on_sunday():
    assert period_bounds(TimeFrame.WEEKLY, date(2024, 5, 12)) == ("2024-05-12", "2024-05-18")


def test_custom_period_requires_both_dates():
    assert period_bounds(TimeFrame.CUSTOM, date(2024, 5, 15), "2024-01-01", "2024-01-31") == (
        "2024-01-01", "2024-01-31"
    )
    with pytest.raises(InvalidInputException):
        period_bounds(TimeFrame.CUSTOM, date(2024, 5, 15), "2024-01-01", None)
