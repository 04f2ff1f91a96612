# tests/test_validation.py

import math

import pytest

from logitrack.domain.exceptions import InvalidInputException
from logitrack.domain.services import RecordValidator
from tests.factories import make_client, make_expense, make_service


def test_blank_addresses_are_removed():
    service = make_service(pickup_addresses=["Rua A", "  ", ""], delivery_addresses=["", "Rua B"])
    cleaned = RecordValidator.validate_service(service)
    assert cleaned.pickup_addresses == ["Rua A"]
    assert cleaned.delivery_addresses == ["Rua B"]


@pytest.mark.parametrize("field", ["pickup_addresses", "delivery_addresses"])
def test_service_needs_addresses(field):
    with pytest.raises(InvalidInputException) as exc:
        RecordValidator.validate_service(make_service(**{field: ["   "]}))
    assert exc.value.internal_code == "INVALID_INPUT"


def test_negative_amounts_are_rejected():
    with pytest.raises(InvalidInputException) as exc:
        RecordValidator.validate_service(make_service(cost=-1, extra_fee=-2))
    assert set(exc.value.fields) == {"cost", "extra_fee"}


def test_invalid_date_is_rejected():
    with pytest.raises(InvalidInputException):
        RecordValidator.validate_service(make_service(date="10/05/2024"))


def test_iso_datetime_is_accepted():
    assert RecordValidator.validate_service(make_service(date="2024-05-10T08:00:00.000Z"))


def test_client_needs_name():
    with pytest.raises(InvalidInputException):
        RecordValidator.validate_client(make_client(name="  "))


def test_expense_amount_not_negative():
    with pytest.raises(InvalidInputException):
        RecordValidator.validate_expense(make_expense(amount=-10))


def test_owner_cannot_change():
    RecordValidator.check_owner_unchanged("u1", "u1")
    with pytest.raises(InvalidInputException):
        RecordValidator.check_owner_unchanged("u1", "u2")


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_amounts_are_rejected(value):
    with pytest.raises(InvalidInputException) as exc:
        RecordValidator.validate_service(make_service(driver_fee=value, waiting_time=value))
    assert set(exc.value.fields) == {"driver_fee", "waiting_time"}

    with pytest.raises(InvalidInputException) as exc:
        RecordValidator.validate_expense(make_expense(amount=value))
    assert set(exc.value.fields) == {"amount"}
