# logitrack/domain/services/validation_service.py

import math
from datetime import date
from typing import Dict, List, Optional

from logitrack.domain.exceptions import InvalidInputException
from logitrack.domain.models import Client, ExpenseRecord, ServiceRecord
from logitrack.domain.services.query_service import date_key


class RecordValidator:
    """
    Domain service with the validation rules applied before persistence.
    """

    @staticmethod
    def clean_addresses(addresses: Optional[List[str]]) -> List[str]:
        """Drop blank entries, keeping the order of the remaining ones."""
        return [a for a in (addresses or []) if a and a.strip()]

    @staticmethod
    def _check_amount(field: str, value: Optional[float], errors: Dict[str, str]) -> None:
        if value is None:
            return
        if not math.isfinite(value):
            errors[field] = "valor numérico inválido"
        elif value < 0:
            errors[field] = "valor não pode ser negativo"

    @staticmethod
    def _check_date(value: Optional[str], errors: Dict[str, str]) -> None:
        try:
            date.fromisoformat(date_key(value))
        except (TypeError, ValueError):
            errors["date"] = "data inválida, use YYYY-MM-DD"

    @classmethod
    def validate_service(cls, service: ServiceRecord) -> ServiceRecord:
        """
        Validate a service and return it with blank addresses removed.

        Raises:
            InvalidInputException: If any rule is violated
        """
        errors: Dict[str, str] = {}

        pickups = cls.clean_addresses(service.pickup_addresses)
        deliveries = cls.clean_addresses(service.delivery_addresses)
        if not pickups:
            errors["pickupAddresses"] = "informe ao menos um endereço de coleta"
        if not deliveries:
            errors["deliveryAddresses"] = "informe ao menos um endereço de entrega"

        for attribute in ("cost", "driver_fee", "waiting_time", "extra_fee"):
            cls._check_amount(attribute, getattr(service, attribute), errors)

        if not service.owner_id:
            errors["ownerId"] = "obrigatório"
        cls._check_date(service.date, errors)

        if errors:
            raise InvalidInputException(detail="Corrida inválida", fields=errors)

        return service.model_copy(update={
            "pickup_addresses": pickups,
            "delivery_addresses": deliveries,
        })

    @staticmethod
    def validate_client(client: Client) -> Client:
        errors: Dict[str, str] = {}
        if not client.name or not client.name.strip():
            errors["name"] = "obrigatório"
        if not client.owner_id:
            errors["ownerId"] = "obrigatório"
        if errors:
            raise InvalidInputException(detail="Cliente inválido", fields=errors)
        return client

    @classmethod
    def validate_expense(cls, expense: ExpenseRecord) -> ExpenseRecord:
        errors: Dict[str, str] = {}
        cls._check_amount("amount", expense.amount, errors)
        cls._check_date(expense.date, errors)
        if errors:
            raise InvalidInputException(detail="Despesa inválida", fields=errors)
        return expense

    @staticmethod
    def check_owner_unchanged(stored_owner_id: str, new_owner_id: str) -> None:
        if stored_owner_id != new_owner_id:
            raise InvalidInputException(
                detail="O proprietário do registro não pode ser alterado",
                fields={"ownerId": "imutável"},
            )
