# logitrack/application/use_cases/base_use_cases.py

"""
Classe base para todos os casos de uso da aplicação.

Reúne o que todos compartilham: o adapter de armazenamento, a fábrica de
ids, o relógio e as regras de acesso por proprietário e de leitura
tolerante a falhas.
"""

import logging
from datetime import datetime
from typing import Awaitable, Callable, List, Optional, TypeVar

from logitrack.application.ports.outbound import IDatabaseAdapter
from logitrack.domain.exceptions import DatabaseOperationException, ResourceNotFoundException
from logitrack.domain.models import Actor
from logitrack.shared.utils.identity import new_id, utc_now

T = TypeVar("T")


class BaseUseCase:
    """
    Base dos casos de uso.

    Attributes:
        adapter: Backend de armazenamento configurado
        id_factory: Gera ids para novos registros
        clock: Fornece o instante atual (UTC)
    """

    def __init__(
            self,
            adapter: IDatabaseAdapter,
            id_factory: Callable[[], str] = new_id,
            clock: Callable[[], datetime] = utc_now,
    ):
        self.adapter = adapter
        self.id_factory = id_factory
        self.clock = clock
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    def _now(self) -> str:
        return self.clock().isoformat()

    def _today(self) -> str:
        return self.clock().date().isoformat()

    def _ensure_owner(self, record: Optional[T], actor: Actor, label: str, record_id: str) -> T:
        """
        Garante que o registro existe e pertence ao usuário.

        Registros de outro proprietário são tratados como inexistentes.

        Raises:
            ResourceNotFoundException: Se o registro não existir ou não for do usuário
        """
        if record is None or getattr(record, "owner_id", None) != actor.id:
            if record is not None:
                self.logger.warning(f"User {actor.id} tried to access {label} {record_id} of another owner")
            raise ResourceNotFoundException(detail=f"{label} não encontrado", resource_id=record_id)
        return record

    async def _resilient_list(self, load: Callable[[], Awaitable[List[T]]], what: str) -> List[T]:
        """
        Executa uma leitura de listagem; falhas de armazenamento viram lista vazia.
        """
        try:
            return await load()
        except DatabaseOperationException as e:
            self.logger.error(f"Error listing {what}, returning empty result: {str(e)}")
            return []
