# logitrack/adapters/outbound/persistence/base_adapter.py

"""
Base comum aos backends de armazenamento.

Implementa o ciclo de vida das corridas e clientes (upsert validado,
exclusão lógica e restauração) e o disparo do histórico de alterações,
delegando a leitura e a escrita de registros às subclasses.
"""

import logging
from abc import abstractmethod
from datetime import datetime
from typing import Callable, Optional

from logitrack.application.ports.outbound import IDatabaseAdapter
from logitrack.domain.exceptions import ResourceNotFoundException
from logitrack.domain.models import Actor, Client, ServiceLog, ServiceRecord
from logitrack.domain.services import AuditLogWriter, RecordValidator
from logitrack.shared.utils.identity import new_id, utc_now


class BaseDatabaseAdapter(IDatabaseAdapter):
    """
    Shared record lifecycle for every backend.

    Subclasses provide the record primitives (``_find_*``, ``_write_*`` and
    ``_append_log``); this class guarantees that validation runs before
    anything is persisted and that every service mutation is audited.
    """

    def __init__(
            self,
            id_factory: Callable[[], str] = new_id,
            clock: Callable[[], datetime] = utc_now,
    ):
        self.id_factory = id_factory
        self.clock = clock
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")
        self.audit = AuditLogWriter(self._append_log, id_factory=id_factory, clock=clock)

    def _now(self) -> str:
        return self.clock().isoformat()

    # Primitives

    @abstractmethod
    async def _find_service(self, id: str) -> Optional[ServiceRecord]:
        pass

    @abstractmethod
    async def _write_service(self, service: ServiceRecord) -> None:
        pass

    @abstractmethod
    async def _append_log(self, entry: ServiceLog) -> None:
        pass

    @abstractmethod
    async def _find_client(self, id: str) -> Optional[Client]:
        pass

    @abstractmethod
    async def _write_client(self, client: Client) -> None:
        pass

    # Services

    async def get_service(self, id: str) -> Optional[ServiceRecord]:
        return await self._find_service(id)

    async def _require_service(self, id: str) -> ServiceRecord:
        service = await self._find_service(id)
        if service is None:
            raise ResourceNotFoundException(detail="Corrida não encontrada", resource_id=id)
        return service

    async def _upsert_service(self, service: ServiceRecord, actor: Optional[Actor]) -> None:
        service = RecordValidator.validate_service(service)
        previous = await self._find_service(service.id)
        if previous is not None:
            RecordValidator.check_owner_unchanged(previous.owner_id, service.owner_id)

        await self._write_service(service)
        self.logger.info(f"Service {service.id} {'created' if previous is None else 'saved'}")
        await self.audit.record(previous, service, actor)

    async def save_service(self, service: ServiceRecord, actor: Optional[Actor] = None) -> None:
        await self._upsert_service(service, actor)

    async def update_service(self, service: ServiceRecord, actor: Optional[Actor] = None) -> None:
        await self._upsert_service(service, actor)

    async def delete_service(self, id: str, actor: Optional[Actor] = None) -> None:
        previous = await self._require_service(id)
        if previous.deleted_at is not None:
            self.logger.debug(f"Service {id} already deleted")
            return

        deleted = previous.model_copy(update={"deleted_at": self._now()})
        await self._write_service(deleted)
        self.logger.info(f"Service {id} moved to trash")
        await self.audit.record(previous, deleted, actor)

    async def restore_service(self, id: str, actor: Optional[Actor] = None) -> None:
        previous = await self._require_service(id)
        if previous.deleted_at is None:
            self.logger.debug(f"Service {id} is not deleted, nothing to restore")
            return

        restored = previous.model_copy(update={"deleted_at": None})
        await self._write_service(restored)
        self.logger.info(f"Service {id} restored")
        await self.audit.record(previous, restored, actor)

    # Clients

    async def get_client(self, id: str) -> Optional[Client]:
        return await self._find_client(id)

    async def _require_client(self, id: str) -> Client:
        client = await self._find_client(id)
        if client is None:
            raise ResourceNotFoundException(detail="Cliente não encontrado", resource_id=id)
        return client

    async def save_client(self, client: Client) -> None:
        client = RecordValidator.validate_client(client)
        previous = await self._find_client(client.id)
        if previous is not None:
            RecordValidator.check_owner_unchanged(previous.owner_id, client.owner_id)
        await self._write_client(client)
        self.logger.info(f"Client {client.id} saved")

    async def delete_client(self, id: str) -> None:
        client = await self._require_client(id)
        if client.deleted_at is None:
            await self._write_client(client.model_copy(update={"deleted_at": self._now()}))
            self.logger.info(f"Client {id} moved to trash")

    async def restore_client(self, id: str) -> None:
        client = await self._require_client(id)
        if client.deleted_at is not None:
            await self._write_client(client.model_copy(update={"deleted_at": None}))
            self.logger.info(f"Client {id} restored")
