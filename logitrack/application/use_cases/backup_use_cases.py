# logitrack/application/use_cases/backup_use_cases.py

"""
Backups do conjunto de dados para destinos externos.

As conexões são configuradas pelo administrador. Cada execução envia o
mesmo snapshot para todas as conexões ativas e registra o resultado em
cada uma; a falha de um destino não impede os demais.
"""

import logging
from datetime import datetime
from typing import Callable, List

import httpx

from logitrack.application.dtos import BackupResult, ConnectionCreate, ConnectionOutput, ConnectionUpdate
from logitrack.application.ports.inbound import IBackupUseCase
from logitrack.application.ports.outbound import IBackupClient, IBackupConnectionRepository, IDatabaseAdapter
from logitrack.domain.exceptions import ResourceNotFoundException
from logitrack.domain.models import BackupStatus, DatabaseConnection
from logitrack.shared.utils.identity import new_id, utc_now

logger = logging.getLogger(__name__)


def to_connection_output(connection: DatabaseConnection) -> ConnectionOutput:
    return ConnectionOutput.model_validate(connection.model_dump(exclude={"api_key"}))


class BackupUseCases(IBackupUseCase):

    def __init__(
            self,
            connections: IBackupConnectionRepository,
            adapter: IDatabaseAdapter,
            client: IBackupClient,
            id_factory: Callable[[], str] = new_id,
            clock: Callable[[], datetime] = utc_now,
    ):
        self.connections = connections
        self.adapter = adapter
        self.client = client
        self.id_factory = id_factory
        self.clock = clock

    async def _get(self, connection_id: str) -> DatabaseConnection:
        connection = next((c for c in await self.connections.list() if c.id == connection_id), None)
        if connection is None:
            raise ResourceNotFoundException(detail="Conexão não encontrada", resource_id=connection_id)
        return connection

    async def list_connections(self) -> List[ConnectionOutput]:
        return [to_connection_output(c) for c in await self.connections.list()]

    async def create_connection(self, data: ConnectionCreate) -> ConnectionOutput:
        connection = DatabaseConnection(id=self.id_factory(), **data.model_dump())
        await self.connections.save(connection)
        logger.info(f"Backup connection '{connection.name}' ({connection.provider.value}) created")
        return to_connection_output(connection)

    async def update_connection(self, connection_id: str, data: ConnectionUpdate) -> ConnectionOutput:
        connection = await self._get(connection_id)
        updated = connection.model_copy(update=data.to_payload())
        await self.connections.save(updated)
        return to_connection_output(updated)

    async def delete_connection(self, connection_id: str) -> None:
        await self.connections.delete(connection_id)
        logger.info(f"Backup connection {connection_id} removed")

    async def run_backup(self) -> List[BackupResult]:
        """
        Envia o snapshot atual para cada conexão ativa.

        Returns:
            Um resultado por conexão ativa
        """
        active = [c for c in await self.connections.list() if c.is_active]
        if not active:
            logger.info("No active backup connection, nothing to do")
            return []

        payload = {
            "exportedAt": self.clock().isoformat(),
            "data": await self.adapter.export_snapshot(),
        }

        results = []
        for connection in active:
            error = None
            try:
                await self.client.push(connection, payload)
                status = BackupStatus.SUCCESS
            except httpx.HTTPError as e:
                logger.error(f"Backup to '{connection.name}' failed: {str(e)}")
                status = BackupStatus.ERROR
                error = str(e)

            await self.connections.save(connection.model_copy(update={
                "last_backup_status": status,
                "last_backup_time": self.clock().isoformat(),
            }))
            results.append(BackupResult(connection_id=connection.id, name=connection.name,
                                        status=status, error=error))
        return results
