# logitrack/adapters/outbound/backup/connection_repository.py

"""
Repositório das conexões de backup configuradas pelo administrador.

As conexões ficam sempre no armazenamento local (chave ``db_connections``),
independente do backend usado para os dados de negócio.
"""

import logging
from typing import List

from starlette.concurrency import run_in_threadpool

from logitrack.adapters.outbound.persistence.local.key_value_store import JsonFileKeyValueStore, Records
from logitrack.application.ports.outbound import IBackupConnectionRepository
from logitrack.domain.exceptions import DatabaseOperationException, ResourceNotFoundException
from logitrack.domain.models import DatabaseConnection

logger = logging.getLogger(__name__)

DB_CONNECTIONS_KEY = "db_connections"


class LocalBackupConnectionRepository(IBackupConnectionRepository):

    def __init__(self, store: JsonFileKeyValueStore):
        self.store = store

    async def list(self) -> List[DatabaseConnection]:
        try:
            records = await run_in_threadpool(self.store.get_list, DB_CONNECTIONS_KEY)
            return [DatabaseConnection.from_record(r) for r in records]
        except (OSError, ValueError) as e:
            logger.error(f"Error reading backup connections: {str(e)}")
            raise DatabaseOperationException(detail="Error reading backup connections", original_error=e)

    async def save(self, connection: DatabaseConnection) -> None:
        record = connection.to_record()

        def mutate(records: Records) -> Records:
            others = [r for r in records if r.get("id") != connection.id]
            if len(others) == len(records):
                return records + [record]
            return [record if r.get("id") == connection.id else r for r in records]

        try:
            await run_in_threadpool(self.store.update_list, DB_CONNECTIONS_KEY, mutate)
        except (OSError, ValueError) as e:
            logger.error(f"Error saving backup connection: {str(e)}")
            raise DatabaseOperationException(detail="Error saving backup connection", original_error=e)

    async def delete(self, id: str) -> None:
        def mutate(records: Records) -> Records:
            remaining = [r for r in records if r.get("id") != id]
            if len(remaining) == len(records):
                raise ResourceNotFoundException(detail="Conexão não encontrada", resource_id=id)
            return remaining

        try:
            await run_in_threadpool(self.store.update_list, DB_CONNECTIONS_KEY, mutate)
        except (OSError, ValueError) as e:
            logger.error(f"Error removing backup connection: {str(e)}")
            raise DatabaseOperationException(detail="Error removing backup connection", original_error=e)
