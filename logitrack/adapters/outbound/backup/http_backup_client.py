# logitrack/adapters/outbound/backup/http_backup_client.py

import logging
from typing import Any, Dict, Optional

import httpx

from logitrack.application.ports.outbound import IBackupClient
from logitrack.domain.models import DatabaseConnection

logger = logging.getLogger(__name__)


class HttpBackupClient(IBackupClient):
    """
    POSTs the dataset snapshot as JSON to a connection's endpoint.

    The api key, when present, goes in a Bearer Authorization header.
    """

    def __init__(self, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self.transport = transport

    async def push(self, connection: DatabaseConnection, payload: Dict[str, Any]) -> None:
        headers = {"Content-Type": "application/json"}
        if connection.api_key:
            headers["Authorization"] = f"Bearer {connection.api_key}"

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(connection.endpoint_url, json=payload, headers=headers)
            response.raise_for_status()

        logger.info(f"Backup sent to '{connection.name}' ({response.status_code})")
