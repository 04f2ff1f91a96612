# logitrack/application/use_cases/client_use_cases.py

"""
Casos de uso de clientes da transportadora.
"""

from typing import List

from logitrack.application.dtos import ClientCreate, ClientOutput, ClientUpdate
from logitrack.application.ports.inbound import IClientUseCase
from logitrack.application.use_cases.base_use_cases import BaseUseCase
from logitrack.domain.models import Actor, Client, ServiceRecord
from logitrack.domain.services.query_service import count_services_by_client, only_deleted


def to_client_output(client: Client, services: List[ServiceRecord] = ()) -> ClientOutput:
    return ClientOutput.model_validate({
        **client.model_dump(),
        "service_count": count_services_by_client(services, client.id),
    })


class ClientUseCases(BaseUseCase, IClientUseCase):
    """
    Cadastro de clientes, restrito aos registros do próprio usuário.
    """

    async def _owned(self, actor: Actor, client_id: str) -> Client:
        return self._ensure_owner(await self.adapter.get_client(client_id), actor, "Cliente", client_id)

    async def _active_services(self, actor: Actor) -> List[ServiceRecord]:
        return await self._resilient_list(lambda: self.adapter.get_services(actor.id), "services")

    async def list_clients(self, actor: Actor) -> List[ClientOutput]:
        clients = await self._resilient_list(lambda: self.adapter.get_clients(actor.id), "clients")
        services = await self._active_services(actor)
        return [to_client_output(c, services) for c in sorted(clients, key=lambda c: c.name.lower())]

    async def get_client(self, actor: Actor, client_id: str) -> ClientOutput:
        client = await self._owned(actor, client_id)
        return to_client_output(client, await self._active_services(actor))

    async def create_client(self, actor: Actor, data: ClientCreate) -> ClientOutput:
        client = Client(
            id=self.id_factory(),
            owner_id=actor.id,
            created_at=self._now(),
            **data.model_dump(),
        )
        await self.adapter.save_client(client)
        return to_client_output(client)

    async def update_client(self, actor: Actor, client_id: str, data: ClientUpdate) -> ClientOutput:
        client = await self._owned(actor, client_id)
        updated = client.model_copy(update=data.to_payload())
        await self.adapter.save_client(updated)
        return to_client_output(updated, await self._active_services(actor))

    async def delete_client(self, actor: Actor, client_id: str) -> None:
        await self._owned(actor, client_id)
        await self.adapter.delete_client(client_id)

    async def restore_client(self, actor: Actor, client_id: str) -> ClientOutput:
        await self._owned(actor, client_id)
        await self.adapter.restore_client(client_id)
        return await self.get_client(actor, client_id)

    async def list_trash(self, actor: Actor) -> List[ClientOutput]:
        clients = await self._resilient_list(
            lambda: self.adapter.get_clients(actor.id, include_deleted=True), "deleted clients"
        )
        return [to_client_output(c) for c in only_deleted(clients)]
