# logitrack/application/use_cases/service_use_cases.py

"""
Casos de uso das corridas (serviços de entrega).

Toda alteração é repassada ao adapter junto com o ``Actor``, que assina a
entrada correspondente no histórico.
"""

from typing import List, Optional

from logitrack.application.dtos import (
    BulkServiceUpdate,
    ServiceCreate,
    ServiceLogOutput,
    ServiceOutput,
    ServiceUpdate,
)
from logitrack.application.ports.inbound import IServiceUseCase
from logitrack.application.use_cases.base_use_cases import BaseUseCase
from logitrack.domain.models import Actor, ServiceRecord
from logitrack.domain.services.query_service import only_deleted, service_total, sort_by_date_desc


def to_service_output(service: ServiceRecord) -> ServiceOutput:
    return ServiceOutput.model_validate({**service.model_dump(), "total": service_total(service)})


class ServiceUseCases(BaseUseCase, IServiceUseCase):
    """
    Regras de negócio das corridas de um usuário.
    """

    async def _owned(self, actor: Actor, service_id: str) -> ServiceRecord:
        return self._ensure_owner(await self.adapter.get_service(service_id), actor, "Corrida", service_id)

    async def list_services(self, actor: Actor, start_date: Optional[str] = None,
                            end_date: Optional[str] = None,
                            client_id: Optional[str] = None) -> List[ServiceOutput]:
        services = await self._resilient_list(
            lambda: self.adapter.get_services(actor.id, start_date, end_date, client_id),
            "services",
        )
        return [to_service_output(s) for s in sort_by_date_desc(services)]

    async def get_services_by_client(self, actor: Actor, client_id: str) -> List[ServiceOutput]:
        return await self.list_services(actor, client_id=client_id)

    async def get_service(self, actor: Actor, service_id: str) -> ServiceOutput:
        return to_service_output(await self._owned(actor, service_id))

    async def create_service(self, actor: Actor, data: ServiceCreate) -> ServiceOutput:
        fields = data.model_dump()
        fields["date"] = fields.get("date") or self._today()
        service = ServiceRecord(id=self.id_factory(), owner_id=actor.id, **fields)

        await self.adapter.save_service(service, actor)
        return await self.get_service(actor, service.id)

    async def update_service(self, actor: Actor, service_id: str, data: ServiceUpdate) -> ServiceOutput:
        service = await self._owned(actor, service_id)
        await self.adapter.update_service(service.model_copy(update=data.to_payload()), actor)
        return await self.get_service(actor, service_id)

    async def delete_service(self, actor: Actor, service_id: str) -> None:
        await self._owned(actor, service_id)
        await self.adapter.delete_service(service_id, actor)

    async def restore_service(self, actor: Actor, service_id: str) -> ServiceOutput:
        await self._owned(actor, service_id)
        await self.adapter.restore_service(service_id, actor)
        return await self.get_service(actor, service_id)

    async def list_trash(self, actor: Actor) -> List[ServiceOutput]:
        services = await self._resilient_list(
            lambda: self.adapter.get_services(actor.id, include_deleted=True),
            "deleted services",
        )
        return [to_service_output(s) for s in sort_by_date_desc(only_deleted(services))]

    async def get_logs(self, actor: Actor, service_id: str) -> List[ServiceLogOutput]:
        await self._owned(actor, service_id)
        logs = await self._resilient_list(lambda: self.adapter.get_service_logs(service_id), "service logs")
        return [ServiceLogOutput.model_validate(log.model_dump()) for log in logs]

    async def bulk_update(self, actor: Actor, data: BulkServiceUpdate) -> List[ServiceOutput]:
        """
        Aplica o mesmo pagamento/forma de pagamento a várias corridas.

        Cada corrida gera sua própria entrada de histórico.
        """
        changes = data.to_payload()
        changes.pop("ids", None)

        updated = []
        for service_id in data.ids:
            service = await self._owned(actor, service_id)
            await self.adapter.update_service(service.model_copy(update=changes), actor)
            updated.append(await self.get_service(actor, service_id))

        self.logger.info(f"{len(updated)} services updated in bulk by {actor.name}")
        return updated
