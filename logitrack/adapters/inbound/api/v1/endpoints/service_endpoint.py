# logitrack/adapters/inbound/api/v1/endpoints/service_endpoint.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query, status

from logitrack.adapters.inbound.api.deps import get_actor, get_service_use_cases
from logitrack.application.dtos import (
    BulkServiceUpdate,
    ServiceCreate,
    ServiceLogOutput,
    ServiceOutput,
    ServiceUpdate,
)
from logitrack.application.use_cases import ServiceUseCases
from logitrack.domain.models import Actor

router = APIRouter()


@router.get(
    "",
    response_model=List[ServiceOutput],
    summary="List Services - Delivery orders of the user",
    description="Newest first. Dates filter the YYYY-MM-DD portion, both ends inclusive.",
)
async def list_services(
        start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD"),
        end_date: Optional[str] = Query(None, alias="endDate", description="YYYY-MM-DD"),
        client_id: Optional[str] = Query(None, alias="clientId"),
        actor: Actor = Depends(get_actor),
        services: ServiceUseCases = Depends(get_service_use_cases),
):
    return await services.list_services(actor, start_date, end_date, client_id)


@router.get("/trash", response_model=List[ServiceOutput], summary="Trash - Deleted services")
async def list_deleted_services(
        actor: Actor = Depends(get_actor),
        services: ServiceUseCases = Depends(get_service_use_cases),
):
    return await services.list_trash(actor)


@router.post("", response_model=ServiceOutput, status_code=status.HTTP_201_CREATED,
             summary="Create Service")
async def create_service(
        data: ServiceCreate,
        actor: Actor = Depends(get_actor),
        services: ServiceUseCases = Depends(get_service_use_cases),
):
    return await services.create_service(actor, data)


@router.patch(
    "/bulk",
    response_model=List[ServiceOutput],
    summary="Bulk Update - Same payment change on several services",
)
async def bulk_update_services(
        data: BulkServiceUpdate,
        actor: Actor = Depends(get_actor),
        services: ServiceUseCases = Depends(get_service_use_cases),
):
    return await services.bulk_update(actor, data)


@router.get("/{service_id}", response_model=ServiceOutput, summary="Get Service")
async def get_service(
        service_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        services: ServiceUseCases = Depends(get_service_use_cases),
):
    return await services.get_service(actor, service_id)


@router.put("/{service_id}", response_model=ServiceOutput, summary="Update Service")
async def update_service(
        data: ServiceUpdate,
        service_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        services: ServiceUseCases = Depends(get_service_use_cases),
):
    return await services.update_service(actor, service_id, data)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Delete Service - Moves the service to the trash")
async def delete_service(
        service_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        services: ServiceUseCases = Depends(get_service_use_cases),
):
    await services.delete_service(actor, service_id)


@router.post("/{service_id}/restore", response_model=ServiceOutput, summary="Restore Service")
async def restore_service(
        service_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        services: ServiceUseCases = Depends(get_service_use_cases),
):
    return await services.restore_service(actor, service_id)


@router.get("/{service_id}/logs", response_model=List[ServiceLogOutput],
            summary="Service History - Audit entries, newest first")
async def get_service_logs(
        service_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        services: ServiceUseCases = Depends(get_service_use_cases),
):
    return await services.get_logs(actor, service_id)
