# logitrack/adapters/inbound/api/v1/endpoints/client_endpoint.py

from typing import List
from fastapi import APIRouter, Depends, Path, status

from logitrack.adapters.inbound.api.deps import get_actor, get_client_use_cases
from logitrack.application.dtos import ClientCreate, ClientOutput, ClientUpdate
from logitrack.application.use_cases import ClientUseCases
from logitrack.domain.models import Actor, CLIENT_CATEGORIES

router = APIRouter()


@router.get("", response_model=List[ClientOutput], summary="List Clients - Active clients of the user")
async def list_clients(
        actor: Actor = Depends(get_actor),
        clients: ClientUseCases = Depends(get_client_use_cases),
):
    return await clients.list_clients(actor)


@router.get("/trash", response_model=List[ClientOutput], summary="Trash - Deleted clients")
async def list_deleted_clients(
        actor: Actor = Depends(get_actor),
        clients: ClientUseCases = Depends(get_client_use_cases),
):
    return await clients.list_trash(actor)


@router.get("/categories", response_model=List[str], summary="Client Categories - Suggested categories")
async def list_categories():
    return CLIENT_CATEGORIES


@router.post("", response_model=ClientOutput, status_code=status.HTTP_201_CREATED,
             summary="Create Client")
async def create_client(
        data: ClientCreate,
        actor: Actor = Depends(get_actor),
        clients: ClientUseCases = Depends(get_client_use_cases),
):
    return await clients.create_client(actor, data)


@router.get("/{client_id}", response_model=ClientOutput, summary="Get Client")
async def get_client(
        client_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        clients: ClientUseCases = Depends(get_client_use_cases),
):
    return await clients.get_client(actor, client_id)


@router.put("/{client_id}", response_model=ClientOutput, summary="Update Client")
async def update_client(
        data: ClientUpdate,
        client_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        clients: ClientUseCases = Depends(get_client_use_cases),
):
    return await clients.update_client(actor, client_id, data)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Delete Client - Moves the client to the trash")
async def delete_client(
        client_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        clients: ClientUseCases = Depends(get_client_use_cases),
):
    await clients.delete_client(actor, client_id)


@router.post("/{client_id}/restore", response_model=ClientOutput, summary="Restore Client")
async def restore_client(
        client_id: str = Path(...),
        actor: Actor = Depends(get_actor),
        clients: ClientUseCases = Depends(get_client_use_cases),
):
    return await clients.restore_client(actor, client_id)
