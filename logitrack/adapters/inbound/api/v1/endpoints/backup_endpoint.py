# logitrack/adapters/inbound/api/v1/endpoints/backup_endpoint.py

from typing import List
from fastapi import APIRouter, Depends, Path, status

from logitrack.adapters.inbound.api.deps import get_backup_use_cases, require_admin
from logitrack.application.dtos import BackupResult, ConnectionCreate, ConnectionOutput, ConnectionUpdate
from logitrack.application.use_cases import BackupUseCases

# Every route here is restricted to administrators
router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/connections", response_model=List[ConnectionOutput], summary="List Backup Connections")
async def list_connections(backups: BackupUseCases = Depends(get_backup_use_cases)):
    return await backups.list_connections()


@router.post("/connections", response_model=ConnectionOutput, status_code=status.HTTP_201_CREATED,
             summary="Create Backup Connection")
async def create_connection(
        data: ConnectionCreate,
        backups: BackupUseCases = Depends(get_backup_use_cases),
):
    return await backups.create_connection(data)


@router.put("/connections/{connection_id}", response_model=ConnectionOutput,
            summary="Update Backup Connection")
async def update_connection(
        data: ConnectionUpdate,
        connection_id: str = Path(...),
        backups: BackupUseCases = Depends(get_backup_use_cases),
):
    return await backups.update_connection(connection_id, data)


@router.delete("/connections/{connection_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Delete Backup Connection")
async def delete_connection(
        connection_id: str = Path(...),
        backups: BackupUseCases = Depends(get_backup_use_cases),
):
    await backups.delete_connection(connection_id)


@router.post(
    "/run",
    response_model=List[BackupResult],
    summary="Run Backup - Send the dataset to every active connection",
)
async def run_backup(backups: BackupUseCases = Depends(get_backup_use_cases)):
    return await backups.run_backup()
