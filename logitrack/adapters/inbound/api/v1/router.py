# logitrack/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from logitrack.adapters.inbound.api.v1.endpoints import (
    auth_endpoint,
    backup_endpoint,
    client_endpoint,
    expense_endpoint,
    report_endpoint,
    service_endpoint,
    user_endpoint,
)

api_router = APIRouter()

# Incluir os routers dos endpoints
api_router.include_router(auth_endpoint.router, prefix="/auth", tags=["Auth"])
api_router.include_router(user_endpoint.router, prefix="/users", tags=["User"])
api_router.include_router(client_endpoint.router, prefix="/clients", tags=["Client"])
api_router.include_router(service_endpoint.router, prefix="/services", tags=["Service"])
api_router.include_router(expense_endpoint.router, prefix="/expenses", tags=["Expense"])
api_router.include_router(report_endpoint.router, prefix="/reports", tags=["Report"])
api_router.include_router(backup_endpoint.router, prefix="/backups", tags=["Backup"])
