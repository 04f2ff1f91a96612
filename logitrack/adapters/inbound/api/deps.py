# logitrack/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for authentication, authorization and access to the
storage backend and use cases built at startup.
"""

import logging
from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from logitrack.adapters.outbound.security.auth_user_manager import UserAuthManager
from logitrack.application.ports.outbound import IDatabaseAdapter
from logitrack.application.use_cases import (
    BackupUseCases,
    ClientUseCases,
    ExpenseUseCases,
    ReportUseCases,
    ServiceUseCases,
    UserUseCases,
)
from logitrack.domain.exceptions import PermissionDeniedException, ResourceNotFoundException
from logitrack.domain.models import Actor, User

# Configure logger
logger = logging.getLogger(__name__)

# Create bearer scheme for authentication
bearer_scheme = HTTPBearer()


########################################################################
# Storage and use cases
########################################################################

def get_adapter(request: Request) -> IDatabaseAdapter:
    return request.app.state.adapter


def get_user_use_cases(adapter: IDatabaseAdapter = Depends(get_adapter)) -> UserUseCases:
    return UserUseCases(adapter)


def get_client_use_cases(adapter: IDatabaseAdapter = Depends(get_adapter)) -> ClientUseCases:
    return ClientUseCases(adapter)


def get_service_use_cases(adapter: IDatabaseAdapter = Depends(get_adapter)) -> ServiceUseCases:
    return ServiceUseCases(adapter)


def get_expense_use_cases(adapter: IDatabaseAdapter = Depends(get_adapter)) -> ExpenseUseCases:
    return ExpenseUseCases(adapter)


def get_report_use_cases(adapter: IDatabaseAdapter = Depends(get_adapter)) -> ReportUseCases:
    return ReportUseCases(adapter)


def get_backup_use_cases(request: Request, adapter: IDatabaseAdapter = Depends(get_adapter)) -> BackupUseCases:
    return BackupUseCases(
        connections=request.app.state.backup_connections,
        adapter=adapter,
        client=request.app.state.backup_client,
    )


########################################################################
# User Token Authentication
########################################################################

async def get_current_user(
        credentials: HTTPAuthorizationCredentials = Security(bearer_scheme),
        users: UserUseCases = Depends(get_user_use_cases),
) -> User:
    """
    Get the current user from the token.

    Args:
        credentials: Authorization credentials with bearer token
        users: User use cases bound to the configured backend

    Returns:
        Authenticated User

    Raises:
        InvalidCredentialsException: If the token is invalid or expired
        HTTPException: If the user doesn't exist or is blocked
    """
    payload = await UserAuthManager.verify_access_token(credentials.credentials)

    try:
        user = await users.get_user(payload["sub"])
    except ResourceNotFoundException:
        logger.warning(f"Token for unknown user {payload['sub']}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found.",
        )

    if user.is_blocked:
        logger.warning(f"Blocked user {user.id} tried to access the API")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User is blocked.",
        )
    return user


async def get_actor(current_user: User = Depends(get_current_user)) -> Actor:
    """The authenticated user as the author of the operation."""
    return Actor(name=current_user.name, id=current_user.id)


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        logger.warning(f"User {current_user.id} tried to access an admin resource")
        raise PermissionDeniedException(detail="Acesso restrito a administradores")
    return current_user
