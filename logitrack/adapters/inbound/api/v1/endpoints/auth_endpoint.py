# logitrack/adapters/inbound/api/v1/endpoints/auth_endpoint.py

import logging
from fastapi import APIRouter, Depends, status

from logitrack.adapters.inbound.api.deps import get_user_use_cases
from logitrack.application.dtos import TokenData, UserCreate, UserLogin, UserOutput
from logitrack.application.use_cases import UserUseCases

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/register",
    response_model=UserOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Register User - Creates a new user",
    description="""
    Creates a new user account with role USER and status ACTIVE.

    The password must have at least 6 characters.
    """,
    responses={
        409: {
            "description": "Email already in use",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "User with email 'user@logitrack.com' already exists"
                    }
                }
            }
        }
    }
)
async def register(
        user_data: UserCreate,
        users: UserUseCases = Depends(get_user_use_cases),
):
    return await users.register_user(user_data)


@router.post(
    "/login",
    response_model=TokenData,
    summary="Login - Authenticates with email and password",
    description="Returns a bearer token to be sent in the Authorization header.",
    responses={
        401: {
            "description": "Invalid credentials",
            "content": {"application/json": {"example": {"detail": "Email ou senha inválidos"}}}
        },
        400: {
            "description": "Blocked user",
            "content": {"application/json": {"example": {"detail": "Acesso bloqueado. Contate o administrador."}}}
        }
    }
)
async def login(
        credentials: UserLogin,
        users: UserUseCases = Depends(get_user_use_cases),
):
    return await users.authenticate_user(credentials.email, credentials.password)
