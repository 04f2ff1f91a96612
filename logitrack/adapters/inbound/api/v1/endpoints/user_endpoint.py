# logitrack/adapters/inbound/api/v1/endpoints/user_endpoint.py

import logging
from typing import List
from fastapi import APIRouter, Depends, Path

from logitrack.adapters.inbound.api.deps import get_actor, get_current_user, get_user_use_cases, require_admin
from logitrack.application.dtos import UserOutput, UserSelfUpdate
from logitrack.application.use_cases import UserUseCases
from logitrack.application.use_cases.user_use_cases import to_user_output
from logitrack.domain.models import Actor, User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/me",
    response_model=UserOutput,
    summary="Get My Data - Logged in user data",
    description="Returns the authenticated user data via JWT token.",
)
async def get_my_data(current_user: User = Depends(get_current_user)):
    return to_user_output(current_user)


@router.put(
    "/me",
    response_model=UserOutput,
    summary="Update My Data - Update own profile",
    description="Allows the authenticated user to update name, phone, password and company details.",
)
async def update_my_data(
        update_data: UserSelfUpdate,
        current_user: User = Depends(get_current_user),
        users: UserUseCases = Depends(get_user_use_cases),
):
    """
    Does not allow the user to change their own role or status.
    """
    return await users.update_profile(current_user.id, update_data)


@router.get(
    "/list",
    response_model=List[UserOutput],
    summary="List Users - List all users",
    description="Only administrators have access.",
)
async def list_users(
        admin: User = Depends(require_admin),
        users: UserUseCases = Depends(get_user_use_cases),
):
    return await users.list_users()


@router.post(
    "/{user_id}/toggle-role",
    response_model=UserOutput,
    summary="Toggle Role - Switch a user between ADMIN and USER",
)
async def toggle_role(
        user_id: str = Path(..., description="ID of the user"),
        admin: User = Depends(require_admin),
        actor: Actor = Depends(get_actor),
        users: UserUseCases = Depends(get_user_use_cases),
):
    return await users.toggle_role(actor, user_id)


@router.post(
    "/{user_id}/toggle-status",
    response_model=UserOutput,
    summary="Toggle Status - Block or unblock a user",
    description="Blocked users cannot log in. Administrators cannot block themselves.",
)
async def toggle_status(
        user_id: str = Path(..., description="ID of the user"),
        admin: User = Depends(require_admin),
        actor: Actor = Depends(get_actor),
        users: UserUseCases = Depends(get_user_use_cases),
):
    return await users.toggle_status(actor, user_id)
