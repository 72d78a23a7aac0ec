"""User management API routes."""

from fastapi import APIRouter

from foodstall.core.permissions import require_permission
from foodstall.modules.users.schemas import (
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
    UserUpdate,
)
from foodstall.modules.users.services import UserSvc


router = APIRouter(prefix="/user", tags=["users"])


@router.get(
    "/getAllUsers",
    response_model=UserListEnvelope,
    summary="List users",
    dependencies=[require_permission("user", "read")],
)
async def get_all_users(service: UserSvc) -> UserListEnvelope:
    users = await service.list()
    return UserListEnvelope(
        message="User details retrieved successfully.",
        users=[UserResponse.model_validate(user) for user in users],
    )


@router.get(
    "/getUserById/{user_id}",
    response_model=UserEnvelope,
    summary="Get a user",
    dependencies=[require_permission("user", "read")],
)
async def get_user_by_id(
    user_id: str,
    service: UserSvc,
) -> UserEnvelope:
    user = await service.get(user_id)
    return UserEnvelope(
        message="User details retrieved successfully.",
        user=UserResponse.model_validate(user),
    )


@router.put(
    "/updateUser/{user_id}",
    response_model=UserEnvelope,
    summary="Update a user",
    description="Partial update of email, role (by name) and password.",
    dependencies=[require_permission("user", "update")],
)
async def update_user(
    user_id: str,
    data: UserUpdate,
    service: UserSvc,
) -> UserEnvelope:
    user = await service.update_user(user_id, data)
    return UserEnvelope(
        message="User updated successfully.",
        user=UserResponse.model_validate(user),
    )


@router.delete(
    "/deleteUser/{user_id}",
    response_model=UserEnvelope,
    summary="Delete a user",
    dependencies=[require_permission("user", "delete")],
)
async def delete_user(
    user_id: str,
    service: UserSvc,
) -> UserEnvelope:
    user = await service.delete(user_id)
    return UserEnvelope(
        message="User deleted successfully.",
        user=UserResponse.model_validate(user),
    )
