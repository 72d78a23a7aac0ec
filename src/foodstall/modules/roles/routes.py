"""Role API routes."""

from fastapi import APIRouter, status

from foodstall.core.permissions import require_permission
from foodstall.modules.roles.schemas import (
    RoleCreate,
    RoleEnvelope,
    RoleListEnvelope,
    RoleResponse,
    RoleUpdate,
)
from foodstall.modules.roles.services import RoleSvc


router = APIRouter(prefix="/role", tags=["roles"])


@router.get(
    "/getAllRoles",
    response_model=RoleListEnvelope,
    summary="List roles",
    dependencies=[require_permission("role", "read")],
)
async def get_all_roles(service: RoleSvc) -> RoleListEnvelope:
    roles = await service.list()
    return RoleListEnvelope(
        message="Roles retrieved successfully",
        roles=[RoleResponse.model_validate(role) for role in roles],
    )


@router.get(
    "/getRoleById/{role_id}",
    response_model=RoleEnvelope,
    summary="Get a role",
    dependencies=[require_permission("role", "read")],
)
async def get_role_by_id(
    role_id: str,
    service: RoleSvc,
) -> RoleEnvelope:
    role = await service.get(role_id)
    return RoleEnvelope(
        message="Role retrieved successfully",
        role=RoleResponse.model_validate(role),
    )


@router.post(
    "/createRole",
    response_model=RoleEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a role",
    description="Role names are unique. Unlisted resources are granted no actions.",
    dependencies=[require_permission("role", "create")],
)
async def create_role(
    data: RoleCreate,
    service: RoleSvc,
) -> RoleEnvelope:
    role = await service.create(data)
    return RoleEnvelope(
        message="Role created successfully",
        role=RoleResponse.model_validate(role),
    )


@router.put(
    "/updateRole/{role_id}",
    response_model=RoleEnvelope,
    summary="Update a role",
    description="A supplied permissions mapping replaces the stored mapping.",
    dependencies=[require_permission("role", "update")],
)
async def update_role(
    role_id: str,
    data: RoleUpdate,
    service: RoleSvc,
) -> RoleEnvelope:
    role = await service.update(role_id, data)
    return RoleEnvelope(
        message="Role updated successfully",
        role=RoleResponse.model_validate(role),
    )


@router.delete(
    "/deleteRole/{role_id}",
    response_model=RoleEnvelope,
    summary="Delete a role",
    description="Users referencing the role are left as they are.",
    dependencies=[require_permission("role", "delete")],
)
async def delete_role(
    role_id: str,
    service: RoleSvc,
) -> RoleEnvelope:
    role = await service.delete(role_id)
    return RoleEnvelope(
        message="Role deleted successfully",
        role=RoleResponse.model_validate(role),
    )
