"""Food menu API routes."""

from fastapi import APIRouter, status

from foodstall.core.permissions import require_permission
from foodstall.modules.menus.schemas import (
    MenuCreate,
    MenuEnvelope,
    MenuListEnvelope,
    MenuResponse,
    MenuUpdate,
)
from foodstall.modules.menus.services import MenuSvc


router = APIRouter(prefix="/menu", tags=["menus"])


@router.get(
    "/getAllMenus",
    response_model=MenuListEnvelope,
    summary="List menus",
    dependencies=[require_permission("foodMenu", "read")],
)
async def get_all_menus(service: MenuSvc) -> MenuListEnvelope:
    menus = await service.list()
    return MenuListEnvelope(
        message="Menus retrieved successfully",
        menus=[MenuResponse.model_validate(menu) for menu in menus],
    )


@router.get(
    "/getMenuById/{menu_id}",
    response_model=MenuEnvelope,
    summary="Get a menu",
    dependencies=[require_permission("foodMenu", "read")],
)
async def get_menu_by_id(
    menu_id: str,
    service: MenuSvc,
) -> MenuEnvelope:
    menu = await service.get(menu_id)
    return MenuEnvelope(
        message="Menu retrieved successfully",
        menu=MenuResponse.model_validate(menu),
    )


@router.post(
    "/createMenu",
    response_model=MenuEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a menu",
    dependencies=[require_permission("foodMenu", "create")],
)
async def create_menu(
    data: MenuCreate,
    service: MenuSvc,
) -> MenuEnvelope:
    menu = await service.create(data)
    return MenuEnvelope(
        message="Menu created successfully",
        menu=MenuResponse.model_validate(menu),
    )


@router.put(
    "/updateMenu/{menu_id}",
    response_model=MenuEnvelope,
    summary="Update a menu",
    description="Requires the full field set.",
    dependencies=[require_permission("foodMenu", "update")],
)
async def update_menu(
    menu_id: str,
    data: MenuUpdate,
    service: MenuSvc,
) -> MenuEnvelope:
    menu = await service.update(menu_id, data)
    return MenuEnvelope(
        message="Menu updated successfully",
        menu=MenuResponse.model_validate(menu),
    )


@router.delete(
    "/deleteMenu/{menu_id}",
    response_model=MenuEnvelope,
    summary="Delete a menu",
    dependencies=[require_permission("foodMenu", "delete")],
)
async def delete_menu(
    menu_id: str,
    service: MenuSvc,
) -> MenuEnvelope:
    menu = await service.delete(menu_id)
    return MenuEnvelope(
        message="Menu deleted successfully",
        menu=MenuResponse.model_validate(menu),
    )
