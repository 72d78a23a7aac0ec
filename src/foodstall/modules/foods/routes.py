"""Food API routes."""

from fastapi import APIRouter, status

from foodstall.core.permissions import require_permission
from foodstall.modules.foods.schemas import (
    FoodCreate,
    FoodEnvelope,
    FoodListEnvelope,
    FoodResponse,
    FoodUpdate,
)
from foodstall.modules.foods.services import FoodSvc


router = APIRouter(prefix="/food", tags=["foods"])


@router.get(
    "/getAllFoods",
    response_model=FoodListEnvelope,
    summary="List foods",
    dependencies=[require_permission("food", "read")],
)
async def get_all_foods(service: FoodSvc) -> FoodListEnvelope:
    foods = await service.list()
    return FoodListEnvelope(
        message="Foods retrieved successfully",
        foods=[FoodResponse.model_validate(food) for food in foods],
    )


@router.get(
    "/getFoodById/{food_id}",
    response_model=FoodEnvelope,
    summary="Get a food",
    dependencies=[require_permission("food", "read")],
)
async def get_food_by_id(
    food_id: str,
    service: FoodSvc,
) -> FoodEnvelope:
    food = await service.get(food_id)
    return FoodEnvelope(
        message="Food retrieved successfully",
        food=FoodResponse.model_validate(food),
    )


@router.post(
    "/createFood",
    response_model=FoodEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a food",
    description="The category must exist. Upload the image first and pass its URL as img.",
    dependencies=[require_permission("food", "create")],
)
async def create_food(
    data: FoodCreate,
    service: FoodSvc,
) -> FoodEnvelope:
    food = await service.create(data)
    return FoodEnvelope(
        message="Food created successfully",
        food=FoodResponse.model_validate(food),
    )


@router.put(
    "/updateFood/{food_id}",
    response_model=FoodEnvelope,
    summary="Update a food",
    description="Requires the full field set; the category must exist.",
    dependencies=[require_permission("food", "update")],
)
async def update_food(
    food_id: str,
    data: FoodUpdate,
    service: FoodSvc,
) -> FoodEnvelope:
    food = await service.update(food_id, data)
    return FoodEnvelope(
        message="Food updated successfully",
        food=FoodResponse.model_validate(food),
    )


@router.delete(
    "/deleteFood/{food_id}",
    response_model=FoodEnvelope,
    summary="Delete a food",
    dependencies=[require_permission("food", "delete")],
)
async def delete_food(
    food_id: str,
    service: FoodSvc,
) -> FoodEnvelope:
    food = await service.delete(food_id)
    return FoodEnvelope(
        message="Food deleted successfully",
        food=FoodResponse.model_validate(food),
    )
