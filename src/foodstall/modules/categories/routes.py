"""Food category API routes."""

from fastapi import APIRouter, status

from foodstall.core.permissions import require_permission
from foodstall.modules.categories.schemas import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListEnvelope,
    CategoryResponse,
    CategoryUpdate,
)
from foodstall.modules.categories.services import CategorySvc


router = APIRouter(prefix="/category", tags=["categories"])


@router.get(
    "/getAllCategories",
    response_model=CategoryListEnvelope,
    summary="List categories",
    dependencies=[require_permission("foodCategory", "read")],
)
async def get_all_categories(service: CategorySvc) -> CategoryListEnvelope:
    categories = await service.list()
    return CategoryListEnvelope(
        message="Categories retrieved successfully",
        categories=[CategoryResponse.model_validate(c) for c in categories],
    )


@router.get(
    "/getCategoryById/{category_id}",
    response_model=CategoryEnvelope,
    summary="Get a category",
    dependencies=[require_permission("foodCategory", "read")],
)
async def get_category_by_id(
    category_id: str,
    service: CategorySvc,
) -> CategoryEnvelope:
    category = await service.get(category_id)
    return CategoryEnvelope(
        message="Category retrieved successfully",
        category=CategoryResponse.model_validate(category),
    )


@router.post(
    "/createCategory",
    response_model=CategoryEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    dependencies=[require_permission("foodCategory", "create")],
)
async def create_category(
    data: CategoryCreate,
    service: CategorySvc,
) -> CategoryEnvelope:
    category = await service.create(data)
    return CategoryEnvelope(
        message="Category created successfully",
        category=CategoryResponse.model_validate(category),
    )


@router.put(
    "/updateCategory/{category_id}",
    response_model=CategoryEnvelope,
    summary="Update a category",
    description="Partial update: only the supplied fields change.",
    dependencies=[require_permission("foodCategory", "update")],
)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    service: CategorySvc,
) -> CategoryEnvelope:
    category = await service.update(category_id, data)
    return CategoryEnvelope(
        message="Category updated successfully",
        category=CategoryResponse.model_validate(category),
    )


@router.delete(
    "/deleteCategory/{category_id}",
    response_model=CategoryEnvelope,
    summary="Delete a category",
    description="Foods referencing the category keep the dangling reference.",
    dependencies=[require_permission("foodCategory", "delete")],
)
async def delete_category(
    category_id: str,
    service: CategorySvc,
) -> CategoryEnvelope:
    category = await service.delete(category_id)
    return CategoryEnvelope(
        message="Category deleted successfully",
        category=CategoryResponse.model_validate(category),
    )
