"""Food service."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends

from foodstall.core.database import parse_identifier
from foodstall.core.errors import NotFoundError
from foodstall.core.services import CrudService
from foodstall.modules.categories.repos import CategoryRepo, CategoryRepository
from foodstall.modules.foods.models import Food
from foodstall.modules.foods.repos import FoodRepo


class FoodService(CrudService[Food]):
    """Service for food management.

    The category reference must resolve when a food is written. The
    check and the write are separate statements; a category deleted in
    between is not detected.
    """

    resource = "food"
    label = "Food item"

    def __init__(self, repo: FoodRepo, categories: CategoryRepo) -> None:
        super().__init__(repo)
        self.categories: CategoryRepository = categories

    async def _resolve_category(self, identifier: str) -> UUID:
        category_id = parse_identifier(identifier)
        if category_id is None or not await self.categories.exists(category_id):
            raise NotFoundError(
                "Category not found. Please provide a valid category ID.",
                resource="foodCategory",
                resource_id=identifier,
            )
        return category_id

    async def before_create(self, fields: dict[str, Any]) -> None:
        fields["category"] = await self._resolve_category(fields["category"])

    async def before_update(self, document: Food, changes: dict[str, Any]) -> None:
        if "category" in changes:
            changes["category"] = await self._resolve_category(changes["category"])


FoodSvc = Annotated[FoodService, Depends(FoodService)]
