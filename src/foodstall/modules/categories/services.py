"""Food category service."""

from typing import Annotated

from fastapi import Depends

from foodstall.core.services import CrudService
from foodstall.modules.categories.models import FoodCategory
from foodstall.modules.categories.repos import CategoryRepo


class CategoryService(CrudService[FoodCategory]):
    """Service for food category management."""

    resource = "foodCategory"
    label = "Category"

    def __init__(self, repo: CategoryRepo) -> None:
        super().__init__(repo)


CategorySvc = Annotated[CategoryService, Depends(CategoryService)]
