"""Food category repository."""

from typing import Annotated

from fastapi import Depends

from foodstall.core.database import Repository
from foodstall.modules.categories.models import FoodCategory


class CategoryRepository(Repository[FoodCategory]):
    """Repository for FoodCategory database operations."""

    model = FoodCategory


CategoryRepo = Annotated[CategoryRepository, Depends(CategoryRepository)]
