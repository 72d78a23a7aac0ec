"""Food repository."""

from typing import Annotated

from fastapi import Depends

from foodstall.core.database import Repository
from foodstall.modules.foods.models import Food


class FoodRepository(Repository[Food]):
    """Repository for Food database operations."""

    model = Food


FoodRepo = Annotated[FoodRepository, Depends(FoodRepository)]
