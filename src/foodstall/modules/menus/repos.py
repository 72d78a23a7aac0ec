"""Food menu repository."""

from typing import Annotated

from fastapi import Depends

from foodstall.core.database import Repository
from foodstall.modules.menus.models import FoodMenu


class MenuRepository(Repository[FoodMenu]):
    """Repository for FoodMenu database operations."""

    model = FoodMenu


MenuRepo = Annotated[MenuRepository, Depends(MenuRepository)]
