"""Food menu service."""

from typing import Annotated

from fastapi import Depends

from foodstall.core.services import CrudService
from foodstall.modules.menus.models import FoodMenu
from foodstall.modules.menus.repos import MenuRepo


class MenuService(CrudService[FoodMenu]):
    resource = "foodMenu"
    label = "Menu"

    def __init__(self, repo: MenuRepo) -> None:
        super().__init__(repo)


MenuSvc = Annotated[MenuService, Depends(MenuService)]
