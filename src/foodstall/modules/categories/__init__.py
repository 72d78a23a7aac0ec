"""Categories module: groupings of foods."""

from foodstall.modules.categories.routes import router


__all__ = ["router"]
