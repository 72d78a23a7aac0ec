"""Foods module: items sold at the stall."""

from foodstall.modules.foods.routes import router


__all__ = ["router"]
