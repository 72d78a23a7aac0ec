"""Users module: user accounts and their role references."""

from foodstall.modules.users.routes import router


__all__ = ["router"]
