"""Roles module: named permission bundles."""

from foodstall.modules.roles.routes import router


__all__ = ["router"]
