"""Menus module: navigable menu entries."""

from foodstall.modules.menus.routes import router


__all__ = ["router"]
