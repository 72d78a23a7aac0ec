"""Employees module: stall staff records."""

from foodstall.modules.employees.routes import router


__all__ = ["router"]
