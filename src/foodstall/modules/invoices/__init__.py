"""Invoices module: sales records."""

from foodstall.modules.invoices.routes import router


__all__ = ["router"]
