"""Uploads module: image storage for food pictures."""

from foodstall.modules.uploads.routes import router


__all__ = ["router"]
