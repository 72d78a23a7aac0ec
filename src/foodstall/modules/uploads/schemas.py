"""Pydantic schemas for uploads."""

from pydantic import BaseModel


class ImageRef(BaseModel):
    url: str
    filename: str


class UploadResponse(BaseModel):
    """Response for a stored image."""

    message: str
    img: ImageRef
