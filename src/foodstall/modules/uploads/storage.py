"""Local filesystem storage for uploaded images."""

from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

import structlog
from fastapi import UploadFile

from foodstall.config import Settings
from foodstall.core.constants import IMAGE_EXTENSIONS, UPLOAD_CHUNK_BYTES
from foodstall.core.errors import ValidationError


logger = structlog.get_logger()


@dataclass(frozen=True)
class StoredImage:
    """Where an uploaded image ended up.

    Attributes:
        filename: Generated name of the file inside the upload directory
        url: Public URL clients store in a food's ``img`` field
    """

    filename: str
    url: str


async def save_image(upload: UploadFile, settings: Settings) -> StoredImage:
    """Validate and store an uploaded image under a random filename.

    The extension comes from the content type, so a stored file is
    always served back as an image.

    Args:
        upload: The multipart file
        settings: Settings providing the directory, URL prefix and limits

    Returns:
        The stored image

    Raises:
        ValidationError: If the file is not an allowed image type or is
            larger than the configured maximum
    """
    content_type = upload.content_type or ""
    extension = IMAGE_EXTENSIONS.get(content_type)
    if extension is None or content_type not in settings.allowed_image_types:
        raise ValidationError(
            "Only image files are allowed.",
            error_code="invalid_file_type",
            details={"content_type": content_type, "allowed": settings.allowed_image_types},
        )

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)

    filename = f"{uuid4().hex}{extension}"
    path = upload_dir / filename

    size = 0
    with path.open("wb") as f:
        while chunk := await upload.read(UPLOAD_CHUNK_BYTES):
            size += len(chunk)
            if size > settings.max_upload_bytes:
                break
            f.write(chunk)

    if size > settings.max_upload_bytes:
        path.unlink(missing_ok=True)
        raise ValidationError(
            "File is too large.",
            error_code="file_too_large",
            details={"max_bytes": settings.max_upload_bytes},
        )

    url = f"{settings.upload_url_prefix.rstrip('/')}/{filename}"
    logger.info("image_uploaded", filename=filename, size=size, content_type=content_type)
    return StoredImage(filename=filename, url=url)
