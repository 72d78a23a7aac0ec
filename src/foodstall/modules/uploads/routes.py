"""Image upload route."""

from fastapi import APIRouter, File, UploadFile, status

from foodstall.config import settings
from foodstall.core.auth.dependencies import CurrentSession
from foodstall.core.constants import UPLOAD_FIELD_NAME
from foodstall.modules.uploads.schemas import ImageRef, UploadResponse
from foodstall.modules.uploads.storage import save_image


router = APIRouter(tags=["uploads"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload an image",
    description=(
        "Accepts a single multipart field named img. The returned url is what "
        "a food's img field should hold."
    ),
)
async def upload_image(
    identity: CurrentSession,  # noqa: ARG001
    upload: UploadFile = File(..., alias=UPLOAD_FIELD_NAME),
) -> UploadResponse:
    stored = await save_image(upload, settings)
    return UploadResponse(
        message="Image uploaded successfully",
        img=ImageRef(url=stored.url, filename=stored.filename),
    )
