"""Serve images written by the local uploader."""

import mimetypes

from fastapi import APIRouter
from fastapi.responses import FileResponse

from devevent.config import get_settings
from devevent.exceptions import ImageNotFoundException
from devevent.models.errors import ErrorResponse
from devevent.storage import LocalImageUploader

router = APIRouter(tags=["images"])


@router.get(
    "/images/{path:path}",
    responses={
        200: {"content": {"image/*": {}}, "description": "Image file"},
        404: {"model": ErrorResponse},
    },
)
async def get_image(path: str) -> FileResponse:
    """Get an uploaded image file."""
    settings = get_settings()
    storage = LocalImageUploader(settings.images_path, settings.base_url)

    file_path = storage.resolve_image_path(path)
    if file_path is None:
        raise ImageNotFoundException("Image not found")

    media_type, _ = mimetypes.guess_type(file_path.name)
    return FileResponse(file_path, media_type=media_type or "application/octet-stream")
