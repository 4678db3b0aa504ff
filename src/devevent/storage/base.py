"""Image uploader protocol shared by the storage backends."""

from typing import Protocol

from pydantic import BaseModel


class UploadResult(BaseModel):
    secure_url: str
    public_id: str | None = None


class ImageUploader(Protocol):
    """Anything that can take image bytes and hand back a public URL."""

    async def upload(self, data: bytes, filename: str, folder: str) -> UploadResult:
        ...
