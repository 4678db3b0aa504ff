"""Local file system image storage."""

import asyncio
import hashlib
from pathlib import Path, PurePosixPath

import structlog

from devevent.exceptions import UploadException
from devevent.storage.base import UploadResult

logger = structlog.get_logger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg"}


class LocalImageUploader:
    """Stores images under images_dir and serves them from /images."""

    def __init__(self, images_dir: Path, base_url: str) -> None:
        self.images_dir = images_dir
        self.base_url = base_url.rstrip("/")

    def ensure_directories(self) -> None:
        """Ensure the image root exists."""
        self.images_dir.mkdir(parents=True, exist_ok=True)

    def get_image_path(self, folder: str, name: str) -> Path:
        return self.images_dir / folder / name

    async def upload(self, data: bytes, filename: str, folder: str) -> UploadResult:
        """Write the image under a content-hash name and return its URL."""
        extension = PurePosixPath(filename).suffix.lower()
        if extension not in ALLOWED_EXTENSIONS:
            extension = ".jpg"
        content_hash = hashlib.sha256(data).hexdigest()[:16]
        name = f"{content_hash}{extension}"
        path = self.get_image_path(folder, name)

        try:
            await asyncio.to_thread(self._write, path, data)
        except OSError as e:
            logger.error("image_write_failed", path=str(path), error=str(e))
            raise UploadException("Image upload failed", details=str(e)) from e

        public_id = f"{folder}/{name}"
        logger.info("image_stored", public_id=public_id, size=len(data))
        return UploadResult(secure_url=f"{self.base_url}/images/{public_id}", public_id=public_id)

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def resolve_image_path(self, relative_path: str) -> Path | None:
        """
        Resolve a relative image path to an absolute path.

        Args:
            relative_path: Path like 'DevEvent/abc123.png'

        Returns:
            Absolute path if valid, None otherwise.
        """
        # Prevent path traversal
        if ".." in relative_path:
            return None

        full_path = self.images_dir / relative_path
        if not full_path.is_file():
            return None

        # Ensure the path is within images_dir
        try:
            full_path.resolve().relative_to(self.images_dir.resolve())
        except ValueError:
            return None

        return full_path
