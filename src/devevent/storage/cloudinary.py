"""Cloudinary upload client using the signed upload REST API."""

import hashlib
import time

import httpx
import structlog

from devevent.exceptions import UploadException
from devevent.storage.base import UploadResult

logger = structlog.get_logger(__name__)

CLOUDINARY_API_BASE = "https://api.cloudinary.com/v1_1"


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """
    Compute a Cloudinary request signature.

    Params are sorted by key, joined as ``k=v`` with ``&`` and the secret is
    appended before hashing with SHA-1.
    """
    payload = "&".join(f"{key}={params[key]}" for key in sorted(params) if params[key] != "")
    return hashlib.sha1(f"{payload}{api_secret}".encode()).hexdigest()


class CloudinaryUploader:
    """Uploads images to Cloudinary."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self._client = client
        self.timeout = timeout

    @property
    def upload_url(self) -> str:
        return f"{CLOUDINARY_API_BASE}/{self.cloud_name}/image/upload"

    async def upload(self, data: bytes, filename: str, folder: str) -> UploadResult:
        """Upload image bytes and return the secure delivery URL."""
        params = {"folder": folder, "timestamp": str(int(time.time()))}
        form = {
            **params,
            "api_key": self.api_key,
            "signature": sign_params(params, self.api_secret),
        }

        try:
            if self._client is not None:
                response = await self._post(self._client, form, data, filename)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._post(client, form, data, filename)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("cloudinary_upload_rejected", status=e.response.status_code)
            raise UploadException(
                "Image upload failed",
                details=f"Cloudinary returned HTTP {e.response.status_code}",
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error("cloudinary_upload_failed", error=str(e))
            raise UploadException("Image upload failed", details=str(e)) from e

        secure_url = body.get("secure_url") if isinstance(body, dict) else None
        if not secure_url:
            raise UploadException("Image upload failed", details="Response has no secure_url")

        logger.info("image_uploaded", public_id=body.get("public_id"))
        return UploadResult(secure_url=secure_url, public_id=body.get("public_id"))

    async def _post(
        self, client: httpx.AsyncClient, form: dict[str, str], data: bytes, filename: str
    ) -> httpx.Response:
        return await client.post(
            self.upload_url,
            data=form,
            files={"file": (filename, data)},
        )
