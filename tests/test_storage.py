"""Image storage tests."""

import httpx
import pytest

from devevent.config import Settings
from devevent.exceptions import ConfigurationException, UploadException
from devevent.storage import CloudinaryUploader, LocalImageUploader, get_uploader, sign_params


class TestLocalImageUploader:
    """Local file system uploader tests."""

    @pytest.mark.asyncio
    async def test_upload_writes_file(self, tmp_path):
        uploader = LocalImageUploader(tmp_path, "http://localhost:8000/")

        result = await uploader.upload(b"image-bytes", "Poster.PNG", "DevEvent")

        assert result.secure_url.startswith("http://localhost:8000/images/DevEvent/")
        assert result.secure_url.endswith(".png")
        stored = uploader.resolve_image_path(result.public_id)
        assert stored is not None
        assert stored.read_bytes() == b"image-bytes"

    @pytest.mark.asyncio
    async def test_same_content_same_name(self, tmp_path):
        uploader = LocalImageUploader(tmp_path, "http://localhost:8000")

        first = await uploader.upload(b"same", "a.jpg", "DevEvent")
        second = await uploader.upload(b"same", "b.jpg", "DevEvent")

        assert first.secure_url == second.secure_url

    @pytest.mark.asyncio
    async def test_unknown_extension_defaults_to_jpg(self, tmp_path):
        uploader = LocalImageUploader(tmp_path, "http://localhost:8000")

        result = await uploader.upload(b"data", "poster.exe", "DevEvent")

        assert result.secure_url.endswith(".jpg")

    def test_resolve_rejects_traversal(self, tmp_path):
        (tmp_path / "secret.txt").write_text("secret")
        uploader = LocalImageUploader(tmp_path / "images", "http://localhost:8000")

        assert uploader.resolve_image_path("../secret.txt") is None

    def test_resolve_missing_file(self, tmp_path):
        uploader = LocalImageUploader(tmp_path, "http://localhost:8000")

        assert uploader.resolve_image_path("DevEvent/missing.png") is None


class TestCloudinaryUploader:
    """Cloudinary upload client tests."""

    def test_sign_params(self):
        signature = sign_params({"folder": "DevEvent", "timestamp": "1315060510"}, "abcd")

        assert signature == "a25b5d69cb7fe2e8328c2a5666a8578ccd13650c"

    @pytest.mark.asyncio
    async def test_upload_success(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = request.content
            return httpx.Response(
                200,
                json={"secure_url": "https://res.cloudinary.com/demo/poster.png", "public_id": "DevEvent/poster"},
            )

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            uploader = CloudinaryUploader("demo", "key", "secret", client=client)
            result = await uploader.upload(b"image-bytes", "poster.png", "DevEvent")

        assert result.secure_url == "https://res.cloudinary.com/demo/poster.png"
        assert result.public_id == "DevEvent/poster"
        assert seen["url"] == "https://api.cloudinary.com/v1_1/demo/image/upload"
        assert b"image-bytes" in seen["body"]
        assert b'name="signature"' in seen["body"]

    @pytest.mark.asyncio
    async def test_upload_rejected(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(401, json={"error": {"message": "bad"}}))

        async with httpx.AsyncClient(transport=transport) as client:
            uploader = CloudinaryUploader("demo", "key", "secret", client=client)
            with pytest.raises(UploadException) as exc_info:
                await uploader.upload(b"image-bytes", "poster.png", "DevEvent")

        assert exc_info.value.status_code == 500
        assert "401" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_upload_without_secure_url(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"public_id": "x"}))

        async with httpx.AsyncClient(transport=transport) as client:
            uploader = CloudinaryUploader("demo", "key", "secret", client=client)
            with pytest.raises(UploadException):
                await uploader.upload(b"image-bytes", "poster.png", "DevEvent")

    @pytest.mark.asyncio
    async def test_upload_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            uploader = CloudinaryUploader("demo", "key", "secret", client=client)
            with pytest.raises(UploadException):
                await uploader.upload(b"image-bytes", "poster.png", "DevEvent")


class TestGetUploader:
    """Uploader selection tests."""

    def test_local_by_default(self, tmp_path):
        uploader = get_uploader(Settings(images_dir=str(tmp_path), upload_backend="local"))

        assert isinstance(uploader, LocalImageUploader)

    def test_cloudinary_requires_credentials(self):
        with pytest.raises(ConfigurationException):
            get_uploader(
                Settings(
                    upload_backend="cloudinary",
                    cloudinary_cloud_name="",
                    cloudinary_api_key="",
                    cloudinary_api_secret="",
                )
            )

    def test_cloudinary_when_configured(self):
        uploader = get_uploader(
            Settings(
                upload_backend="cloudinary",
                cloudinary_cloud_name="demo",
                cloudinary_api_key="key",
                cloudinary_api_secret="secret",
            )
        )

        assert isinstance(uploader, CloudinaryUploader)
