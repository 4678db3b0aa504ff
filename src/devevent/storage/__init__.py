from devevent.config import Settings
from devevent.exceptions import ConfigurationException
from devevent.storage.base import ImageUploader, UploadResult
from devevent.storage.cloudinary import CloudinaryUploader, sign_params
from devevent.storage.local import LocalImageUploader


def get_uploader(settings: Settings) -> ImageUploader:
    """Build the uploader selected by UPLOAD_BACKEND."""
    if settings.upload_backend == "cloudinary":
        if not (
            settings.cloudinary_cloud_name
            and settings.cloudinary_api_key
            and settings.cloudinary_api_secret
        ):
            raise ConfigurationException("Cloudinary credentials are not configured")
        return CloudinaryUploader(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
        )
    return LocalImageUploader(settings.images_path, settings.base_url)


__all__ = [
    "ImageUploader",
    "UploadResult",
    "CloudinaryUploader",
    "LocalImageUploader",
    "get_uploader",
    "sign_params",
]
