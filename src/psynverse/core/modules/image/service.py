import asyncio
from io import BytesIO
from typing import Any

import cloudinary.uploader
import structlog
from cloudinary.exceptions import Error as CloudinaryError

from psynverse.core.core import Service
from psynverse.core.modules.image.models import CloudinaryCredentials, LocalImageFile, UploadedImage
from psynverse.core.modules.image.utils import (
    guess_media_type,
    is_valid_image,
    parse_cloudinary_url,
    resolve_folder,
    safe_image_path,
)
from psynverse.errors import ConfigurationError, NotFoundError, PayloadTooLargeError, UpstreamError, ValidationError

logger = structlog.get_logger(__name__)


class ImageService(Service):
    """Proxies admin image uploads to Cloudinary and serves locally stored book covers."""

    def _credentials(self) -> CloudinaryCredentials:
        if not self.core.config.cloudinary_url:
            raise ConfigurationError("PSYNVERSE_CLOUDINARY_URL is not configured")
        return parse_cloudinary_url(self.core.config.cloudinary_url)

    async def upload_image(self, content: bytes, content_type: str | None, folder: str | None = None) -> UploadedImage:
        """Validate an uploaded image and push it to the image host.

        Raises:
            ConfigurationError: If the image host is not configured
            ValidationError: If the upload is not an image
            PayloadTooLargeError: If the upload exceeds the size limit
            UpstreamError: If the image host rejects or fails the upload
        """
        credentials = self._credentials()
        max_bytes = self.core.config.max_upload_bytes

        if not content_type or not content_type.startswith("image/"):
            raise ValidationError("Only image uploads are allowed")
        if len(content) > max_bytes:
            raise PayloadTooLargeError(f"Image must be {max_bytes // (1024 * 1024)}MB or smaller")
        if not content or not is_valid_image(content):
            raise ValidationError("Uploaded file is not a readable image")

        target_folder = resolve_folder(folder)
        try:
            result: dict[str, Any] = await asyncio.to_thread(
                cloudinary.uploader.upload,
                BytesIO(content),
                folder=target_folder,
                resource_type="image",
                cloud_name=credentials.cloud_name,
                api_key=credentials.api_key,
                api_secret=credentials.api_secret,
            )
        except CloudinaryError as e:
            logger.exception("image_upload_failed", folder=target_folder, error=str(e))
            raise UpstreamError("Failed to upload image") from e
        except Exception as e:
            logger.exception("image_upload_error", folder=target_folder, error=str(e))
            raise UpstreamError("Failed to upload image") from e

        if not result.get("secure_url"):
            logger.error("image_upload_failed", folder=target_folder, error="missing secure_url")
            raise UpstreamError("Failed to upload image")

        logger.info("image_uploaded", folder=target_folder, public_id=result.get("public_id"), size=len(content))
        return UploadedImage(
            url=result["secure_url"],
            public_id=result.get("public_id", ""),
            width=result.get("width"),
            height=result.get("height"),
        )

    def get_book_image(self, filename: str) -> LocalImageFile:
        """Resolve a locally stored book cover by file name."""
        path = safe_image_path(self.core.config.book_images_path, filename)
        if path is None or not path.is_file():
            raise NotFoundError("Not found")
        return LocalImageFile(file_path=path, media_type=guess_media_type(path))
