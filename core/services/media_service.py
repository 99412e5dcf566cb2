"""Image validation, normalization and storage for uploads."""

import uuid
from io import BytesIO

import structlog
from django.core.files.base import ContentFile
from django.core.files.storage import Storage
from PIL import Image, ImageOps, UnidentifiedImageError

from core.constants import (
    ALLOWED_IMAGE_CONTENT_TYPES,
    IMAGE_MAX_DIMENSION,
    IMAGE_WEBP_QUALITY,
)
from core.constants.media import ALLOWED_IMAGE_FORMATS
from core.exceptions import UnsupportedImageError

logger = structlog.get_logger(__name__)


class ImageStorageService:
    """Turns an uploaded image into a stored WebP file and returns its URL.

    Images are rotated according to their EXIF orientation, shrunk to fit
    inside a square of ``max_dimension`` pixels (never enlarged) and
    re-encoded as WebP, which also strips any embedded metadata.
    """

    def __init__(
        self,
        storage: Storage,
        max_bytes: int,
        max_dimension: int = IMAGE_MAX_DIMENSION,
        quality: int = IMAGE_WEBP_QUALITY,
    ) -> None:
        self.storage = storage
        self.max_bytes = max_bytes
        self.max_dimension = max_dimension
        self.quality = quality

    def store(self, upload) -> str:
        """Validate, normalize and save an uploaded image.

        Args:
            upload: Django ``UploadedFile`` (or any file object with
                ``content_type`` and ``size``)

        Returns:
            Public URL of the stored image

        Raises:
            UnsupportedImageError: If the upload is missing, too large, of a
                disallowed type or cannot be decoded
        """
        if upload is None:
            raise UnsupportedImageError("Image file is required")

        content_type = getattr(upload, "content_type", None)
        if content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
            raise UnsupportedImageError("Only JPEG, PNG, and WebP images are allowed")

        if upload.size > self.max_bytes:
            raise UnsupportedImageError(
                f"File too large. Maximum size is {self.max_bytes // (1024 * 1024)}MB"
            )

        data = self._normalize(upload)
        name = self.storage.save(f"{uuid.uuid4().hex}.webp", ContentFile(data))
        url = self.storage.url(name)

        logger.info(
            "Image stored",
            name=name,
            original_content_type=content_type,
            original_size=upload.size,
            stored_size=len(data),
        )
        return url

    def _normalize(self, upload) -> bytes:
        try:
            with Image.open(upload) as image:
                if image.format not in ALLOWED_IMAGE_FORMATS:
                    raise UnsupportedImageError(
                        "Only JPEG, PNG, and WebP images are allowed"
                    )
                image.load()
                normalized = ImageOps.exif_transpose(image)
                normalized.thumbnail((self.max_dimension, self.max_dimension))
                if normalized.mode not in ("RGB", "RGBA"):
                    has_alpha = (
                        "A" in normalized.getbands()
                        or "transparency" in normalized.info
                    )
                    normalized = normalized.convert("RGBA" if has_alpha else "RGB")

                buffer = BytesIO()
                normalized.save(buffer, format="WEBP", quality=self.quality)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            logger.warning("Rejected undecodable image upload", error=str(e))
            raise UnsupportedImageError("Invalid image file") from e

        return buffer.getvalue()

    def discard(self, image_url: str) -> None:
        """Delete an image stored by ``store`` that ended up attached to nothing.

        Args:
            image_url: URL returned by ``store``
        """
        name = image_url.rsplit("/", 1)[-1]
        self.storage.delete(name)
        logger.info("Discarded orphaned image", name=name)
