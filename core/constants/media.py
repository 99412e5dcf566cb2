"""Image upload constraints."""

ALLOWED_IMAGE_CONTENT_TYPES = frozenset({"image/jpeg", "image/png", "image/webp"})

# Pillow format names accepted after decoding, independent of the declared type
ALLOWED_IMAGE_FORMATS = frozenset({"JPEG", "PNG", "WEBP"})

IMAGE_MAX_DIMENSION = 1200  # px, both axes
IMAGE_WEBP_QUALITY = 80
