"""
Image upload rules.

Checks content type, size and file names before anything reaches object
storage, and maps storage failures onto StorageError.
"""
import random
import re
import time
from typing import Optional

from apps.shared.errors import (
    NotFoundError,
    StorageError,
    ValidationError,
    log_and_sanitize_error,
)
from apps.uploads.schemas import ImageUploadResponse, StoredImage
from apps.uploads.storage import ObjectStorage

ALLOWED_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}
MAX_FILE_SIZE = 5 * 1024 * 1024  # 5 MB

EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}

# Only names we could have generated; blocks path traversal
FILENAME_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]+\.(jpg|jpeg|png|webp)$", re.IGNORECASE)


def generate_filename(original_name: Optional[str], content_type: str) -> str:
    """Build image-<epoch ms>-<random>.<ext>, keeping a known extension when given."""
    ext = ""
    if original_name and "." in original_name:
        ext = original_name.rsplit(".", 1)[-1].lower()
    if ext not in EXTENSIONS.values() and ext != "jpeg":
        ext = EXTENSIONS.get(content_type, "jpg")

    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"image-{unique_suffix}.{ext}"


class ImageUploadService:
    def __init__(self, storage: ObjectStorage):
        self.storage = storage

    async def upload(
        self,
        original_name: Optional[str],
        content_type: Optional[str],
        data: bytes,
    ) -> ImageUploadResponse:
        if content_type not in ALLOWED_TYPES:
            raise ValidationError("Only image files (JPEG, PNG, WebP) are allowed")
        if len(data) > MAX_FILE_SIZE:
            raise ValidationError(
                f"File size must be less than {MAX_FILE_SIZE // (1024 * 1024)}MB"
            )
        if not data:
            raise ValidationError("Uploaded image is empty")

        filename = generate_filename(original_name, content_type)
        try:
            url = await self.storage.put_object(filename, data, content_type)
        except Exception as e:
            sanitized, _ = log_and_sanitize_error(e, f"upload image {filename}", "Failed to upload image")
            raise StorageError(sanitized) from e

        return ImageUploadResponse(filename=filename, url=url)

    async def list(self) -> list[StoredImage]:
        try:
            return await self.storage.list_objects()
        except Exception as e:
            sanitized, _ = log_and_sanitize_error(e, "list images", "Failed to fetch images")
            raise StorageError(sanitized) from e

    async def delete(self, filename: str) -> None:
        if not FILENAME_PATTERN.match(filename):
            raise ValidationError("Invalid filename")

        try:
            deleted = await self.storage.delete_object(filename)
        except Exception as e:
            sanitized, _ = log_and_sanitize_error(e, f"delete image {filename}", "Failed to delete image")
            raise StorageError(sanitized) from e

        if not deleted:
            raise NotFoundError(f"File {filename} not found")
