"""Pydantic schemas for the image upload API."""
from datetime import datetime

from apps.content.schemas import CamelModel


class ImageUploadResponse(CamelModel):
    """Response after successful image upload."""
    filename: str
    url: str


class StoredImage(CamelModel):
    """An image already present in object storage."""
    filename: str
    url: str
    upload_date: datetime
