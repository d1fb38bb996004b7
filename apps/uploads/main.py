"""
Uploads API

Image upload pass-through to object storage.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from apps.shared.errors import ValidationError
from apps.shared.responses import success_response
from apps.uploads.service import ImageUploadService
from apps.uploads.storage import LocalObjectStorage, ObjectStorage

router = APIRouter(prefix="/upload", tags=["upload"])


def get_object_storage() -> ObjectStorage:
    return LocalObjectStorage()


def get_upload_service(storage: ObjectStorage = Depends(get_object_storage)) -> ImageUploadService:
    return ImageUploadService(storage)


@router.get("")
async def list_images(service: ImageUploadService = Depends(get_upload_service)):
    """List all uploaded images, newest first."""
    images = await service.list()
    return success_response(images, f"Retrieved {len(images)} images")


@router.post("", status_code=201)
async def upload_image(
    image: Optional[UploadFile] = File(None),
    service: ImageUploadService = Depends(get_upload_service),
):
    """
    Upload an image (multipart field "image").
    Returns the generated filename and its public URL.
    """
    if image is None:
        raise ValidationError("No image file provided")

    contents = await image.read()
    result = await service.upload(image.filename, image.content_type, contents)
    return success_response(result, "Image uploaded successfully", status_code=201)


@router.delete("/{filename}")
async def delete_image(
    filename: str,
    service: ImageUploadService = Depends(get_upload_service),
):
    await service.delete(filename)
    return success_response(None, f"Image {filename} deleted successfully")
