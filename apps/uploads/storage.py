"""
Object storage for uploaded images.

ObjectStorage is the contract the upload service depends on. The bundled
implementation writes to a local directory that is served from
UPLOAD_BASE_URL (e.g. by the reverse proxy).
"""
import logging
import os
from datetime import datetime, timezone
from typing import Protocol

import aiofiles
import aiofiles.os

from apps.uploads.schemas import StoredImage

logger = logging.getLogger(__name__)

# Upload configuration
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "./uploads")
UPLOAD_BASE_URL = os.getenv("UPLOAD_BASE_URL", "http://localhost:8787/uploads")


class ObjectStorage(Protocol):
    async def put_object(self, name: str, data: bytes, content_type: str) -> str: ...

    async def list_objects(self) -> list[StoredImage]: ...

    async def delete_object(self, name: str) -> bool: ...


class LocalObjectStorage:
    """ObjectStorage backed by a directory on disk."""

    def __init__(self, upload_dir: str = UPLOAD_DIR, base_url: str = UPLOAD_BASE_URL):
        self.upload_dir = upload_dir
        self.base_url = base_url.rstrip("/")

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/{name}"

    async def put_object(self, name: str, data: bytes, content_type: str) -> str:
        """Write the object and return its public URL."""
        # Ensure upload directory exists
        await aiofiles.os.makedirs(self.upload_dir, exist_ok=True)

        async with aiofiles.open(os.path.join(self.upload_dir, name), "wb") as f:
            await f.write(data)

        logger.info(f"Stored object {name} ({content_type}, {len(data)} bytes)")
        return self.url_for(name)

    async def list_objects(self) -> list[StoredImage]:
        """All stored objects, most recently written first."""
        if not await aiofiles.os.path.isdir(self.upload_dir):
            return []

        images = []
        for name in await aiofiles.os.listdir(self.upload_dir):
            path = os.path.join(self.upload_dir, name)
            if not await aiofiles.os.path.isfile(path):
                continue
            stat = await aiofiles.os.stat(path)
            images.append(
                StoredImage(
                    filename=name,
                    url=self.url_for(name),
                    upload_date=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                )
            )
        images.sort(key=lambda image: image.upload_date, reverse=True)
        return images

    async def delete_object(self, name: str) -> bool:
        path = os.path.join(self.upload_dir, name)
        if not await aiofiles.os.path.isfile(path):
            return False
        await aiofiles.os.remove(path)
        logger.info(f"Deleted object {name}")
        return True
