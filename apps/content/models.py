"""
Shared columns for publishable content.

Blog posts and projects both carry a title, body, cover image and the
draft/published lifecycle fields defined here.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime

from apps.content.lifecycle import DRAFT


class ContentMixin:
    """
    Lifecycle columns shared by every content table.

    - Identity (id, assigned by the database)
    - Basic info (title, excerpt, cover image)
    - Lifecycle (status, published_at, created_at, updated_at)
    """

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    excerpt = Column(Text)
    cover_image_url = Column(Text)
    status = Column(String(50), nullable=False, default=DRAFT, index=True)
    published_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
