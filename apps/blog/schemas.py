"""
Pydantic schemas for the Blogs API.

Defines request/response models with validation.
"""
from typing import Optional

from pydantic import Field, field_validator

from apps.content.schemas import ContentCreate, ContentRead, ContentUpdate


class BlogCreate(ContentCreate):
    """Schema for creating a new blog post."""
    content: str = Field(..., min_length=1)


class BlogUpdate(ContentUpdate):
    """Schema for updating a blog post. All fields optional."""
    content: Optional[str] = Field(None, min_length=1)

    @field_validator("content")
    @classmethod
    def _content_not_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value


class BlogResponse(ContentRead):
    """Schema for blog post responses."""
    content: str
