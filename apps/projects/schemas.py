"""
Pydantic schemas for Projects API.

Defines request/response models with validation.
"""
from typing import Optional

from pydantic import field_validator

from apps.content.schemas import ContentCreate, ContentRead, ContentUpdate, OptionalUrl


class ProjectCreate(ContentCreate):
    """Schema for creating a new project."""
    abstract: Optional[str] = None
    project_scope: Optional[str] = None
    is_group: bool = False
    project_link: OptionalUrl = None
    github_link: OptionalUrl = None
    documentation_link: OptionalUrl = None
    content: Optional[str] = None


class ProjectUpdate(ContentUpdate):
    """Schema for updating a project. All fields optional."""
    abstract: Optional[str] = None
    project_scope: Optional[str] = None
    is_group: Optional[bool] = None
    project_link: OptionalUrl = None
    github_link: OptionalUrl = None
    documentation_link: OptionalUrl = None
    content: Optional[str] = None

    @field_validator("is_group")
    @classmethod
    def _is_group_not_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value


class ProjectResponse(ContentRead):
    """Schema for project responses."""
    abstract: Optional[str] = None
    project_scope: Optional[str] = None
    is_group: bool = False
    project_link: Optional[str] = None
    github_link: Optional[str] = None
    documentation_link: Optional[str] = None
    content: Optional[str] = None
