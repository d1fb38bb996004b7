"""
Pydantic schemas shared by blog posts and projects.

Requests and responses use camelCase keys; Python code uses snake_case.
"""
import re
from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    AnyHttpUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from apps.content.lifecycle import DRAFT, Status, as_utc

_HTTP_URL = TypeAdapter(AnyHttpUrl)

# Date and time are both required; the offset is optional (UTC when omitted)
_ISO_DATETIME = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:?\d{2})?$"
)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _check_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError:
        raise ValueError("Must be a valid URL") from None
    return value


# Empty string is accepted and stored as null
OptionalUrl = Annotated[Optional[str], BeforeValidator(_blank_to_none), AfterValidator(_check_url)]


def _check_iso_datetime(value: Any) -> Any:
    """Reject epoch numbers and date-only strings before pydantic coerces them."""
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not _ISO_DATETIME.match(value):
        raise ValueError("Must be an ISO 8601 datetime")
    return value


OptionalDatetime = Annotated[Optional[datetime], BeforeValidator(_check_iso_datetime)]


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentCreate(CamelModel):
    """Fields every content type accepts on create."""
    title: str = Field(..., min_length=1, max_length=255)
    excerpt: Optional[str] = None
    cover_image_url: OptionalUrl = None
    status: Status = DRAFT
    published_at: OptionalDatetime = None

    @field_validator("published_at")
    @classmethod
    def _published_at_utc(cls, value):
        return as_utc(value)

    def changes(self) -> dict[str, Any]:
        """All column values, defaults included."""
        return self.model_dump()


class ContentUpdate(CamelModel):
    """Partial update. Fields left out of the payload are not written."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    excerpt: Optional[str] = None
    cover_image_url: OptionalUrl = None
    status: Optional[Status] = None
    published_at: OptionalDatetime = None

    @field_validator("title", "status")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value

    @field_validator("published_at")
    @classmethod
    def _published_at_utc(cls, value):
        return as_utc(value)

    def changes(self) -> dict[str, Any]:
        """Only the fields present in the payload."""
        return self.model_dump(exclude_unset=True)


class ContentRead(CamelModel):
    """Response shape shared by every content type."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    excerpt: Optional[str] = None
    cover_image_url: Optional[str] = None
    status: Status
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("published_at", "created_at", "updated_at")
    @classmethod
    def _timestamps_utc(cls, value):
        return as_utc(value)
