"""
Input validation for content endpoints.

validate() is the single entry point for raw mappings coming from outside
FastAPI's request parsing; routes use the Annotated parameter types below.
"""
from typing import Annotated, Any, Optional, TypeVar

from fastapi import Path, Query
from pydantic import BaseModel, ValidationError as PydanticValidationError

from apps.content.lifecycle import Status
from apps.shared.errors import ValidationError, validation_details

M = TypeVar("M", bound=BaseModel)

# Non-integer or non-positive ids are rejected with a 400 by the request
# validation handler
EntityId = Annotated[int, Path(alias="id", gt=0, description="Positive integer id")]

# A missing status means no filter
StatusFilter = Annotated[
    Optional[Status],
    Query(description="Only return entities with this status"),
]


def validate(schema: type[M], raw: Any) -> M:
    """
    Validate a raw mapping against a schema.

    Raises:
        ValidationError: with one {field, message} entry per offending field
    """
    if isinstance(raw, schema):
        return raw
    try:
        return schema.model_validate(raw)
    except PydanticValidationError as e:
        raise ValidationError("Validation failed", validation_details(e.errors()))
