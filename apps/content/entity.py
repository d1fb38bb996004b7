"""Descriptor tying a content type to its model and schemas."""
from dataclasses import dataclass

from apps.content.schemas import ContentCreate, ContentRead, ContentUpdate


@dataclass(frozen=True)
class EntityType:
    """
    Everything the generic service and router need to know about a content type.

    Example:
        BLOG = EntityType(
            name="blog", plural="blogs", label="Blog", model=Blog,
            create_schema=BlogCreate, update_schema=BlogUpdate, read_schema=BlogRead,
        )
    """
    name: str
    plural: str
    label: str
    model: type
    create_schema: type[ContentCreate]
    update_schema: type[ContentUpdate]
    read_schema: type[ContentRead]

    def not_found_message(self, entity_id) -> str:
        return f"{self.label} with ID {entity_id} not found"
