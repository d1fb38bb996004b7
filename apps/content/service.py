"""
Resource service for publishable content.

One implementation serves every content type: the EntityType descriptor
supplies the schemas, and the repository is injected per request.
"""
import logging
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel

from apps.content.entity import EntityType
from apps.content.lifecycle import apply_publish_rule, utcnow
from apps.content.repository import EntityRepository
from apps.content.schemas import ContentCreate, ContentRead, ContentUpdate
from apps.content.validation import validate
from apps.shared.errors import AppError, NotFoundError, StorageError, log_and_sanitize_error

logger = logging.getLogger(__name__)

Payload = Union[BaseModel, Mapping[str, Any]]


class ResourceService:
    """
    CRUD operations for one content type.

    Validation failures and missing ids are raised before anything is written.
    Repository failures are logged with context and re-raised as StorageError.
    """

    def __init__(self, entity: EntityType, repository: EntityRepository):
        self.entity = entity
        self.repository = repository

    def list(self, status: Optional[str] = None) -> list[ContentRead]:
        """All entities, newest first, optionally filtered by status."""
        records = self._storage_call(
            "fetch",
            None,
            lambda: self.repository.list(status),
            user_message=f"Failed to fetch {self.entity.plural}. Please try again later.",
        )
        return [self._to_read(record) for record in records]

    def get(self, entity_id: int) -> Optional[ContentRead]:
        """Return the entity or None when the id does not exist."""
        record = self._storage_call("fetch", entity_id, lambda: self.repository.get(entity_id))
        if record is None:
            return None
        return self._to_read(record)

    def require(self, entity_id: int) -> ContentRead:
        item = self.get(entity_id)
        if item is None:
            raise NotFoundError(self.entity.not_found_message(entity_id))
        return item

    def create(self, data: Payload) -> ContentRead:
        payload: ContentCreate = validate(self.entity.create_schema, data)
        fields = apply_publish_rule(payload.changes(), payload.model_fields_set)

        record = self._storage_call("create", None, lambda: self.repository.insert(fields))
        logger.info(f"Created {self.entity.name} {record_id(record)} (status={fields['status']})")
        return self._to_read(record)

    def update(self, entity_id: int, data: Payload) -> ContentRead:
        payload: ContentUpdate = validate(self.entity.update_schema, data)
        self.require(entity_id)

        fields = payload.changes()
        apply_publish_rule(fields, set(fields))
        fields["updated_at"] = utcnow()

        record = self._storage_call(
            "update", entity_id, lambda: self.repository.update(entity_id, fields)
        )
        if record is None:
            # Deleted between the existence check and the write
            raise NotFoundError(self.entity.not_found_message(entity_id))
        return self._to_read(record)

    def delete(self, entity_id: int) -> bool:
        """Hard delete. Returns True when a row was actually removed."""
        self.require(entity_id)
        deleted = self._storage_call("delete", entity_id, lambda: self.repository.delete(entity_id))
        if deleted:
            logger.info(f"Deleted {self.entity.name} {entity_id}")
        return bool(deleted)

    def _to_read(self, record) -> ContentRead:
        return self.entity.read_schema.model_validate(record)

    def _storage_call(
        self,
        action: str,
        entity_id: Optional[int],
        func: Callable[[], Any],
        user_message: Optional[str] = None,
    ):
        try:
            return func()
        except AppError:
            raise
        except Exception as e:
            context = f"{action} {self.entity.name}"
            if entity_id is not None:
                context += f" {entity_id}"
            sanitized, _ = log_and_sanitize_error(
                e,
                context,
                user_message or f"Failed to {action} {self.entity.name}. Please try again later.",
            )
            raise StorageError(sanitized) from e


def record_id(record) -> Any:
    if isinstance(record, Mapping):
        return record.get("id")
    return getattr(record, "id", None)
