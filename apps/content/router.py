"""
CRUD routes for a content type.

build_router() produces the same five endpoints for every EntityType:

    GET    /{plural}?status=   list, newest first
    GET    /{plural}/{id}      single entity
    POST   /{plural}           create (201)
    PUT    /{plural}/{id}      partial update
    DELETE /{plural}/{id}      hard delete
"""
from typing import Callable

from fastapi import APIRouter, Depends

from apps.content.entity import EntityType
from apps.content.service import ResourceService
from apps.content.validation import EntityId, StatusFilter
from apps.shared.errors import NotFoundError
from apps.shared.responses import success_response


def build_router(entity: EntityType, get_service: Callable[..., ResourceService]) -> APIRouter:
    router = APIRouter(prefix=f"/{entity.plural}", tags=[entity.plural])

    CreateSchema = entity.create_schema
    UpdateSchema = entity.update_schema

    @router.get("")
    def list_entities(
        status: StatusFilter = None,
        service: ResourceService = Depends(get_service),
    ):
        """List entities, optionally filtered by status."""
        items = service.list(status)
        suffix = f" with status: {status}" if status else ""
        return success_response(items, f"Retrieved {len(items)} {entity.plural}{suffix}")

    @router.get("/{id}")
    def get_entity(
        entity_id: EntityId,
        service: ResourceService = Depends(get_service),
    ):
        item = service.get(entity_id)
        if item is None:
            raise NotFoundError(entity.not_found_message(entity_id))
        return success_response(item, f"{entity.label} retrieved successfully")

    @router.post("", status_code=201)
    def create_entity(
        payload: CreateSchema,
        service: ResourceService = Depends(get_service),
    ):
        item = service.create(payload)
        return success_response(item, f"{entity.label} created successfully", status_code=201)

    @router.put("/{id}")
    def update_entity(
        entity_id: EntityId,
        payload: UpdateSchema,
        service: ResourceService = Depends(get_service),
    ):
        """Update only the fields present in the payload."""
        item = service.update(entity_id, payload)
        return success_response(item, f"{entity.label} updated successfully")

    @router.delete("/{id}")
    def delete_entity(
        entity_id: EntityId,
        service: ResourceService = Depends(get_service),
    ):
        if not service.delete(entity_id):
            raise NotFoundError(entity.not_found_message(entity_id))
        return success_response(None, f"{entity.label} deleted successfully")

    return router
