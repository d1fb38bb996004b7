"""
Persistence adapters for content entities.

The service layer talks to EntityRepository only. SqlAlchemyRepository is the
relational implementation; ids are integers and timestamps are assigned here.
"""
from typing import Any, Optional, Protocol, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from apps.content.lifecycle import utcnow


class EntityRepository(Protocol):
    """Minimal storage contract the resource service depends on."""

    def list(self, status: Optional[str] = None) -> Sequence[Any]: ...

    def get(self, entity_id: int) -> Optional[Any]: ...

    def insert(self, fields: dict[str, Any]) -> Any: ...

    def update(self, entity_id: int, fields: dict[str, Any]) -> Optional[Any]: ...

    def delete(self, entity_id: int) -> bool: ...


class SqlAlchemyRepository:
    """EntityRepository backed by a SQLAlchemy model and session."""

    def __init__(self, model, db: Session):
        self.model = model
        self.db = db

    def list(self, status: Optional[str] = None) -> list:
        query = self.db.query(self.model)
        if status:
            query = query.filter(self.model.status == status)
        return query.order_by(self.model.created_at.desc(), self.model.id.desc()).all()

    def get(self, entity_id: int):
        return self.db.get(self.model, entity_id)

    def insert(self, fields: dict[str, Any]):
        now = utcnow()
        record = self.model(**{**fields, "created_at": now, "updated_at": now})
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        return record

    def update(self, entity_id: int, fields: dict[str, Any]):
        record = self.get(entity_id)
        if record is None:
            return None

        # Created timestamp and id are never rewritten
        for key, value in fields.items():
            if key in ("id", "created_at"):
                continue
            setattr(record, key, value)
        if "updated_at" not in fields:
            record.updated_at = utcnow()

        self._commit()
        self.db.refresh(record)
        return record

    def delete(self, entity_id: int) -> bool:
        record = self.get(entity_id)
        if record is None:
            return False

        self.db.delete(record)
        self._commit()
        return True

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            # Rollback so the session stays usable for the rest of the request
            self.db.rollback()
            raise
