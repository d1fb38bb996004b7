"""Status lifecycle for publishable content."""
from datetime import datetime, timezone
from typing import Any, Literal, Optional

Status = Literal["draft", "published"]

DRAFT = "draft"
PUBLISHED = "published"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes (e.g. read back from SQLite) as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def apply_publish_rule(
    fields: dict[str, Any],
    supplied: set[str],
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """
    Stamp published_at when a write publishes without an explicit timestamp.

    Args:
        fields: Column values about to be written (snake_case keys). Mutated in place.
        supplied: Names of the fields the caller actually sent. A supplied
            published_at, even None, is written as given and never stamped.
        now: Timestamp to stamp with, defaults to the current UTC time.

    Returns:
        The same fields dict, for chaining.
    """
    if fields.get("status") != PUBLISHED:
        return fields
    if "published_at" in supplied:
        return fields
    fields["published_at"] = now or utcnow()
    return fields
