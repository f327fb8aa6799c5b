"""
Archive / restore (soft delete) rules shared by every entity type.

An entity is archived through its status column, a boolean flag, or both.
Records are never removed here: archived rows stay in their table and are
filtered out of active listings. Archiving does not cascade to records that
reference the entity.
"""
from dataclasses import dataclass
from datetime import datetime, timezone

ARCHIVED = "Archived"


@dataclass(frozen=True)
class LifecycleShape:
    status_field: str | None = None
    flag_field: str | None = None
    # status given back on restore when nothing was stashed
    active_status: str | None = None
    # statuses kept out of active listings; only Archived is an archive state
    inactive_statuses: tuple[str, ...] = (ARCHIVED,)


def shape_of(entity) -> LifecycleShape:
    shape = getattr(entity, "__lifecycle__", None)
    if shape is None:
        raise TypeError(f"{type(entity).__name__} has no lifecycle")
    return shape


def is_archived(entity) -> bool:
    shape = shape_of(entity)
    if shape.flag_field:
        return bool(getattr(entity, shape.flag_field))
    return getattr(entity, shape.status_field) == ARCHIVED


def is_hidden(entity) -> bool:
    """True when the entity is left out of active listings."""
    shape = shape_of(entity)
    if shape.flag_field:
        return bool(getattr(entity, shape.flag_field))
    return getattr(entity, shape.status_field) in shape.inactive_statuses


def _stamp(entity, actor: str | None, now: datetime, archived: bool) -> None:
    if hasattr(entity, "archived_at"):
        entity.archived_at = now if archived else None
    if hasattr(entity, "archived_by"):
        entity.archived_by = actor if archived else None
    if hasattr(entity, "updated_at"):
        entity.updated_at = now
    if hasattr(entity, "updated_by") and actor:
        entity.updated_by = actor


def archive(entity, actor: str | None = None, now: datetime | None = None):
    """Mark entity archived. Archiving an archived entity changes nothing."""
    if is_archived(entity):
        return entity
    shape = shape_of(entity)
    if shape.status_field:
        if hasattr(entity, "status_before_archive"):
            entity.status_before_archive = getattr(entity, shape.status_field)
        setattr(entity, shape.status_field, ARCHIVED)
    if shape.flag_field:
        setattr(entity, shape.flag_field, True)
    _stamp(entity, actor, now or datetime.now(timezone.utc), archived=True)
    return entity


def restore(entity, actor: str | None = None, now: datetime | None = None):
    """Bring entity back to the status it had before archiving."""
    if not is_archived(entity):
        return entity
    shape = shape_of(entity)
    if shape.status_field:
        previous = getattr(entity, "status_before_archive", None)
        setattr(entity, shape.status_field, previous or shape.active_status)
        if hasattr(entity, "status_before_archive"):
            entity.status_before_archive = None
    if shape.flag_field:
        setattr(entity, shape.flag_field, False)
    _stamp(entity, actor, now or datetime.now(timezone.utc), archived=False)
    return entity


def toggle_archived(entity, actor: str | None = None, now: datetime | None = None):
    if is_archived(entity):
        return restore(entity, actor=actor, now=now)
    return archive(entity, actor=actor, now=now)
