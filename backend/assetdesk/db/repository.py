"""
Entity stores.

Every entity type gets the same contract: list / get / add / update /
archive / restore / toggle. SqlRepository works on a SQLAlchemy session;
MemoryRepository keeps records in a dict and backs tests and demo mode
(ASSETDESK_STORAGE=memory). Last write wins in both: there is no locking or
version check.
"""
import logging
import os
import uuid

from sqlalchemy import not_, select
from sqlalchemy.orm import Session

from assetdesk.core import lifecycle

logger = logging.getLogger(__name__)


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


def _archived_clause(model):
    shape = lifecycle.shape_of(model)
    if shape.flag_field:
        return getattr(model, shape.flag_field).is_(True)
    return getattr(model, shape.status_field).in_(shape.inactive_statuses)


class BaseRepository:
    def __init__(self, model):
        self.model = model

    @property
    def label(self) -> str:
        return self.model.__name__

    def _assign_id(self, entity) -> None:
        if not entity.id:
            entity.id = new_id(self.model.__id_prefix__)

    def archive(self, entity, actor: str | None = None):
        lifecycle.archive(entity, actor=actor)
        logger.info("Archived %s %s", self.label, entity.id)
        return self.save(entity)

    def restore(self, entity, actor: str | None = None):
        lifecycle.restore(entity, actor=actor)
        logger.info("Restored %s %s", self.label, entity.id)
        return self.save(entity)

    def toggle(self, entity, actor: str | None = None):
        if lifecycle.is_archived(entity):
            return self.restore(entity, actor=actor)
        return self.archive(entity, actor=actor)

    def update(self, entity, fields: dict):
        for field, value in fields.items():
            setattr(entity, field, value)
        return self.save(entity)

    def count(self, tenant_id: str | None = None) -> int:
        return len(self.list(tenant_id=tenant_id))


class SqlRepository(BaseRepository):
    def __init__(self, model, db: Session):
        super().__init__(model)
        self.db = db

    def list(
        self,
        include_archived: bool = False,
        archived_only: bool = False,
        tenant_id: str | None = None,
    ) -> list:
        q = select(self.model)
        if hasattr(self.model, "__lifecycle__"):
            clause = _archived_clause(self.model)
            if archived_only:
                q = q.where(clause)
            elif not include_archived:
                q = q.where(not_(clause))
        if tenant_id is not None and hasattr(self.model, "tenant_id"):
            q = q.where(self.model.tenant_id == tenant_id)
        return list(self.db.scalars(q).all())

    def get(self, entity_id: str):
        return self.db.get(self.model, entity_id)

    def find_by(self, **fields) -> list:
        return list(self.db.scalars(select(self.model).filter_by(**fields)).all())

    def add(self, entity, commit: bool = True):
        self._assign_id(entity)
        self.db.add(entity)
        if commit:
            self.db.commit()
            self.db.refresh(entity)
        else:
            self.db.flush()
        logger.info("Created %s %s", self.label, entity.id)
        return entity

    def save(self, entity):
        self.db.commit()
        self.db.refresh(entity)
        return entity


class MemoryRepository(BaseRepository):
    def __init__(self, model):
        super().__init__(model)
        self._items: dict[str, object] = {}

    def _apply_defaults(self, entity) -> None:
        # column defaults normally fire on INSERT; emulate them here
        for column in self.model.__table__.columns:
            if getattr(entity, column.key, None) is not None or column.default is None:
                continue
            default = column.default
            value = default.arg(None) if default.is_callable else default.arg
            setattr(entity, column.key, value)

    def list(
        self,
        include_archived: bool = False,
        archived_only: bool = False,
        tenant_id: str | None = None,
    ) -> list:
        items = list(self._items.values())
        if hasattr(self.model, "__lifecycle__"):
            if archived_only:
                items = [e for e in items if lifecycle.is_hidden(e)]
            elif not include_archived:
                items = [e for e in items if not lifecycle.is_hidden(e)]
        if tenant_id is not None:
            items = [e for e in items if getattr(e, "tenant_id", None) == tenant_id]
        return items

    def get(self, entity_id: str):
        return self._items.get(entity_id)

    def find_by(self, **fields) -> list:
        return [
            e for e in self._items.values()
            if all(getattr(e, k, None) == v for k, v in fields.items())
        ]

    def add(self, entity, commit: bool = True):
        self._assign_id(entity)
        self._apply_defaults(entity)
        self._items[entity.id] = entity
        logger.info("Created %s %s", self.label, entity.id)
        return entity

    def save(self, entity):
        # same as the onupdate hook an SQL UPDATE would fire
        column = self.model.__table__.columns.get("updated_at")
        if column is not None and column.onupdate is not None:
            entity.updated_at = column.onupdate.arg(None)
        self._items[entity.id] = entity
        return entity

    def clear(self) -> None:
        self._items.clear()


_memory_stores: dict[type, MemoryRepository] = {}


def storage_backend() -> str:
    """Read ASSETDESK_STORAGE at call time (tests switch it per case)."""
    return os.getenv("ASSETDESK_STORAGE", "sql")


def memory_repository(model) -> MemoryRepository:
    if model not in _memory_stores:
        _memory_stores[model] = MemoryRepository(model)
    return _memory_stores[model]


def reset_memory_stores() -> None:
    for store in _memory_stores.values():
        store.clear()


def repository_for(model, db: Session):
    if storage_backend() == "memory":
        return memory_repository(model)
    return SqlRepository(model, db)
