from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from assetdesk.db.database import get_db
from assetdesk.db.repository import repository_for
from assetdesk.models import (
    Asset,
    AssetCategory,
    AuditLog,
    Employee,
    MaintenanceRecord,
    PurchaseOrder,
    Room,
    RoomCategory,
    TaskItem,
    Tenant,
)


def get_tenant_id(x_tenant_id: str | None = Header(default=None)) -> str | None:
    """Tenant scope of the caller; None means platform-wide (super admin)."""
    return x_tenant_id or None


def get_actor(x_actor: str | None = Header(default=None)) -> str | None:
    return x_actor or None


def get_assets(db: Session = Depends(get_db)):
    return repository_for(Asset, db)


def get_categories(db: Session = Depends(get_db)):
    return repository_for(AssetCategory, db)


def get_rooms(db: Session = Depends(get_db)):
    return repository_for(Room, db)


def get_room_categories(db: Session = Depends(get_db)):
    return repository_for(RoomCategory, db)


def get_employees(db: Session = Depends(get_db)):
    return repository_for(Employee, db)


def get_maintenance(db: Session = Depends(get_db)):
    return repository_for(MaintenanceRecord, db)


def get_orders(db: Session = Depends(get_db)):
    return repository_for(PurchaseOrder, db)


def get_tenants(db: Session = Depends(get_db)):
    return repository_for(Tenant, db)


def get_tasks(db: Session = Depends(get_db)):
    return repository_for(TaskItem, db)


def get_audit_logs(db: Session = Depends(get_db)):
    return repository_for(AuditLog, db)


def get_or_404(repo, entity_id: str, detail: str):
    entity = repo.get(entity_id)
    if entity is None:
        raise HTTPException(status_code=404, detail=detail)
    return entity


def get_tenant_or_none(tenants, tenant_id: str | None):
    """The caller's tenant, or None outside any tenant. Unknown ids are a 404."""
    if tenant_id is None:
        return None
    return get_or_404(tenants, tenant_id, "Tenant not found.")


def record_audit(audits, action: str, details: str, actor: str | None, tenant_id: str | None):
    return audits.add(
        AuditLog(action=action, details=details, actor=actor or "system", tenant_id=tenant_id)
    )
