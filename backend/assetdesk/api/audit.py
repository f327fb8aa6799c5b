from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from assetdesk.api.deps import get_audit_logs, get_tenant_id

router = APIRouter()


class AuditLogResponse(BaseModel):
    id: str
    timestamp: datetime
    actor: str
    action: str
    details: str
    tenant_id: str | None

    model_config = {"from_attributes": True}


@router.get("/", response_model=list[AuditLogResponse])
def list_audit_logs(
    action: str | None = None,
    limit: int = 100,
    audits=Depends(get_audit_logs),
    tenant_id: str | None = Depends(get_tenant_id),
):
    """Most recent first."""
    items = [a for a in audits.list(tenant_id=tenant_id) if action is None or a.action == action]
    items.sort(key=lambda a: a.timestamp, reverse=True)
    return items[:limit]
