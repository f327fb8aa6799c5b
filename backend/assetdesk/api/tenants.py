import logging
from datetime import datetime
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, field_validator

from assetdesk.api.deps import get_actor, get_audit_logs, get_or_404, get_tenants, record_audit
from assetdesk.api.lifecycle import add_lifecycle_routes
from assetdesk.core.lifecycle import ARCHIVED
from assetdesk.core.tenancy import plan_limits
from assetdesk.models.tenant import Tenant
from assetdesk.utils.policy_loader import get_plans

logger = logging.getLogger(__name__)

router = APIRouter()

PlanName = Literal["Starter", "Basic", "Pro"]


class TenantCreate(BaseModel):
    name: str
    subscription_plan: PlanName = "Starter"

    @field_validator("name")
    @classmethod
    def name_required(cls, v):
        if not v.strip():
            raise ValueError("Tenant name is required.")
        return v.strip()


class TenantUpdate(BaseModel):
    name: str | None = None
    subscription_plan: PlanName | None = None
    max_rooms: int | None = None
    max_personnel: int | None = None
    maintenance_module: bool | None = None
    reports_level: Literal["Standard", "Advanced"] | None = None

    @field_validator("max_rooms", "max_personnel")
    @classmethod
    def non_negative_limit(cls, v):
        if v is not None and v < 0:
            raise ValueError("Limits must be zero or positive.")
        return v


class TenantStatusUpdate(BaseModel):
    status: Literal["Active", "Inactive", "Archived"]


class TenantResponse(BaseModel):
    id: str
    name: str
    subscription_plan: str
    created_at: datetime
    status: str
    max_rooms: int
    max_personnel: int
    asset_tracking: bool
    depreciation: bool
    maintenance_module: bool
    reports_level: str

    model_config = {"from_attributes": True}


def _name_taken(tenants, name: str, exclude_id: str | None = None) -> bool:
    return any(t.id != exclude_id for t in tenants.find_by(name=name))


@router.get("/plans")
def list_plans():
    return get_plans()


@router.get("/", response_model=list[TenantResponse])
def list_tenants(
    include_archived: bool = False,
    archived_only: bool = False,
    tenants=Depends(get_tenants),
):
    """The archived view lists Archived and Inactive tenants alike."""
    items = tenants.list(include_archived=include_archived, archived_only=archived_only)
    return sorted(items, key=lambda t: t.name.lower())


@router.post("/", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(
    data: TenantCreate,
    tenants=Depends(get_tenants),
    audits=Depends(get_audit_logs),
    actor: str | None = Depends(get_actor),
):
    if _name_taken(tenants, data.name):
        raise HTTPException(status_code=400, detail="A tenant with this name already exists.")
    tenant = Tenant(
        name=data.name,
        subscription_plan=data.subscription_plan,
        status="Active",
        **plan_limits(data.subscription_plan),
    )
    tenants.add(tenant)
    record_audit(
        audits,
        "TenantCreated",
        f"Created tenant {tenant.name} on the {tenant.subscription_plan} plan",
        actor,
        tenant.id,
    )
    return tenant


@router.get("/{tenant_id}", response_model=TenantResponse)
def get_tenant(tenant_id: str, tenants=Depends(get_tenants)):
    return get_or_404(tenants, tenant_id, "Tenant not found.")


@router.put("/{tenant_id}", response_model=TenantResponse)
def update_tenant(tenant_id: str, data: TenantUpdate, tenants=Depends(get_tenants)):
    """
    Changing the plan resets the limits to the new plan's; explicit limit
    fields in the same request override them.
    """
    tenant = get_or_404(tenants, tenant_id, "Tenant not found.")
    fields = data.model_dump(exclude_none=True)
    if "name" in fields and _name_taken(tenants, fields["name"], exclude_id=tenant.id):
        raise HTTPException(status_code=400, detail="A tenant with this name already exists.")
    plan = fields.get("subscription_plan")
    if plan and plan != tenant.subscription_plan:
        fields = {**plan_limits(plan), **fields}
    return tenants.update(tenant, fields)


@router.put("/{tenant_id}/status", response_model=TenantResponse)
def set_tenant_status(
    tenant_id: str,
    data: TenantStatusUpdate,
    tenants=Depends(get_tenants),
    audits=Depends(get_audit_logs),
    actor: str | None = Depends(get_actor),
):
    tenant = get_or_404(tenants, tenant_id, "Tenant not found.")
    if data.status == ARCHIVED:
        tenants.archive(tenant, actor=actor)
    else:
        tenants.update(tenant, {"status": data.status, "status_before_archive": None})
    logger.info("Tenant %s set to %s", tenant_id, data.status)
    record_audit(
        audits, "TenantStatusChanged", f"{tenant.name}: {data.status}", actor, tenant.id
    )
    return tenant


add_lifecycle_routes(
    router, get_tenants, TenantResponse, "Tenant not found.", audit_name="Tenant"
)
