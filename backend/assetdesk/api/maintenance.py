from datetime import date, datetime
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ValidationInfo, field_validator

from assetdesk.api.deps import (
    get_assets,
    get_maintenance,
    get_or_404,
    get_tenant_id,
    get_tenant_or_none,
    get_tenants,
)
from assetdesk.api.lifecycle import add_lifecycle_routes
from assetdesk.models.maintenance import MaintenanceRecord


def require_maintenance_module(
    tenants=Depends(get_tenants), tenant_id: str | None = Depends(get_tenant_id)
) -> None:
    """Every maintenance route is refused for tenants whose plan lacks the module."""
    tenant = get_tenant_or_none(tenants, tenant_id)
    if tenant is not None and not tenant.maintenance_module:
        raise HTTPException(
            status_code=403,
            detail=f"The maintenance module is not included in the {tenant.subscription_plan} plan.",
        )


router = APIRouter(dependencies=[Depends(require_maintenance_module)])


class MaintenanceCreate(BaseModel):
    asset_id: str
    description: str = ""
    status: Literal["Pending", "In Progress", "Completed", "Scheduled"] = "Pending"
    priority: Literal["Low", "Medium", "High"] = "Medium"
    type: Literal["Preventive", "Corrective", "Upgrade", "Inspection"] = "Corrective"
    frequency: Literal["One-time", "Daily", "Weekly", "Monthly", "Yearly"] | None = None
    start_date: date | None = None
    end_date: date | None = None
    cost: float | None = None
    attachments: list[str] | None = None

    @field_validator("cost")
    @classmethod
    def non_negative_cost(cls, v):
        if v is not None and v < 0:
            raise ValueError("Cost must be zero or positive.")
        return v

    @field_validator("end_date")
    @classmethod
    def end_after_start(cls, v, info: ValidationInfo):
        start = info.data.get("start_date")
        if v is not None and start is not None and v < start:
            raise ValueError("End date cannot be before start date.")
        return v


class MaintenanceResponse(BaseModel):
    id: str
    tenant_id: str | None
    asset_id: str
    asset_label: str = ""
    description: str
    status: str
    priority: str
    type: str
    frequency: str | None
    start_date: date | None
    end_date: date | None
    cost: float | None
    attachments: list[str] | None
    date_reported: datetime
    archived: bool

    model_config = {"from_attributes": True}


def _serialize(record: MaintenanceRecord, assets) -> MaintenanceResponse:
    response = MaintenanceResponse.model_validate(record)
    # the asset may be archived or gone: fall back to the raw id
    asset = assets.get(record.asset_id)
    response.asset_label = asset.description if asset is not None else record.asset_id
    return response


@router.get("/", response_model=list[MaintenanceResponse])
def list_records(
    include_archived: bool = False,
    archived_only: bool = False,
    asset_id: str | None = None,
    status: str | None = None,
    records=Depends(get_maintenance),
    assets=Depends(get_assets),
    tenant_id: str | None = Depends(get_tenant_id),
):
    items = [
        r
        for r in records.list(
            include_archived=include_archived, archived_only=archived_only, tenant_id=tenant_id
        )
        if (asset_id is None or r.asset_id == asset_id) and (status is None or r.status == status)
    ]
    items.sort(key=lambda r: r.created_at, reverse=True)
    return [_serialize(r, assets) for r in items]


@router.post("/", response_model=MaintenanceResponse, status_code=status.HTTP_201_CREATED)
def create_record(
    data: MaintenanceCreate,
    records=Depends(get_maintenance),
    assets=Depends(get_assets),
    tenant_id: str | None = Depends(get_tenant_id),
):
    get_or_404(assets, data.asset_id, "Asset not found.")
    record = MaintenanceRecord(**data.model_dump(), tenant_id=tenant_id, archived=False)
    records.add(record)
    return _serialize(record, assets)


@router.get("/{record_id}", response_model=MaintenanceResponse)
def get_record(record_id: str, records=Depends(get_maintenance), assets=Depends(get_assets)):
    return _serialize(get_or_404(records, record_id, "Maintenance record not found."), assets)


@router.put("/{record_id}", response_model=MaintenanceResponse)
def update_record(
    record_id: str,
    data: MaintenanceCreate,
    records=Depends(get_maintenance),
    assets=Depends(get_assets),
):
    record = get_or_404(records, record_id, "Maintenance record not found.")
    records.update(record, data.model_dump())
    return _serialize(record, assets)


add_lifecycle_routes(router, get_maintenance, MaintenanceResponse, "Maintenance record not found.")
