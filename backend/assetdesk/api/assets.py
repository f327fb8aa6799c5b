import logging
from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, field_validator

from assetdesk.api.deps import get_actor, get_assets, get_or_404, get_tenant_id
from assetdesk.api.lifecycle import add_lifecycle_routes
from assetdesk.core.depreciation import DepreciationSnapshot
from assetdesk.core.filters import filter_assets
from assetdesk.core.lifecycle import is_archived
from assetdesk.core.valuation import asset_snapshot, refresh_book_values
from assetdesk.models.asset import Asset

logger = logging.getLogger(__name__)

router = APIRouter()

AssetStatus = Literal["Available", "In Use", "Maintenance", "Disposed"]


class AssetData(BaseModel):
    description: str
    category: str = ""
    status: AssetStatus = "Available"
    room: str | None = None
    image: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    serial_number: str | None = None
    vendor: str | None = None
    purchase_date: date | None = None
    warranty_expiry: date | None = None
    next_maintenance: date | None = None
    notes: str | None = None
    docs: list[str] | None = None
    value: float = 0
    purchase_price: float | None = None
    useful_life_years: int | None = None

    @field_validator("description")
    @classmethod
    def description_required(cls, v):
        if not v.strip():
            raise ValueError("Description is required.")
        return v

    @field_validator("value", "purchase_price")
    @classmethod
    def non_negative_amount(cls, v):
        if v is not None and v < 0:
            raise ValueError("Amounts must be zero or positive.")
        return v

    @field_validator("useful_life_years")
    @classmethod
    def non_negative_life(cls, v):
        if v is not None and v < 0:
            raise ValueError("Useful life must be zero or positive.")
        return v


class AssetCreate(AssetData):
    # client-suggested id, otherwise assigned by the store
    id: str | None = None


class AllocationRequest(BaseModel):
    room: str | None = None


class DepreciationResponse(BaseModel):
    cost: float
    useful_life_years: int
    age_in_months: int
    monthly_depreciation: float
    accumulated_depreciation: float
    current_book_value: float
    remaining_months: int
    depreciation_percent: float
    is_fully_depreciated: bool
    is_near_end_of_life: bool
    is_low_value: bool

    @classmethod
    def from_snapshot(cls, snap: DepreciationSnapshot) -> "DepreciationResponse":
        return cls(
            cost=float(snap.cost),
            useful_life_years=snap.useful_life_years,
            age_in_months=snap.age_in_months,
            monthly_depreciation=float(snap.monthly_depreciation),
            accumulated_depreciation=float(snap.accumulated_depreciation),
            current_book_value=float(snap.current_book_value),
            remaining_months=snap.remaining_months,
            depreciation_percent=float(snap.depreciation_percent),
            is_fully_depreciated=snap.is_fully_depreciated,
            is_near_end_of_life=snap.is_near_end_of_life,
            is_low_value=snap.is_low_value,
        )


class AssetResponse(BaseModel):
    id: str
    tenant_id: str | None
    description: str
    category: str
    status: str
    room: str | None
    image: str | None
    manufacturer: str | None
    model: str | None
    serial_number: str | None
    vendor: str | None
    purchase_date: date | None
    warranty_expiry: date | None
    next_maintenance: date | None
    notes: str | None
    docs: list[str] | None
    value: float
    purchase_price: float | None
    useful_life_years: int | None
    depreciation: DepreciationResponse | None = None

    model_config = {"from_attributes": True}


def asset_response(asset: Asset, as_of: date | None = None) -> AssetResponse:
    """Serialize an asset with its valuation recomputed at as_of (default: today)."""
    response = AssetResponse.model_validate(asset)
    response.depreciation = DepreciationResponse.from_snapshot(asset_snapshot(asset, as_of))
    return response


@router.get("/", response_model=list[AssetResponse])
def list_assets(
    include_archived: bool = False,
    archived_only: bool = False,
    status: str | None = None,
    category: str | None = None,
    room: str | None = None,
    search: str | None = None,
    acquired: str = "all",
    assets=Depends(get_assets),
    tenant_id: str | None = Depends(get_tenant_id),
):
    items = assets.list(
        include_archived=include_archived, archived_only=archived_only, tenant_id=tenant_id
    )
    try:
        items = filter_assets(
            items, status=status, category=category, room=room, search=search, acquired=acquired
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return [asset_response(a) for a in items]


@router.post("/", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
def create_asset(
    data: AssetCreate,
    assets=Depends(get_assets),
    tenant_id: str | None = Depends(get_tenant_id),
):
    if data.id and assets.get(data.id) is not None:
        raise HTTPException(status_code=400, detail=f"Asset {data.id} already exists.")

    asset = Asset(**data.model_dump(), tenant_id=tenant_id)
    refresh_book_values(asset)
    assets.add(asset)
    return asset_response(asset)


@router.get("/{asset_id}", response_model=AssetResponse)
def get_asset(asset_id: str, assets=Depends(get_assets)):
    return asset_response(get_or_404(assets, asset_id, "Asset not found."))


@router.get("/{asset_id}/depreciation", response_model=DepreciationResponse)
def get_asset_depreciation(asset_id: str, as_of: date | None = None, assets=Depends(get_assets)):
    asset = get_or_404(assets, asset_id, "Asset not found.")
    return DepreciationResponse.from_snapshot(asset_snapshot(asset, as_of))


@router.put("/{asset_id}", response_model=AssetResponse)
def update_asset(
    asset_id: str,
    data: AssetData,
    assets=Depends(get_assets),
    actor: str | None = Depends(get_actor),
):
    asset = get_or_404(assets, asset_id, "Asset not found.")
    fields = data.model_dump()
    if is_archived(asset):
        # stays archived; the new status applies on restore
        fields["status_before_archive"] = fields.pop("status")
    for field, value in fields.items():
        setattr(asset, field, value)
    refresh_book_values(asset)
    assets.save(asset)
    logger.info("Asset %s updated by %s", asset_id, actor or "anonymous")
    return asset_response(asset)


@router.patch("/{asset_id}/allocate", response_model=AssetResponse)
def allocate_asset(asset_id: str, data: AllocationRequest, assets=Depends(get_assets)):
    asset = get_or_404(assets, asset_id, "Asset not found.")
    assets.update(asset, {"room": data.room})
    logger.info("Asset %s allocated to room %s", asset_id, data.room)
    return asset_response(asset)


add_lifecycle_routes(
    router, get_assets, AssetResponse, "Asset not found.", serialize=asset_response
)
