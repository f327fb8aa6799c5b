import logging
from datetime import date, datetime
from typing import Literal

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, field_validator

from assetdesk.api.deps import get_actor, get_assets, get_or_404, get_orders, get_tenant_id
from assetdesk.api.lifecycle import add_lifecycle_routes
from assetdesk.core.filters import matches_search
from assetdesk.core.procurement import asset_from_order, default_useful_life
from assetdesk.models.procurement import PurchaseOrder

logger = logging.getLogger(__name__)

router = APIRouter()

OrderStatus = Literal["Pending", "Approved", "Delivered", "Cancelled"]


class PurchaseOrderCreate(BaseModel):
    asset_name: str
    category: str
    vendor: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    serial_number: str | None = None
    purchase_price: float
    purchase_date: date | None = None
    useful_life_years: int | None = None
    status: OrderStatus = "Pending"
    requested_by: str | None = None

    @field_validator("asset_name", "category")
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("Asset name and category are required.")
        return v

    @field_validator("purchase_price")
    @classmethod
    def non_negative_price(cls, v):
        if v < 0:
            raise ValueError("Purchase price must be zero or positive.")
        return v

    @field_validator("useful_life_years")
    @classmethod
    def non_negative_life(cls, v):
        if v is not None and v < 0:
            raise ValueError("Useful life must be zero or positive.")
        return v


class StatusUpdate(BaseModel):
    status: OrderStatus


class PurchaseOrderResponse(BaseModel):
    id: str
    tenant_id: str | None
    asset_name: str
    category: str
    vendor: str | None
    manufacturer: str | None
    model: str | None
    serial_number: str | None
    purchase_price: float
    purchase_date: date | None
    useful_life_years: int
    status: str
    requested_by: str | None
    asset_id: str | None
    created_at: datetime
    archived: bool

    model_config = {"from_attributes": True}


@router.get("/", response_model=list[PurchaseOrderResponse])
def list_orders(
    include_archived: bool = False,
    archived_only: bool = False,
    status: str | None = None,
    search: str | None = None,
    orders=Depends(get_orders),
    tenant_id: str | None = Depends(get_tenant_id),
):
    items = [
        o
        for o in orders.list(
            include_archived=include_archived, archived_only=archived_only, tenant_id=tenant_id
        )
        if (status is None or o.status == status)
        and matches_search(search, o.id, o.asset_name, o.vendor)
    ]
    items.sort(key=lambda o: o.created_at, reverse=True)
    return items


@router.post("/", response_model=PurchaseOrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    data: PurchaseOrderCreate,
    orders=Depends(get_orders),
    assets=Depends(get_assets),
    tenant_id: str | None = Depends(get_tenant_id),
    actor: str | None = Depends(get_actor),
):
    """
    Record a purchase and register the asset it buys.

    The asset and the order are written in one commit; the order links to
    the new asset through asset_id.
    """
    fields = data.model_dump()
    if fields["useful_life_years"] is None:
        fields["useful_life_years"] = default_useful_life()
    if fields["purchase_date"] is None:
        fields["purchase_date"] = date.today()
    if fields["requested_by"] is None:
        fields["requested_by"] = actor

    order = PurchaseOrder(**fields, tenant_id=tenant_id, archived=False)
    asset = asset_from_order(order)
    assets.add(asset, commit=False)
    order.asset_id = asset.id
    orders.add(order)
    logger.info("Purchase order %s registered asset %s", order.id, asset.id)
    return order


@router.get("/{order_id}", response_model=PurchaseOrderResponse)
def get_order(order_id: str, orders=Depends(get_orders)):
    return get_or_404(orders, order_id, "Purchase order not found.")


@router.put("/{order_id}", response_model=PurchaseOrderResponse)
def update_order(order_id: str, data: PurchaseOrderCreate, orders=Depends(get_orders)):
    order = get_or_404(orders, order_id, "Purchase order not found.")
    fields = data.model_dump()
    if fields["useful_life_years"] is None:
        fields["useful_life_years"] = order.useful_life_years
    if fields["purchase_date"] is None:
        fields["purchase_date"] = order.purchase_date
    return orders.update(order, fields)


@router.put("/{order_id}/status", response_model=PurchaseOrderResponse)
def set_order_status(order_id: str, data: StatusUpdate, orders=Depends(get_orders)):
    order = get_or_404(orders, order_id, "Purchase order not found.")
    logger.info("Purchase order %s: %s -> %s", order_id, order.status, data.status)
    return orders.update(order, {"status": data.status})


add_lifecycle_routes(router, get_orders, PurchaseOrderResponse, "Purchase order not found.")
