from datetime import date

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from assetdesk.api.deps import get_assets, get_maintenance, get_orders, get_tenant_id
from assetdesk.core.finance import (
    compute_alerts,
    compute_room_breakdown,
    compute_spending,
    compute_totals,
)
from assetdesk.utils.policy_loader import get_finance_policy

router = APIRouter()


class TotalsResponse(BaseModel):
    total_cost: float
    total_book_value: float
    monthly_depreciation: float
    accumulated_depreciation: float


class RoomFinanceResponse(BaseModel):
    room: str
    total_value: float
    monthly_depreciation: float
    maintenance_cost: float


class VendorSpend(BaseModel):
    vendor: str
    total: float


class SpendingResponse(BaseModel):
    total_procurement: float
    top_vendors: list[VendorSpend]


class AlertsResponse(BaseModel):
    end_of_life_asset_ids: list[str]
    warranty_expiring_asset_ids: list[str]


class FinanceDashboard(BaseModel):
    as_of: date
    totals: TotalsResponse
    rooms: list[RoomFinanceResponse]
    spending: SpendingResponse
    alerts: AlertsResponse


@router.get("/dashboard", response_model=FinanceDashboard)
def finance_dashboard(
    as_of: date | None = None,
    assets=Depends(get_assets),
    records=Depends(get_maintenance),
    orders=Depends(get_orders),
    tenant_id: str | None = Depends(get_tenant_id),
):
    as_of = as_of or date.today()
    policy = get_finance_policy()
    # archived records are still fed in: the core skips what is off the books
    all_assets = assets.list(include_archived=True, tenant_id=tenant_id)

    totals = compute_totals(all_assets, as_of)
    rooms = compute_room_breakdown(
        all_assets,
        records.list(include_archived=True, tenant_id=tenant_id),
        as_of,
        limit=policy.get("top_rooms", 5),
    )
    spending = compute_spending(
        orders.list(tenant_id=tenant_id), limit=policy.get("top_vendors", 5)
    )
    alerts = compute_alerts(all_assets, as_of, warranty_days=policy.get("warranty_alert_days", 30))

    return FinanceDashboard(
        as_of=as_of,
        totals=TotalsResponse(
            total_cost=float(totals.total_cost),
            total_book_value=float(totals.total_book_value),
            monthly_depreciation=float(totals.monthly_depreciation),
            accumulated_depreciation=float(totals.accumulated_depreciation),
        ),
        rooms=[
            RoomFinanceResponse(
                room=r.room,
                total_value=float(r.total_value),
                monthly_depreciation=float(r.monthly_depreciation),
                maintenance_cost=float(r.maintenance_cost),
            )
            for r in rooms
        ],
        spending=SpendingResponse(
            total_procurement=float(spending.total_procurement),
            top_vendors=[VendorSpend(vendor=v, total=float(t)) for v, t in spending.top_vendors],
        ),
        alerts=AlertsResponse(
            end_of_life_asset_ids=alerts.end_of_life_asset_ids,
            warranty_expiring_asset_ids=alerts.warranty_expiring_asset_ids,
        ),
    )
