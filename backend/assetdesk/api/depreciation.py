"""
Depreciation views: ad-hoc calculation, per-asset schedule, portfolio summary
and the PDF export.
"""
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, field_validator

from assetdesk.api.assets import DepreciationResponse
from assetdesk.api.deps import get_assets, get_tenant_id
from assetdesk.core.depreciation import summarize_portfolio
from assetdesk.core.filters import filter_assets
from assetdesk.core.valuation import asset_snapshot, is_on_books, valuation_snapshot
from assetdesk.utils.pdf_report import generate_depreciation_report

router = APIRouter()


class DepreciationRequest(BaseModel):
    cost: float
    purchase_date: date | None = None
    useful_life_years: int | None = None
    as_of: date | None = None

    @field_validator("cost")
    @classmethod
    def non_negative_cost(cls, v):
        if v < 0:
            raise ValueError("Cost must be zero or positive.")
        return v


class AssetDepreciationRow(BaseModel):
    asset_id: str
    description: str
    category: str
    room: str | None
    status: str
    purchase_date: date | None
    depreciation: DepreciationResponse


class PortfolioSummaryResponse(BaseModel):
    as_of: date
    asset_count: int
    total_cost: float
    total_accumulated_depreciation: float
    total_book_value: float
    total_monthly_depreciation: float
    average_useful_life_years: float


def _schedule(assets, tenant_id, search, acquired, as_of):
    items = [a for a in assets.list(tenant_id=tenant_id) if is_on_books(a)]
    try:
        items = filter_assets(items, search=search, acquired=acquired, as_of=as_of)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return [(a, asset_snapshot(a, as_of)) for a in items]


@router.post("/calculate", response_model=DepreciationResponse)
def calculate(data: DepreciationRequest):
    snap = valuation_snapshot(data.cost, data.purchase_date, data.useful_life_years, data.as_of)
    return DepreciationResponse.from_snapshot(snap)


@router.get("/assets", response_model=list[AssetDepreciationRow])
def list_asset_depreciation(
    search: str | None = None,
    acquired: str = "all",
    as_of: date | None = None,
    assets=Depends(get_assets),
    tenant_id: str | None = Depends(get_tenant_id),
):
    as_of = as_of or date.today()
    return [
        AssetDepreciationRow(
            asset_id=asset.id,
            description=asset.description,
            category=asset.category,
            room=asset.room,
            status=asset.status,
            purchase_date=asset.purchase_date,
            depreciation=DepreciationResponse.from_snapshot(snap),
        )
        for asset, snap in _schedule(assets, tenant_id, search, acquired, as_of)
    ]


@router.get("/summary", response_model=PortfolioSummaryResponse)
def portfolio_summary(
    as_of: date | None = None,
    assets=Depends(get_assets),
    tenant_id: str | None = Depends(get_tenant_id),
):
    as_of = as_of or date.today()
    summary = summarize_portfolio([snap for _, snap in _schedule(assets, tenant_id, None, "all", as_of)])
    return PortfolioSummaryResponse(
        as_of=as_of,
        asset_count=summary.asset_count,
        total_cost=float(summary.total_cost),
        total_accumulated_depreciation=float(summary.total_accumulated_depreciation),
        total_book_value=float(summary.total_book_value),
        total_monthly_depreciation=float(summary.total_monthly_depreciation),
        average_useful_life_years=float(summary.average_useful_life_years),
    )


@router.get("/report.pdf")
def depreciation_report(
    search: str | None = None,
    acquired: str = "all",
    as_of: date | None = None,
    assets=Depends(get_assets),
    tenant_id: str | None = Depends(get_tenant_id),
):
    as_of = as_of or date.today()
    rows = _schedule(assets, tenant_id, search, acquired, as_of)
    summary = summarize_portfolio([snap for _, snap in rows])
    pdf_bytes = generate_depreciation_report(rows, summary, as_of)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="depreciation_{as_of.isoformat()}.pdf"'
        },
    )
