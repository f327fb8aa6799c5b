"""Apply the depreciation calculator to stored assets with the configured policy."""
from datetime import date
from decimal import Decimal

from assetdesk.core.depreciation import DepreciationSnapshot, compute_depreciation
from assetdesk.utils.policy_loader import get_depreciation_policy

# statuses that take an asset out of the books
OFF_BOOK_STATUSES = {"Archived", "Disposed"}


def valuation_snapshot(
    cost: Decimal,
    purchase_date: date | None,
    useful_life_years: int | None,
    as_of: date | None = None,
) -> DepreciationSnapshot:
    policy = get_depreciation_policy()
    if useful_life_years is None:
        useful_life_years = policy.get("default_useful_life_years", 0)
    return compute_depreciation(
        cost=cost,
        purchase_date=purchase_date,
        useful_life_years=useful_life_years,
        as_of=as_of,
        near_end_of_life_months=policy.get("near_end_of_life_months", 6),
        low_value_ratio=Decimal(str(policy.get("low_value_ratio", "0.10"))),
    )


def asset_snapshot(asset, as_of: date | None = None) -> DepreciationSnapshot:
    return valuation_snapshot(asset.cost, asset.purchase_date, asset.useful_life_years, as_of)


def refresh_book_values(asset, as_of: date | None = None):
    """Store the current monthly depreciation and book value on the asset."""
    snap = asset_snapshot(asset, as_of)
    asset.monthly_depreciation = snap.monthly_depreciation
    asset.current_book_value = snap.current_book_value
    return snap


def is_on_books(asset) -> bool:
    return asset.status not in OFF_BOOK_STATUSES
