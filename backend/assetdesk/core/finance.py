"""
Finance dashboard figures: asset valuation totals, per-room breakdown,
procurement spend and end-of-life / warranty alerts.
"""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from assetdesk.core.valuation import asset_snapshot, is_on_books

UNASSIGNED = "Unassigned"


@dataclass
class FinancialTotals:
    total_cost: Decimal = Decimal("0")
    total_book_value: Decimal = Decimal("0")
    monthly_depreciation: Decimal = Decimal("0")
    accumulated_depreciation: Decimal = Decimal("0")


@dataclass
class RoomFinance:
    room: str
    total_value: Decimal = Decimal("0")
    monthly_depreciation: Decimal = Decimal("0")
    maintenance_cost: Decimal = Decimal("0")


@dataclass
class SpendingSummary:
    total_procurement: Decimal = Decimal("0")
    top_vendors: list[tuple[str, Decimal]] = field(default_factory=list)


@dataclass
class Alerts:
    end_of_life_asset_ids: list[str] = field(default_factory=list)
    warranty_expiring_asset_ids: list[str] = field(default_factory=list)


def compute_totals(assets: list, as_of: date | None = None) -> FinancialTotals:
    """Totals over assets still on the books (not Archived, not Disposed)."""
    totals = FinancialTotals()
    for asset in assets:
        if not is_on_books(asset):
            continue
        snap = asset_snapshot(asset, as_of)
        totals.total_cost += snap.cost
        totals.total_book_value += snap.current_book_value
        totals.monthly_depreciation += snap.monthly_depreciation
        totals.accumulated_depreciation += snap.cost - snap.current_book_value
    totals.accumulated_depreciation = max(Decimal("0"), totals.accumulated_depreciation)
    return totals


def compute_room_breakdown(
    assets: list,
    maintenance_records: list,
    as_of: date | None = None,
    limit: int = 5,
) -> list[RoomFinance]:
    """
    Book value and monthly depreciation per room, plus the cost of completed
    maintenance on assets in that room. Records whose asset is unknown are
    booked to 'Unassigned'. Sorted by value, highest first.
    """
    stats: dict[str, RoomFinance] = {}
    rooms_by_asset: dict[str, str] = {}

    for asset in assets:
        rooms_by_asset[asset.id] = asset.room or UNASSIGNED
        if not is_on_books(asset):
            continue
        room = asset.room or UNASSIGNED
        entry = stats.setdefault(room, RoomFinance(room=room))
        snap = asset_snapshot(asset, as_of)
        entry.total_value += snap.current_book_value
        entry.monthly_depreciation += snap.monthly_depreciation

    for record in maintenance_records:
        if not record.cost or record.status != "Completed":
            continue
        room = rooms_by_asset.get(record.asset_id, UNASSIGNED)
        entry = stats.setdefault(room, RoomFinance(room=room))
        entry.maintenance_cost += Decimal(str(record.cost))

    ranked = sorted(stats.values(), key=lambda r: r.total_value, reverse=True)
    return ranked[:limit]


def compute_spending(orders: list, limit: int = 5) -> SpendingSummary:
    summary = SpendingSummary()
    by_vendor: dict[str, Decimal] = {}
    for order in orders:
        if order.status == "Cancelled":
            continue
        cost = Decimal(str(order.purchase_price or 0))
        summary.total_procurement += cost
        vendor = order.vendor or "Unknown"
        by_vendor[vendor] = by_vendor.get(vendor, Decimal("0")) + cost

    summary.top_vendors = sorted(by_vendor.items(), key=lambda kv: kv[1], reverse=True)[:limit]
    return summary


def compute_alerts(assets: list, as_of: date | None = None, warranty_days: int = 30) -> Alerts:
    """Fully depreciated assets still in service and warranties expiring soon."""
    if as_of is None:
        as_of = date.today()
    alerts = Alerts()
    for asset in assets:
        if is_on_books(asset) and asset_snapshot(asset, as_of).current_book_value <= 0:
            alerts.end_of_life_asset_ids.append(asset.id)
        if asset.warranty_expiry:
            days_left = (asset.warranty_expiry - as_of).days
            if 0 < days_left <= warranty_days:
                alerts.warranty_expiring_asset_ids.append(asset.id)
    return alerts
