"""Tests for the finance dashboard figures and asset filters."""
from datetime import date
from decimal import Decimal

import pytest

from assetdesk.core.filters import acquired_in_window, filter_assets, matches_search
from assetdesk.core.finance import (
    UNASSIGNED,
    compute_alerts,
    compute_room_breakdown,
    compute_spending,
    compute_totals,
)
from assetdesk.models import Asset, MaintenanceRecord, PurchaseOrder

AS_OF = date(2025, 1, 1)


def _asset(id, room=None, status="In Use", cost=1200, life=5, bought=date(2023, 1, 1), **kw):
    return Asset(
        id=id,
        description=f"Asset {id}",
        status=status,
        room=room,
        value=cost,
        purchase_price=cost,
        useful_life_years=life,
        purchase_date=bought,
        **kw,
    )


@pytest.fixture
def assets():
    return [
        _asset("A-1", room="R-101"),                           # book 720, monthly 20
        _asset("A-2", room="R-101", cost=3200, life=10, bought=AS_OF),  # book 3200, monthly 26.67
        _asset("A-3", room="Lobby", cost=300, life=3, bought=date(2020, 1, 1)),  # book 0, monthly 8.33
        _asset("A-4", room="Lobby", status="Disposed"),
        _asset("A-5", room="R-101", status="Archived"),
    ]


class TestTotals:
    def test_off_book_assets_excluded(self, assets):
        totals = compute_totals(assets, AS_OF)
        assert totals.total_cost == Decimal("4700.00")
        assert totals.total_book_value == Decimal("3920.00")
        # fully depreciated A-3 still reports its straight-line monthly amount
        assert totals.monthly_depreciation == Decimal("55.00")
        assert totals.accumulated_depreciation == Decimal("780.00")

    def test_empty(self):
        totals = compute_totals([], AS_OF)
        assert totals.total_cost == Decimal("0")
        assert totals.accumulated_depreciation == Decimal("0")


class TestRoomBreakdown:
    def test_sorted_by_value_with_maintenance_costs(self, assets):
        records = [
            MaintenanceRecord(asset_id="A-1", status="Completed", cost=150),
            MaintenanceRecord(asset_id="A-1", status="Pending", cost=999),
            MaintenanceRecord(asset_id="A-3", status="Completed", cost=40),
            MaintenanceRecord(asset_id="A-404", status="Completed", cost=10),
        ]
        rooms = compute_room_breakdown(assets, records, AS_OF)
        assert [r.room for r in rooms] == ["R-101", "Lobby", UNASSIGNED]
        r101 = rooms[0]
        assert r101.total_value == Decimal("3920.00")
        assert r101.monthly_depreciation == Decimal("46.67")
        assert r101.maintenance_cost == Decimal("150")
        assert rooms[1].maintenance_cost == Decimal("40")
        assert rooms[2].maintenance_cost == Decimal("10")

    def test_unallocated_assets_booked_to_unassigned(self):
        rooms = compute_room_breakdown([_asset("A-9")], [], AS_OF)
        assert rooms[0].room == UNASSIGNED

    def test_limit(self):
        many = [_asset(f"A-{i}", room=f"R-{i}") for i in range(8)]
        assert len(compute_room_breakdown(many, [], AS_OF, limit=5)) == 5


class TestSpending:
    def test_cancelled_orders_excluded(self):
        orders = [
            PurchaseOrder(asset_name="TV", category="IT", vendor="TechSupply", purchase_price=1200, status="Delivered"),
            PurchaseOrder(asset_name="Table", category="F", vendor="OfficePlus", purchase_price=3200, status="Delivered"),
            PurchaseOrder(asset_name="Drill", category="M", vendor="TechSupply", purchase_price=300, status="Approved"),
            PurchaseOrder(asset_name="Chair", category="F", vendor="OfficePlus", purchase_price=500, status="Cancelled"),
            PurchaseOrder(asset_name="Lamp", category="F", vendor=None, purchase_price=20, status="Pending"),
        ]
        spending = compute_spending(orders)
        assert spending.total_procurement == Decimal("4720")
        assert spending.top_vendors == [
            ("OfficePlus", Decimal("3200")),
            ("TechSupply", Decimal("1500")),
            ("Unknown", Decimal("20")),
        ]


class TestAlerts:
    def test_end_of_life_and_warranty(self, assets):
        assets.append(_asset("A-6", warranty_expiry=date(2025, 1, 20)))
        assets.append(_asset("A-7", warranty_expiry=date(2025, 3, 1)))
        assets.append(_asset("A-8", warranty_expiry=date(2024, 12, 1)))
        alerts = compute_alerts(assets, AS_OF, warranty_days=30)
        assert alerts.end_of_life_asset_ids == ["A-3"]
        assert alerts.warranty_expiring_asset_ids == ["A-6"]


class TestFilters:
    def test_matches_search_is_case_insensitive(self):
        assert matches_search("hvac", "A-101", "Main Office HVAC Unit")
        assert not matches_search("drill", "A-101", "Main Office HVAC Unit")
        assert matches_search(None, "anything")
        assert matches_search("x", None, "X-ray")

    def test_acquisition_windows(self):
        assert acquired_in_window(date(2025, 3, 1), "this_year", date(2025, 6, 1))
        assert acquired_in_window(date(2024, 3, 1), "last_year", date(2025, 6, 1))
        assert not acquired_in_window(None, "this_year", date(2025, 6, 1))
        assert acquired_in_window(None, "all", date(2025, 6, 1))
        with pytest.raises(ValueError):
            acquired_in_window(date(2025, 3, 1), "last_decade", date(2025, 6, 1))

    def test_filter_assets(self, assets):
        assert [a.id for a in filter_assets(assets, room="Lobby")] == ["A-3", "A-4"]
        assert [a.id for a in filter_assets(assets, status="Disposed")] == ["A-4"]
        assert [a.id for a in filter_assets(assets, search="a-2")] == ["A-2"]
        assert [a.id for a in filter_assets(assets, acquired="this_year", as_of=AS_OF)] == ["A-2"]

    def test_unknown_window_rejected_even_without_dated_assets(self):
        with pytest.raises(ValueError):
            filter_assets([], acquired="last_decade")
        with pytest.raises(ValueError):
            filter_assets([Asset(id="A-9", description="Mop")], acquired="last_decade")
