"""Turning a purchase order into the asset it buys."""
from datetime import date

from assetdesk.core.valuation import refresh_book_values
from assetdesk.models.asset import Asset
from assetdesk.models.procurement import PurchaseOrder
from assetdesk.utils.policy_loader import get_procurement_policy


def default_useful_life() -> int:
    return get_procurement_policy().get("default_useful_life_years", 5)


def asset_from_order(order: PurchaseOrder, as_of: date | None = None) -> Asset:
    """
    New Available asset carrying the order's identity and price, with book
    values already computed. The caller links it back through order.asset_id.
    """
    asset = Asset(
        tenant_id=order.tenant_id,
        description=order.asset_name,
        category=order.category,
        status="Available",
        vendor=order.vendor,
        manufacturer=order.manufacturer,
        model=order.model,
        serial_number=order.serial_number,
        purchase_date=order.purchase_date,
        value=order.purchase_price,
        purchase_price=order.purchase_price,
        useful_life_years=order.useful_life_years,
    )
    refresh_book_values(asset, as_of)
    return asset
