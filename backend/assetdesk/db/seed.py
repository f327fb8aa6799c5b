"""
Seed script: loads sample_dataset.json into the database.
Usage: python -m assetdesk.db.seed
"""
import json
import logging
from datetime import date
from pathlib import Path

from sqlalchemy.orm import Session

from assetdesk.core.procurement import asset_from_order
from assetdesk.core.tenancy import plan_limits
from assetdesk.core.valuation import refresh_book_values
from assetdesk.db.database import SessionLocal, init_db
from assetdesk.models import (
    Asset,
    AssetCategory,
    Employee,
    MaintenanceRecord,
    PurchaseOrder,
    Room,
    RoomCategory,
    Tenant,
)

logger = logging.getLogger(__name__)

DATASET_PATH = Path(__file__).parent.parent.parent / "tests" / "fixtures" / "sample_dataset.json"

_DATE_FIELDS = ("purchase_date", "warranty_expiry", "next_maintenance", "hire_date")


def _dates(row: dict) -> dict:
    return {k: date.fromisoformat(v) if k in _DATE_FIELDS and v else v for k, v in row.items()}


def load_dataset(db: Session, data: dict) -> Tenant:
    tenant_data = data["tenant"]
    tenant = Tenant(
        id=tenant_data["id"],
        name=tenant_data["name"],
        subscription_plan=tenant_data["subscription_plan"],
        status="Active",
        **plan_limits(tenant_data["subscription_plan"]),
    )
    db.add(tenant)
    tid = tenant.id

    for row in data["room_categories"]:
        db.add(RoomCategory(**row, tenant_id=tid, status="Active", archived=False))
    for row in data["rooms"]:
        db.add(Room(**row, tenant_id=tid, archived=False))
    for i, row in enumerate(data["asset_categories"], start=1):
        db.add(AssetCategory(id=f"CAT-{i:03d}", **row, tenant_id=tid, created_by="seed"))

    for row in data["assets"]:
        asset = Asset(**_dates(row), tenant_id=tid)
        refresh_book_values(asset)
        db.add(asset)

    for i, row in enumerate(data["maintenance"], start=1):
        db.add(MaintenanceRecord(id=f"MNT-{i:03d}", **row, tenant_id=tid, archived=False))

    for row in data["purchase_orders"]:
        order = PurchaseOrder(**_dates(row), tenant_id=tid, archived=False)
        asset = asset_from_order(order)
        asset.id = f"AST-{order.id}"
        db.add(asset)
        order.asset_id = asset.id
        db.add(order)

    for i, row in enumerate(data["employees"], start=1):
        db.add(Employee(id=f"EMP-{i:03d}", **_dates(row), tenant_id=tid))

    db.commit()
    return tenant


def seed(dataset_path: Path = DATASET_PATH):
    init_db()
    with open(dataset_path) as f:
        data = json.load(f)

    db = SessionLocal()
    try:
        tenant = load_dataset(db, data)
        logger.info(
            "Seed completed: tenant '%s' with %d assets and %d purchase orders.",
            tenant.name,
            len(data["assets"]) + len(data["purchase_orders"]),
            len(data["purchase_orders"]),
        )
    finally:
        db.close()


if __name__ == "__main__":
    from assetdesk.logging_config import configure_logging

    configure_logging()
    seed()
