from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from assetdesk.core.lifecycle import LifecycleShape
from assetdesk.db.database import Base, utcnow


class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"
    __id_prefix__ = "PO"
    __lifecycle__ = LifecycleShape(flag_field="archived")

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tenant_id: Mapped[str | None] = mapped_column(String(40), index=True)
    asset_name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    vendor: Mapped[str | None] = mapped_column(String(100))
    manufacturer: Mapped[str | None] = mapped_column(String(100))
    model: Mapped[str | None] = mapped_column(String(100))
    serial_number: Mapped[str | None] = mapped_column(String(100))
    purchase_price: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False)
    purchase_date: Mapped[date | None] = mapped_column(Date)
    useful_life_years: Mapped[int] = mapped_column(Integer, default=5)
    # 'Pending' | 'Approved' | 'Delivered' | 'Cancelled'
    status: Mapped[str] = mapped_column(String(20), default="Pending")
    requested_by: Mapped[str | None] = mapped_column(String(100))
    asset_id: Mapped[str | None] = mapped_column(String(40))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    archived: Mapped[bool] = mapped_column(Boolean, default=False)
