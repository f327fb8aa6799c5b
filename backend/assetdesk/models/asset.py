from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import JSON, Date, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from assetdesk.core.lifecycle import LifecycleShape
from assetdesk.db.database import Base, utcnow


class Asset(Base):
    __tablename__ = "assets"
    __id_prefix__ = "AST"
    __lifecycle__ = LifecycleShape(status_field="status", active_status="Available")

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tenant_id: Mapped[str | None] = mapped_column(String(40), index=True)
    description: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(100), default="")
    # 'Available' | 'In Use' | 'Maintenance' | 'Disposed' | 'Archived'
    status: Mapped[str] = mapped_column(String(20), default="Available")
    status_before_archive: Mapped[str | None] = mapped_column(String(20))
    room: Mapped[str | None] = mapped_column(String(100))
    image: Mapped[str | None] = mapped_column(Text)
    manufacturer: Mapped[str | None] = mapped_column(String(100))
    model: Mapped[str | None] = mapped_column(String(100))
    serial_number: Mapped[str | None] = mapped_column(String(100))
    vendor: Mapped[str | None] = mapped_column(String(100))
    purchase_date: Mapped[date | None] = mapped_column(Date)
    warranty_expiry: Mapped[date | None] = mapped_column(Date)
    next_maintenance: Mapped[date | None] = mapped_column(Date)
    notes: Mapped[str | None] = mapped_column(Text)
    docs: Mapped[list | None] = mapped_column(JSON)

    value: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    purchase_price: Mapped[float | None] = mapped_column(Numeric(12, 2))
    useful_life_years: Mapped[int | None] = mapped_column(Integer)
    # snapshot taken at the last write; reads recompute from the columns above
    monthly_depreciation: Mapped[float | None] = mapped_column(Numeric(12, 2))
    current_book_value: Mapped[float | None] = mapped_column(Numeric(12, 2))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    @property
    def cost(self) -> Decimal:
        """Purchase price, or the recorded value when no price was captured."""
        if self.purchase_price is not None:
            return Decimal(str(self.purchase_price))
        return Decimal(str(self.value or 0))
