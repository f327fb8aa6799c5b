from datetime import date, datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from assetdesk.core.lifecycle import LifecycleShape
from assetdesk.db.database import Base, utcnow


class MaintenanceRecord(Base):
    __tablename__ = "maintenance_records"
    __id_prefix__ = "MNT"
    __lifecycle__ = LifecycleShape(flag_field="archived")

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tenant_id: Mapped[str | None] = mapped_column(String(40), index=True)
    # plain reference: the asset may be archived later, nothing cascades
    asset_id: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, default="")
    # 'Pending' | 'In Progress' | 'Completed' | 'Scheduled'
    status: Mapped[str] = mapped_column(String(20), default="Pending")
    priority: Mapped[str] = mapped_column(String(10), default="Medium")
    # 'Preventive' | 'Corrective' | 'Upgrade' | 'Inspection'
    type: Mapped[str] = mapped_column(String(20), default="Corrective")
    frequency: Mapped[str | None] = mapped_column(String(20))
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)
    cost: Mapped[float | None] = mapped_column(Numeric(12, 2))
    attachments: Mapped[list | None] = mapped_column(JSON)
    date_reported: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    archived: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
