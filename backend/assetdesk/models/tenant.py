from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from assetdesk.core.lifecycle import ARCHIVED, LifecycleShape
from assetdesk.db.database import Base, utcnow


class Tenant(Base):
    __tablename__ = "tenants"
    __id_prefix__ = "TEN"
    __lifecycle__ = LifecycleShape(
        status_field="status", active_status="Active", inactive_statuses=(ARCHIVED, "Inactive")
    )

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    # 'Starter' | 'Basic' | 'Pro'
    subscription_plan: Mapped[str] = mapped_column(String(20), default="Starter")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    # 'Active' | 'Inactive' | 'Archived'
    status: Mapped[str] = mapped_column(String(20), default="Active")
    status_before_archive: Mapped[str | None] = mapped_column(String(20))

    # copied from the plan at creation, may be overridden per tenant
    max_rooms: Mapped[int] = mapped_column(Integer, default=0)
    max_personnel: Mapped[int] = mapped_column(Integer, default=0)
    asset_tracking: Mapped[bool] = mapped_column(Boolean, default=True)
    depreciation: Mapped[bool] = mapped_column(Boolean, default=True)
    maintenance_module: Mapped[bool] = mapped_column(Boolean, default=False)
    reports_level: Mapped[str] = mapped_column(String(20), default="Standard")
