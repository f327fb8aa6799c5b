from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from assetdesk.core.lifecycle import LifecycleShape
from assetdesk.db.database import Base, utcnow


class AssetCategory(Base):
    __tablename__ = "asset_categories"
    __id_prefix__ = "CAT"
    __lifecycle__ = LifecycleShape(
        status_field="status", flag_field="is_archived", active_status="Active"
    )

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tenant_id: Mapped[str | None] = mapped_column(String(40), index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    # 'Consumable' | 'Moveable' | 'Fixed'
    handling_type: Mapped[str] = mapped_column(String(20), default="Fixed")
    status: Mapped[str] = mapped_column(String(20), default="Active")
    status_before_archive: Mapped[str | None] = mapped_column(String(20))
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    created_by: Mapped[str | None] = mapped_column(String(100))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_by: Mapped[str | None] = mapped_column(String(100))
    archived_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    archived_by: Mapped[str | None] = mapped_column(String(100))
