from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from assetdesk.db.database import Base, utcnow


class AuditLog(Base):
    """Append-only trail of administrative actions."""

    __tablename__ = "audit_logs"
    __id_prefix__ = "AUD"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    actor: Mapped[str] = mapped_column(String(100), default="system")
    # e.g. 'AssetCategoryCreated', 'EmployeeArchived', 'TenantCreated'
    action: Mapped[str] = mapped_column(String(50), nullable=False)
    details: Mapped[str] = mapped_column(Text, default="")
    tenant_id: Mapped[str | None] = mapped_column(String(40), index=True)
