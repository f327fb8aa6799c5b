from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from assetdesk.core.lifecycle import LifecycleShape
from assetdesk.db.database import Base, utcnow


class TaskItem(Base):
    __tablename__ = "tasks"
    __id_prefix__ = "TSK"
    __lifecycle__ = LifecycleShape(flag_field="archived")

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tenant_id: Mapped[str | None] = mapped_column(String(40), index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    priority: Mapped[str] = mapped_column(String(10), default="Medium")
    # 'Pending' | 'In Progress' | 'Completed'
    status: Mapped[str] = mapped_column(String(20), default="Pending")
    assigned_to: Mapped[str | None] = mapped_column(String(40))  # employee id
    due_date: Mapped[date | None] = mapped_column(Date)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    archived: Mapped[bool] = mapped_column(Boolean, default=False)
