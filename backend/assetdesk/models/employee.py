from datetime import date, datetime

from sqlalchemy import Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from assetdesk.core.lifecycle import LifecycleShape
from assetdesk.db.database import Base, utcnow


class Employee(Base):
    __tablename__ = "employees"
    __id_prefix__ = "EMP"
    __lifecycle__ = LifecycleShape(status_field="status", active_status="Active")

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tenant_id: Mapped[str | None] = mapped_column(String(40), index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100), default="")
    email: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    contact_number: Mapped[str] = mapped_column(String(40), default="")
    role: Mapped[str] = mapped_column(String(100), default="")
    hire_date: Mapped[date | None] = mapped_column(Date)
    # 'Active' | 'Inactive' | 'Archived'
    status: Mapped[str] = mapped_column(String(20), default="Active")
    status_before_archive: Mapped[str | None] = mapped_column(String(20))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)
