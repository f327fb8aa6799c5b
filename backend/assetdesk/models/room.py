from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from assetdesk.core.lifecycle import LifecycleShape
from assetdesk.db.database import Base


class Room(Base):
    __tablename__ = "rooms"
    __id_prefix__ = "RM"
    __lifecycle__ = LifecycleShape(flag_field="archived")

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tenant_id: Mapped[str | None] = mapped_column(String(40), index=True)
    unit_id: Mapped[str] = mapped_column(String(40), nullable=False)  # room number, e.g. 101
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    floor: Mapped[str] = mapped_column(String(20), default="")
    category_id: Mapped[str | None] = mapped_column(String(40))
    # 'Available' | 'Occupied' | 'Maintenance' | 'Deactivated'
    status: Mapped[str] = mapped_column(String(20), default="Available")
    max_occupancy: Mapped[int] = mapped_column(Integer, default=0)
    archived: Mapped[bool] = mapped_column(Boolean, default=False)


class RoomCategory(Base):
    __tablename__ = "room_categories"
    __id_prefix__ = "RC"
    __lifecycle__ = LifecycleShape(
        status_field="status", flag_field="archived", active_status="Active"
    )

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    tenant_id: Mapped[str | None] = mapped_column(String(40), index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)  # e.g. Deluxe
    sub_category: Mapped[str] = mapped_column(String(100), default="")  # e.g. Double Bed
    description: Mapped[str] = mapped_column(Text, default="")
    base_rate: Mapped[float] = mapped_column(Numeric(10, 2), default=0)
    max_occupancy: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[str] = mapped_column(String(20), default="Active")
    status_before_archive: Mapped[str | None] = mapped_column(String(20))
    archived: Mapped[bool] = mapped_column(Boolean, default=False)
