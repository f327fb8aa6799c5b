import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, field_validator

from assetdesk.api.deps import (
    get_or_404,
    get_room_categories,
    get_rooms,
    get_tenant_id,
    get_tenant_or_none,
    get_tenants,
)
from assetdesk.api.lifecycle import add_lifecycle_routes
from assetdesk.core.filters import matches_search
from assetdesk.core.tenancy import PlanLimitExceeded, check_capacity
from assetdesk.models.room import Room

logger = logging.getLogger(__name__)

router = APIRouter()


class RoomCreate(BaseModel):
    unit_id: str
    name: str
    floor: str = ""
    category_id: str | None = None
    status: Literal["Available", "Occupied", "Maintenance", "Deactivated"] = "Available"
    max_occupancy: int = 0

    @field_validator("max_occupancy")
    @classmethod
    def non_negative_occupancy(cls, v):
        if v < 0:
            raise ValueError("Max occupancy must be zero or positive.")
        return v


class RoomResponse(BaseModel):
    id: str
    tenant_id: str | None
    unit_id: str
    name: str
    floor: str
    category_id: str | None
    status: str
    max_occupancy: int
    archived: bool

    model_config = {"from_attributes": True}


def _check_category(room_categories, category_id: str | None) -> None:
    if category_id and room_categories.get(category_id) is None:
        raise HTTPException(status_code=404, detail="Room category not found.")


@router.get("/", response_model=list[RoomResponse])
def list_rooms(
    include_archived: bool = False,
    archived_only: bool = False,
    category_id: str | None = None,
    status: str | None = None,
    search: str | None = None,
    rooms=Depends(get_rooms),
    tenant_id: str | None = Depends(get_tenant_id),
):
    """status accepts a comma separated list, e.g. 'Available,Occupied'."""
    statuses = {s.strip() for s in status.split(",")} if status else None
    return [
        r
        for r in rooms.list(
            include_archived=include_archived, archived_only=archived_only, tenant_id=tenant_id
        )
        if (category_id is None or r.category_id == category_id)
        and (statuses is None or r.status in statuses)
        and matches_search(search, r.unit_id, r.name)
    ]


@router.get("/stats")
def room_stats(rooms=Depends(get_rooms), tenant_id: str | None = Depends(get_tenant_id)):
    active = rooms.list(tenant_id=tenant_id)
    return {
        "total": len(active),
        "occupied": sum(1 for r in active if r.status == "Occupied"),
        "available": sum(1 for r in active if r.status == "Available"),
        "maintenance": sum(1 for r in active if r.status == "Maintenance"),
    }


@router.post("/", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(
    data: RoomCreate,
    rooms=Depends(get_rooms),
    room_categories=Depends(get_room_categories),
    tenants=Depends(get_tenants),
    tenant_id: str | None = Depends(get_tenant_id),
):
    tenant = get_tenant_or_none(tenants, tenant_id)
    if tenant is not None:
        try:
            check_capacity(tenant, "rooms", rooms.count(tenant_id=tenant_id))
        except PlanLimitExceeded as e:
            logger.warning("Room creation refused for tenant %s: %s", tenant_id, e)
            raise HTTPException(status_code=400, detail=str(e))
    _check_category(room_categories, data.category_id)

    room = Room(**data.model_dump(), tenant_id=tenant_id, archived=False)
    rooms.add(room)
    return room


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: str, rooms=Depends(get_rooms)):
    return get_or_404(rooms, room_id, "Room not found.")


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(
    room_id: str,
    data: RoomCreate,
    rooms=Depends(get_rooms),
    room_categories=Depends(get_room_categories),
):
    room = get_or_404(rooms, room_id, "Room not found.")
    _check_category(room_categories, data.category_id)
    return rooms.update(room, data.model_dump())


add_lifecycle_routes(router, get_rooms, RoomResponse, "Room not found.")
