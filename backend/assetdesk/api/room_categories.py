from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, field_validator

from assetdesk.api.deps import get_or_404, get_room_categories, get_tenant_id
from assetdesk.api.lifecycle import add_lifecycle_routes
from assetdesk.models.room import RoomCategory

router = APIRouter()


class RoomCategoryCreate(BaseModel):
    name: str
    sub_category: str = ""
    description: str = ""
    base_rate: float = 0
    max_occupancy: int = 0

    @field_validator("base_rate")
    @classmethod
    def non_negative_rate(cls, v):
        if v < 0:
            raise ValueError("Base rate must be zero or positive.")
        return v


class RoomCategoryResponse(BaseModel):
    id: str
    tenant_id: str | None
    name: str
    sub_category: str
    description: str
    base_rate: float
    max_occupancy: int
    status: str
    archived: bool

    model_config = {"from_attributes": True}


@router.get("/", response_model=list[RoomCategoryResponse])
def list_room_categories(
    include_archived: bool = False,
    archived_only: bool = False,
    room_categories=Depends(get_room_categories),
    tenant_id: str | None = Depends(get_tenant_id),
):
    return room_categories.list(
        include_archived=include_archived, archived_only=archived_only, tenant_id=tenant_id
    )


@router.post("/", response_model=RoomCategoryResponse, status_code=status.HTTP_201_CREATED)
def create_room_category(
    data: RoomCategoryCreate,
    room_categories=Depends(get_room_categories),
    tenant_id: str | None = Depends(get_tenant_id),
):
    category = RoomCategory(**data.model_dump(), tenant_id=tenant_id, status="Active", archived=False)
    return room_categories.add(category)


@router.get("/{category_id}", response_model=RoomCategoryResponse)
def get_room_category(category_id: str, room_categories=Depends(get_room_categories)):
    return get_or_404(room_categories, category_id, "Room category not found.")


@router.put("/{category_id}", response_model=RoomCategoryResponse)
def update_room_category(
    category_id: str,
    data: RoomCategoryCreate,
    room_categories=Depends(get_room_categories),
):
    category = get_or_404(room_categories, category_id, "Room category not found.")
    return room_categories.update(category, data.model_dump())


add_lifecycle_routes(
    router, get_room_categories, RoomCategoryResponse, "Room category not found."
)
