from datetime import datetime
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, field_validator

from assetdesk.api.deps import (
    get_actor,
    get_assets,
    get_audit_logs,
    get_categories,
    get_or_404,
    get_tenant_id,
    record_audit,
)
from assetdesk.api.lifecycle import add_lifecycle_routes
from assetdesk.db.database import utcnow
from assetdesk.models.category import AssetCategory

router = APIRouter()


class CategoryCreate(BaseModel):
    name: str
    description: str = ""
    handling_type: Literal["Consumable", "Moveable", "Fixed"] = "Fixed"

    @field_validator("name")
    @classmethod
    def name_required(cls, v):
        if not v.strip():
            raise ValueError("Category name is required.")
        return v.strip()


class CategoryResponse(BaseModel):
    id: str
    tenant_id: str | None
    name: str
    description: str
    handling_type: str
    status: str
    is_archived: bool
    items: int = 0
    created_at: datetime | None
    created_by: str | None
    updated_at: datetime | None
    updated_by: str | None
    archived_at: datetime | None
    archived_by: str | None

    model_config = {"from_attributes": True}


def _name_taken(categories, name: str, tenant_id: str | None, exclude_id: str | None = None):
    return any(
        c.id != exclude_id and c.name.lower() == name.lower()
        for c in categories.find_by(tenant_id=tenant_id)
    )


def _with_counts(items: list[AssetCategory], assets) -> list[CategoryResponse]:
    """Attach the number of active assets filed under each category name."""
    counts: dict[tuple, int] = {}
    for asset in assets.list():
        key = (asset.tenant_id, asset.category)
        counts[key] = counts.get(key, 0) + 1
    result = []
    for category in items:
        response = CategoryResponse.model_validate(category)
        response.items = counts.get((category.tenant_id, category.name), 0)
        result.append(response)
    return result


@router.get("/", response_model=list[CategoryResponse])
def list_categories(
    include_archived: bool = False,
    archived_only: bool = False,
    categories=Depends(get_categories),
    assets=Depends(get_assets),
    tenant_id: str | None = Depends(get_tenant_id),
):
    items = categories.list(
        include_archived=include_archived, archived_only=archived_only, tenant_id=tenant_id
    )
    return _with_counts(sorted(items, key=lambda c: c.name.lower()), assets)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, categories=Depends(get_categories), assets=Depends(get_assets)):
    category = get_or_404(categories, category_id, "Category not found.")
    return _with_counts([category], assets)[0]


@router.post("/", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    data: CategoryCreate,
    categories=Depends(get_categories),
    assets=Depends(get_assets),
    audits=Depends(get_audit_logs),
    tenant_id: str | None = Depends(get_tenant_id),
    actor: str | None = Depends(get_actor),
):
    if _name_taken(categories, data.name, tenant_id):
        raise HTTPException(
            status_code=400, detail="A category with this name already exists for this tenant."
        )
    category = AssetCategory(
        **data.model_dump(),
        tenant_id=tenant_id,
        status="Active",
        is_archived=False,
        created_by=actor,
        updated_by=actor,
    )
    categories.add(category)
    record_audit(
        audits, "AssetCategoryCreated", f"Created asset category: {category.name}", actor, tenant_id
    )
    return _with_counts([category], assets)[0]


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    data: CategoryCreate,
    categories=Depends(get_categories),
    assets=Depends(get_assets),
    audits=Depends(get_audit_logs),
    actor: str | None = Depends(get_actor),
):
    category = get_or_404(categories, category_id, "Category not found.")
    if _name_taken(categories, data.name, category.tenant_id, exclude_id=category.id):
        raise HTTPException(
            status_code=400, detail="A category with this name already exists for this tenant."
        )
    categories.update(
        category, {**data.model_dump(), "updated_at": utcnow(), "updated_by": actor}
    )
    record_audit(
        audits,
        "AssetCategoryUpdated",
        f"Updated asset category: {category.name}",
        actor,
        category.tenant_id,
    )
    return _with_counts([category], assets)[0]


add_lifecycle_routes(
    router,
    get_categories,
    CategoryResponse,
    "Category not found.",
    serialize=CategoryResponse.model_validate,
    audit_name="AssetCategory",
)
