from fastapi import APIRouter
from pydantic import BaseModel

from assetdesk.utils.policy_loader import get_roles

router = APIRouter()


class RoleResponse(BaseModel):
    id: str
    designation: str
    scope: str
    status: str = "Active"


@router.get("/", response_model=list[RoleResponse])
def list_roles():
    """The organization's fixed roles. Custom roles cannot be added."""
    return get_roles()
