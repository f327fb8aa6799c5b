import logging
from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, field_validator

from assetdesk.api.deps import (
    get_actor,
    get_audit_logs,
    get_employees,
    get_or_404,
    get_tenant_id,
    get_tenant_or_none,
    get_tenants,
    record_audit,
)
from assetdesk.api.lifecycle import add_lifecycle_routes
from assetdesk.core.filters import matches_search
from assetdesk.core.lifecycle import is_archived
from assetdesk.core.tenancy import PlanLimitExceeded, check_capacity
from assetdesk.models.employee import Employee

logger = logging.getLogger(__name__)

router = APIRouter()


class EmployeeCreate(BaseModel):
    first_name: str
    middle_name: str | None = None
    last_name: str = ""
    email: str
    contact_number: str = ""
    role: str = ""
    hire_date: date | None = None
    status: Literal["Active", "Inactive"] = "Active"

    @field_validator("first_name")
    @classmethod
    def first_name_required(cls, v):
        if not v.strip():
            raise ValueError("First name is required.")
        return v

    @field_validator("email")
    @classmethod
    def valid_email(cls, v):
        v = v.strip().lower()
        if "@" not in v or v.startswith("@") or v.endswith("@"):
            raise ValueError("A valid email address is required.")
        return v


class EmployeeResponse(BaseModel):
    id: str
    tenant_id: str | None
    first_name: str
    middle_name: str | None
    last_name: str
    full_name: str
    email: str
    contact_number: str
    role: str
    hire_date: date | None
    status: str

    model_config = {"from_attributes": True}


def _email_taken(employees, email: str, exclude_id: str | None = None) -> bool:
    return any(e.id != exclude_id for e in employees.find_by(email=email))


@router.get("/", response_model=list[EmployeeResponse])
def list_employees(
    include_archived: bool = False,
    archived_only: bool = False,
    role: str | None = None,
    search: str | None = None,
    employees=Depends(get_employees),
    tenant_id: str | None = Depends(get_tenant_id),
):
    return [
        e
        for e in employees.list(
            include_archived=include_archived, archived_only=archived_only, tenant_id=tenant_id
        )
        if (role is None or e.role == role)
        and matches_search(search, e.id, e.full_name, e.email)
    ]


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    data: EmployeeCreate,
    employees=Depends(get_employees),
    tenants=Depends(get_tenants),
    audits=Depends(get_audit_logs),
    tenant_id: str | None = Depends(get_tenant_id),
    actor: str | None = Depends(get_actor),
):
    tenant = get_tenant_or_none(tenants, tenant_id)
    if tenant is not None:
        try:
            check_capacity(tenant, "personnel", employees.count(tenant_id=tenant_id))
        except PlanLimitExceeded as e:
            logger.warning("Employee creation refused for tenant %s: %s", tenant_id, e)
            raise HTTPException(status_code=400, detail=str(e))
    if _email_taken(employees, data.email):
        raise HTTPException(status_code=400, detail="A user with this email address already exists.")

    employee = Employee(**data.model_dump(), tenant_id=tenant_id)
    employees.add(employee)
    record_audit(
        audits,
        "EmployeeCreated",
        f"Created employee {employee.full_name} ({employee.email})",
        actor,
        tenant_id,
    )
    return employee


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: str, employees=Depends(get_employees)):
    return get_or_404(employees, employee_id, "Employee not found.")


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(employee_id: str, data: EmployeeCreate, employees=Depends(get_employees)):
    employee = get_or_404(employees, employee_id, "Employee not found.")
    if _email_taken(employees, data.email, exclude_id=employee.id):
        raise HTTPException(status_code=400, detail="A user with this email address already exists.")
    fields = data.model_dump()
    if is_archived(employee):
        fields["status_before_archive"] = fields.pop("status")
    return employees.update(employee, fields)


add_lifecycle_routes(
    router, get_employees, EmployeeResponse, "Employee not found.", audit_name="Employee"
)
