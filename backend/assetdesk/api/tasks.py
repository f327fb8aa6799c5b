from datetime import date, datetime
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, field_validator

from assetdesk.api.deps import get_employees, get_or_404, get_tasks, get_tenant_id
from assetdesk.api.lifecycle import add_lifecycle_routes
from assetdesk.core.filters import matches_search
from assetdesk.models.task import TaskItem

router = APIRouter()


class TaskCreate(BaseModel):
    title: str
    description: str = ""
    priority: Literal["Low", "Medium", "High"] = "Medium"
    status: Literal["Pending", "In Progress", "Completed"] = "Pending"
    assigned_to: str | None = None
    due_date: date | None = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v):
        if not v.strip():
            raise ValueError("Title is required.")
        return v


class TaskResponse(BaseModel):
    id: str
    tenant_id: str | None
    title: str
    description: str
    priority: str
    status: str
    assigned_to: str | None
    due_date: date | None
    created_at: datetime
    archived: bool

    model_config = {"from_attributes": True}


def _check_assignee(employees, employee_id: str | None) -> None:
    if employee_id and employees.get(employee_id) is None:
        raise HTTPException(status_code=404, detail="Employee not found.")


@router.get("/", response_model=list[TaskResponse])
def list_tasks(
    include_archived: bool = False,
    archived_only: bool = False,
    status: str | None = None,
    assigned_to: str | None = None,
    search: str | None = None,
    tasks=Depends(get_tasks),
    tenant_id: str | None = Depends(get_tenant_id),
):
    items = [
        t
        for t in tasks.list(
            include_archived=include_archived, archived_only=archived_only, tenant_id=tenant_id
        )
        if (status is None or t.status == status)
        and (assigned_to is None or t.assigned_to == assigned_to)
        and matches_search(search, t.title, t.description)
    ]
    # undated tasks last
    items.sort(key=lambda t: (t.due_date is None, t.due_date or date.max))
    return items


@router.post("/", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    data: TaskCreate,
    tasks=Depends(get_tasks),
    employees=Depends(get_employees),
    tenant_id: str | None = Depends(get_tenant_id),
):
    _check_assignee(employees, data.assigned_to)
    task = TaskItem(**data.model_dump(), tenant_id=tenant_id, archived=False)
    return tasks.add(task)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, tasks=Depends(get_tasks)):
    return get_or_404(tasks, task_id, "Task not found.")


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    data: TaskCreate,
    tasks=Depends(get_tasks),
    employees=Depends(get_employees),
):
    task = get_or_404(tasks, task_id, "Task not found.")
    _check_assignee(employees, data.assigned_to)
    return tasks.update(task, data.model_dump())


add_lifecycle_routes(router, get_tasks, TaskResponse, "Task not found.")
