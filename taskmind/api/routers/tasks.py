"""Task endpoints."""

from fastapi import APIRouter, Depends, Query

from taskmind.api.dependencies import require_device_id
from taskmind.api.models import (
    CreateTaskRequest,
    OperationResponse,
    Task,
    TaskDetail,
    TaskListResponse,
    UpdateTaskRequest,
)
from taskmind.config.constants import TaskStatus
from taskmind.config.settings import Settings, get_settings
from taskmind.services.tasks import TaskService

router = APIRouter()


@router.post("", response_model=Task, status_code=201)
async def create_task(
    request: CreateTaskRequest,
    device_id: str = Depends(require_device_id),
    settings: Settings = Depends(get_settings),
) -> Task:
    """Create a task; category, priority, entities and actions are derived."""
    svc = TaskService(settings)
    return await svc.create_task(device_id, request)


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    status: TaskStatus | None = None,
    category: str | None = None,
    priority: str | None = None,
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    device_id: str = Depends(require_device_id),
    settings: Settings = Depends(get_settings),
) -> TaskListResponse:
    """List the device's tasks, newest first."""
    svc = TaskService(settings)
    tasks = await svc.list_tasks(
        device_id,
        status=status.value if status else None,
        category=category,
        priority=priority,
        offset=offset,
        limit=min(limit or settings.default_page_size, settings.max_page_size),
    )
    return TaskListResponse(count=len(tasks), data=tasks)


@router.get("/{task_id}", response_model=TaskDetail)
async def get_task(
    task_id: str,
    device_id: str = Depends(require_device_id),
    settings: Settings = Depends(get_settings),
) -> TaskDetail:
    """Get a task with its audit history."""
    svc = TaskService(settings)
    return await svc.get_task(device_id, task_id)


@router.patch("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    device_id: str = Depends(require_device_id),
    settings: Settings = Depends(get_settings),
) -> Task:
    """Partially update a task, re-classifying when the description changes."""
    svc = TaskService(settings)
    return await svc.update_task(device_id, task_id, request)


@router.delete("/{task_id}", response_model=OperationResponse)
async def delete_task(
    task_id: str,
    device_id: str = Depends(require_device_id),
    settings: Settings = Depends(get_settings),
) -> OperationResponse:
    """Delete a task."""
    svc = TaskService(settings)
    await svc.delete_task(device_id, task_id)
    return OperationResponse(id=task_id, message="Task deleted successfully")
