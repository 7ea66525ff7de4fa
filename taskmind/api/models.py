"""Request/Response models for API endpoints."""

import json
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from taskmind.config.constants import STATUS_ALIASES, TaskStatus


def _parse_json_column(value: Any, default: Any) -> Any:
    """Decode a JSON text column, tolerating already-decoded values."""
    if value is None or value == "":
        return default
    if isinstance(value, (dict, list)):
        return value
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        return default


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")


class OperationResponse(BaseModel):
    """Acknowledgement of a mutation."""

    status: str = "success"
    id: str
    message: Optional[str] = None


# ==========================================
#  TASKS
# ==========================================


class CreateTaskRequest(BaseModel):
    """Request to create a task."""

    title: str = Field(..., min_length=1, description="Title is required")
    description: str = Field(..., min_length=1, description="Description is required")
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None


class UpdateTaskRequest(BaseModel):
    """Partial update of a task. Only supplied fields are changed."""

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v: Any) -> Any:
        if v is None or not isinstance(v, str):
            return v
        normalized = STATUS_ALIASES.get(v.strip().lower())
        if normalized is None:
            raise ValueError("Invalid status value")
        return normalized

    def supplied_fields(self) -> dict[str, Any]:
        """Fields the caller actually sent, with enums as plain values."""
        return self.model_dump(exclude_unset=True, mode="json")


class Task(BaseModel):
    """Task as stored for a device."""

    id: str
    device_id: str
    title: str
    description: str
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None
    status: str = TaskStatus.PENDING.value
    category: str
    priority: str
    intent: Optional[str] = None
    extracted_entities: dict[str, Any] = {}
    suggested_actions: list[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_db_row(cls, row: dict[str, Any]) -> "Task":
        return cls(
            id=str(row["id"]),
            device_id=str(row["device_id"]),
            title=row.get("title") or "",
            description=row.get("description") or "",
            assigned_to=row.get("assigned_to"),
            due_date=str(row["due_date"]) if row.get("due_date") is not None else None,
            status=row.get("status") or TaskStatus.PENDING.value,
            category=row.get("category") or "",
            priority=row.get("priority") or "",
            intent=row.get("intent"),
            extracted_entities=_parse_json_column(row.get("extracted_entities"), {}),
            suggested_actions=_parse_json_column(row.get("suggested_actions"), []),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )


class TaskHistoryEntry(BaseModel):
    """Audit record of one task mutation."""

    id: str
    task_id: str
    action: str
    old_value: Optional[dict[str, Any]] = None
    new_value: Optional[dict[str, Any]] = None
    changed_by: str
    changed_at: Optional[datetime] = None

    @classmethod
    def from_db_row(cls, row: dict[str, Any]) -> "TaskHistoryEntry":
        return cls(
            id=str(row["id"]),
            task_id=str(row["task_id"]),
            action=row["action"],
            old_value=_parse_json_column(row.get("old_value"), None),
            new_value=_parse_json_column(row.get("new_value"), None),
            changed_by=row.get("changed_by") or "system",
            changed_at=row.get("changed_at"),
        )


class TaskDetail(BaseModel):
    """A task with its audit history, newest first."""

    task: Task
    history: list[TaskHistoryEntry] = []


class TaskListResponse(BaseModel):
    """Page of tasks."""

    count: int
    data: list[Task]


# ==========================================
#  CLASSIFICATION PREVIEW
# ==========================================


class ClassifyRequest(BaseModel):
    """Request to classify a description without storing a task."""

    description: str = Field(..., min_length=1)
