"""Task persistence service."""

import json
import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import HTTPException

from taskmind.api.models import (
    CreateTaskRequest,
    Task,
    TaskDetail,
    TaskHistoryEntry,
    UpdateTaskRequest,
)
from taskmind.config.constants import DEFAULT_ACTOR, HistoryAction, TaskStatus
from taskmind.config.settings import Settings
from taskmind.infrastructure.database.connection import execute_insert, execute_query
from taskmind.infrastructure.database.helpers import audit_log, check_db_result
from taskmind.infrastructure.logging.logger import StructuredLogger
from taskmind.services.classification import ClassificationResult, classify_task
from taskmind.services.enrichment import enrich_classification

logger = logging.getLogger(__name__)

TASK_COLUMNS = (
    "id, device_id, title, description, assigned_to, due_date, status, category, "
    "priority, intent, extracted_entities, suggested_actions, created_at, updated_at"
)

HISTORY_COLUMNS = "id, task_id, action, old_value, new_value, changed_by, changed_at"

# Columns a PATCH may write; values are JSON-encoded where flagged
_UPDATABLE_COLUMNS: dict[str, bool] = {
    "title": False,
    "description": False,
    "category": False,
    "priority": False,
    "status": False,
    "assigned_to": False,
    "due_date": False,
    "intent": False,
    "extracted_entities": True,
    "suggested_actions": True,
    "updated_at": False,
}


def _classification_fields(classification: ClassificationResult) -> dict[str, Any]:
    """Task columns derived from a classification."""
    return {
        "category": classification.category,
        "priority": classification.priority,
        "intent": classification.intent,
        "extracted_entities": classification.entities_dict(),
        "suggested_actions": list(classification.suggested_actions),
    }


class TaskService:
    """Handles task CRUD operations scoped to one device."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.tasks_table = f"{settings.db_schema}.Tasks"
        self.history_table = f"{settings.db_schema}.TaskHistory"
        self.step_logger = StructuredLogger(__name__)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    async def classify(
        self,
        description: str,
        *,
        caller_priority: str | None = None,
        explain: bool = True,
        enrich: bool = True,
    ) -> ClassificationResult:
        """Rule-based classification, then ML enrichment when available."""
        start = time.perf_counter()
        classification = classify_task(description, explain=explain)
        if enrich:
            classification = await enrich_classification(
                classification,
                description,
                self.settings,
                caller_priority=caller_priority,
            )
        self.step_logger.log_step(
            "classification",
            {
                "category": classification.category,
                "priority": classification.priority,
                "intent": classification.intent,
            },
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return classification

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def create_task(self, device_id: str, request: CreateTaskRequest) -> Task:
        """Classify and store a new task."""
        classification = await self.classify(request.description)

        now = datetime.now(timezone.utc)
        task = Task(
            id=str(uuid.uuid4()),
            device_id=device_id,
            title=request.title,
            description=request.description,
            assigned_to=request.assigned_to,
            due_date=request.due_date,
            status=TaskStatus.PENDING.value,
            created_at=now,
            updated_at=now,
            **_classification_fields(classification),
        )

        sql = f"""
        INSERT INTO {self.tasks_table} ({TASK_COLUMNS})
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """
        result = await self._execute(
            sql,
            (
                task.id,
                task.device_id,
                task.title,
                task.description,
                task.assigned_to,
                task.due_date,
                task.status,
                task.category,
                task.priority,
                task.intent,
                json.dumps(task.extracted_entities, ensure_ascii=False),
                json.dumps(task.suggested_actions, ensure_ascii=False),
                task.created_at,
                task.updated_at,
            ),
            "create task",
        )
        check_db_result(result, "create task")
        audit_log("CREATE", "task", task.id, device_id)

        await self._record_history(
            device_id,
            task.id,
            HistoryAction.CREATED,
            new_value=task,
            changed_by=request.assigned_to or DEFAULT_ACTOR,
        )
        return task

    async def list_tasks(
        self,
        device_id: str,
        *,
        status: str | None = None,
        category: str | None = None,
        priority: str | None = None,
        offset: int = 0,
        limit: int = 10,
    ) -> list[Task]:
        """List tasks for a device, newest first, with optional filters."""
        clauses = ["device_id = ?"]
        params: list[Any] = [device_id]
        for column, value in (("status", status), ("category", category), ("priority", priority)):
            if value:
                clauses.append(f"{column} = ?")
                params.append(value)

        sql = f"""
        SELECT {TASK_COLUMNS}
        FROM {self.tasks_table}
        WHERE {" AND ".join(clauses)}
        ORDER BY created_at DESC
        OFFSET ? ROWS FETCH NEXT ? ROWS ONLY
        """
        rows = await self._query(sql, (*params, offset, limit), "fetch tasks")
        return [Task.from_db_row(r) for r in rows]

    async def get_task(self, device_id: str, task_id: str) -> TaskDetail:
        """Get a task with its history."""
        task = await self._fetch_task(device_id, task_id)
        if task is None:
            raise HTTPException(status_code=404, detail="Task not found")

        history_rows = await self._query(
            f"""
            SELECT {HISTORY_COLUMNS}
            FROM {self.history_table}
            WHERE task_id = ? AND device_id = ?
            ORDER BY changed_at DESC
            """,
            (task_id, device_id),
            "fetch task history",
        )
        return TaskDetail(
            task=task,
            history=[TaskHistoryEntry.from_db_row(r) for r in history_rows],
        )

    async def update_task(
        self, device_id: str, task_id: str, request: UpdateTaskRequest
    ) -> Task:
        """
        Apply a partial update.

        A new description triggers re-classification. Category and priority
        sent by the caller win over both rule-based and ML values.
        """
        existing = await self._fetch_task(device_id, task_id)
        if existing is None:
            raise HTTPException(status_code=404, detail="Task not found")

        # Explicit nulls leave the column unchanged
        supplied = {k: v for k, v in request.supplied_fields().items() if v is not None}

        updates: dict[str, Any] = {}
        if request.description:
            classification = await self.classify(
                request.description, caller_priority=request.priority
            )
            updates.update(_classification_fields(classification))
        updates.update(supplied)
        updates["updated_at"] = datetime.now(timezone.utc)

        assignments = ", ".join(f"{column} = ?" for column in updates)
        values = tuple(
            json.dumps(value, ensure_ascii=False) if _UPDATABLE_COLUMNS[column] else value
            for column, value in updates.items()
        )
        result = await self._execute(
            f"UPDATE {self.tasks_table} SET {assignments} WHERE id = ? AND device_id = ?",
            (*values, task_id, device_id),
            "update task",
        )
        check_db_result(result, "update task")

        updated = await self._fetch_task(device_id, task_id)
        if updated is None:
            raise HTTPException(status_code=500, detail="Task not found after update")
        audit_log("UPDATE", "task", task_id, device_id)

        await self._record_history(
            device_id,
            task_id,
            HistoryAction.UPDATED,
            old_value=existing,
            new_value=updated,
            changed_by=request.assigned_to or DEFAULT_ACTOR,
        )
        return updated

    async def delete_task(self, device_id: str, task_id: str) -> None:
        """Delete a task, keeping its last snapshot in the history."""
        existing = await self._fetch_task(device_id, task_id)
        if existing is None:
            raise HTTPException(status_code=404, detail="Task not found")

        result = await self._execute(
            f"DELETE FROM {self.tasks_table} WHERE id = ? AND device_id = ?",
            (task_id, device_id),
            "delete task",
        )
        check_db_result(result, "delete task")
        audit_log("DELETE", "task", task_id, device_id)

        await self._record_history(
            device_id,
            task_id,
            HistoryAction.DELETED,
            old_value=existing,
            changed_by=DEFAULT_ACTOR,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _fetch_task(self, device_id: str, task_id: str) -> Task | None:
        rows = await self._query(
            f"SELECT {TASK_COLUMNS} FROM {self.tasks_table} WHERE id = ? AND device_id = ?",
            (task_id, device_id),
            "fetch task",
        )
        return Task.from_db_row(rows[0]) if rows else None

    async def _query(
        self, sql: str, params: tuple[Any, ...], operation: str
    ) -> list[dict[str, Any]]:
        try:
            return await execute_query(self.settings, sql, params)
        except Exception as e:
            logger.error("Failed to %s: %s", operation, e, exc_info=True)
            raise HTTPException(status_code=500, detail=f"Failed to {operation}") from e

    async def _execute(
        self, sql: str, params: tuple[Any, ...], operation: str
    ) -> dict[str, Any]:
        try:
            return await execute_insert(self.settings, sql, params)
        except Exception as e:
            logger.error("Failed to %s: %s", operation, e, exc_info=True)
            raise HTTPException(status_code=500, detail=f"Failed to {operation}") from e

    async def _record_history(
        self,
        device_id: str,
        task_id: str,
        action: HistoryAction,
        *,
        changed_by: str,
        old_value: Task | None = None,
        new_value: Task | None = None,
    ) -> None:
        """
        Write an audit history row.

        The task write has already happened, so a failure here is logged
        and the request still succeeds.
        """
        sql = f"""
        INSERT INTO {self.history_table} (id, task_id, device_id, action, old_value, new_value, changed_by, changed_at)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """
        params = (
            str(uuid.uuid4()),
            task_id,
            device_id,
            action.value,
            old_value.model_dump_json() if old_value else None,
            new_value.model_dump_json() if new_value else None,
            changed_by,
            datetime.now(timezone.utc),
        )
        try:
            result = await execute_insert(self.settings, sql, params)
        except Exception as e:
            self.step_logger.log_error(
                "task_history", e, {"task_id": task_id, "action": action.value}
            )
            return
        if not result.get("success") or result.get("error"):
            logger.error(
                "Failed to record %s history for task %s: %s",
                action.value,
                task_id,
                result.get("error"),
            )
