from __future__ import annotations

from typing import Any, Mapping

from task_api.domain.entities import TaskEntity
from task_api.domain.enums import Priority
from task_api.domain.errors import NotFound
from task_api.domain.filters import TaskFilters
from task_api.domain.validation import (
    parse_priority_level,
    parse_task_id,
    validate_new_task,
    validate_task_fields,
)
from task_api.infra.repository import InMemoryTaskRepository

TASK_FIELDS = ("title", "description", "completed", "priority")
TEXT_FIELDS = ("title", "description")


class TaskService:
    def __init__(self, repo: InMemoryTaskRepository) -> None:
        self._repo = repo

    def list_tasks(self, filters: TaskFilters | None = None) -> list[TaskEntity]:
        return self._repo.list_tasks(filters or TaskFilters())

    def get_task(self, task_id: Any) -> TaskEntity:
        task_id = parse_task_id(task_id)
        task = self._repo.get_task(task_id)
        if task is None:
            raise _not_found(task_id)
        return task

    def create_task(self, data: Mapping[str, Any]) -> TaskEntity:
        validate_new_task(data)
        normalized = self._normalize_data(data)
        normalized.setdefault("completed", False)
        normalized.setdefault("priority", Priority.MEDIUM.value)
        return self._repo.create_task(normalized)

    def update_task(self, task_id: Any, data: Mapping[str, Any]) -> TaskEntity:
        task = self.get_task(task_id)
        validate_task_fields(data)
        updated = self._repo.update_task(task.id, self._normalize_data(data))
        if updated is None:
            raise _not_found(task.id)
        return updated

    def delete_task(self, task_id: Any) -> TaskEntity:
        task_id = parse_task_id(task_id)
        removed = self._repo.delete_task(task_id)
        if removed is None:
            raise _not_found(task_id)
        return removed

    def list_by_priority(self, level: Any) -> list[TaskEntity]:
        priority = parse_priority_level(level)
        return self._repo.list_tasks(TaskFilters(priority=priority.value))

    def _normalize_data(self, data: Mapping[str, Any]) -> dict:
        normalized = {key: data[key] for key in TASK_FIELDS if key in data}
        for key in TEXT_FIELDS:
            if key in normalized:
                normalized[key] = normalized[key].strip()
        return normalized


def _not_found(task_id: int) -> NotFound:
    return NotFound(f"Task with ID {task_id} not found")
