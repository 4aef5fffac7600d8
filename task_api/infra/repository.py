from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from task_api.domain.entities import TaskEntity
from task_api.domain.enums import Priority, SortOrder
from task_api.domain.filters import TaskFilters

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _apply_filters(tasks: list[TaskEntity], filters: TaskFilters) -> list[TaskEntity]:
    if filters.completed is not None:
        tasks = [task for task in tasks if task.completed is filters.completed]

    if filters.priority:
        tasks = [task for task in tasks if task.priority == filters.priority]

    if filters.sort_by == SortOrder.CREATED_ASC:
        tasks = sorted(tasks, key=lambda task: task.created_at)
    elif filters.sort_by == SortOrder.CREATED_DESC:
        tasks = sorted(tasks, key=lambda task: task.created_at, reverse=True)

    return tasks


class InMemoryTaskRepository:
    """
    Process-local task store.

    Tasks are kept in insertion order. Every public method holds the lock for
    its whole read/modify/write so concurrent request threads never observe a
    half-applied change. Returned entities are frozen snapshots.

    Ids are recomputed as ``max(live ids) + 1`` on each insert, so removing
    every task makes the next id 1 again.
    """

    def __init__(self, clock: Clock = utcnow) -> None:
        self._clock = clock
        self._tasks: list[TaskEntity] = []
        self._lock = threading.Lock()

    def list_tasks(self, filters: TaskFilters | None = None) -> list[TaskEntity]:
        with self._lock:
            return _apply_filters(list(self._tasks), filters or TaskFilters())

    def get_task(self, task_id: int) -> Optional[TaskEntity]:
        with self._lock:
            return self._find(task_id)

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def create_task(self, data: dict) -> TaskEntity:
        with self._lock:
            now = self._clock()
            task = TaskEntity(
                id=self._next_id(),
                title=data["title"],
                description=data["description"],
                completed=data.get("completed", False),
                priority=Priority(data.get("priority", Priority.MEDIUM)),
                created_at=now,
                updated_at=now,
            )
            self._tasks.append(task)
            logger.debug("Task created id=%s priority=%s", task.id, task.priority)
            return task

    def update_task(self, task_id: int, data: dict) -> Optional[TaskEntity]:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None

            task = self._tasks[index]
            changes = dict(data)
            if "priority" in changes:
                changes["priority"] = Priority(changes["priority"])
            changes["updated_at"] = max(self._clock(), task.created_at)

            updated = replace(task, **changes)
            self._tasks[index] = updated
            logger.debug("Task updated id=%s fields=%s", task_id, sorted(data))
            return updated

    def delete_task(self, task_id: int) -> Optional[TaskEntity]:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None
            removed = self._tasks.pop(index)
            logger.debug("Task deleted id=%s", task_id)
            return removed

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()

    def _find(self, task_id: int) -> Optional[TaskEntity]:
        return next((task for task in self._tasks if task.id == task_id), None)

    def _index_of(self, task_id: int) -> Optional[int]:
        return next((i for i, task in enumerate(self._tasks) if task.id == task_id), None)

    def _next_id(self) -> int:
        return max((task.id for task in self._tasks), default=0) + 1
