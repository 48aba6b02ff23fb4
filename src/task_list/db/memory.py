"""In-memory task storage for Task List."""

from __future__ import annotations

import structlog

from task_list.core.models import Task

logger = structlog.get_logger()


class TaskRepository:
    """Process-local collection of tasks.

    Ids are not checked for uniqueness. If two tasks share an id, lookups
    resolve to the one added first and removal drops both.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    # --- Commands ---

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove_by_id(self, task_id: int) -> None:
        remaining = [task for task in self._tasks if task.id != task_id]
        removed = len(self._tasks) - len(remaining)
        self._tasks = remaining
        if removed:
            logger.debug("tasks_removed_from_store", task_id=task_id, count=removed)

    # --- Queries ---

    def find_by_id(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_tasks(self) -> list[Task]:
        """Return a new list ordered HIGH to LOW, keeping insertion order within a level."""
        return sorted(self._tasks, key=lambda task: task.priority, reverse=True)
