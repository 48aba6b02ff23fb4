"""Application operations over the task repository.

Each use case receives its collaborators at construction and runs when
called. Operations on an unknown task id do nothing.
"""

from __future__ import annotations

from typing import Callable

import structlog

from task_list.core.factory import TaskFactory
from task_list.core.models import Priority, Task
from task_list.db.memory import TaskRepository
from task_list.renderers import TaskRenderer

logger = structlog.get_logger()


class AddTask:
    def __init__(self, task_factory: TaskFactory, tasks_repository: TaskRepository) -> None:
        self._task_factory = task_factory
        self._tasks_repository = tasks_repository

    def __call__(self, text: str) -> Task:
        task = self._task_factory.create(text=text, priority=Priority.lowest())
        self._tasks_repository.add(task)
        logger.info("task_added", task_id=task.id)
        return task


class RemoveTask:
    def __init__(self, tasks_repository: TaskRepository) -> None:
        self._tasks_repository = tasks_repository

    def __call__(self, task_id: int) -> None:
        self._tasks_repository.remove_by_id(task_id)
        logger.info("task_removed", task_id=task_id)


class EditTask:
    def __init__(self, tasks_repository: TaskRepository) -> None:
        self._tasks_repository = tasks_repository

    def __call__(self, task_id: int, text: str) -> None:
        task = self._tasks_repository.find_by_id(task_id)
        if task is None:
            logger.info("task_not_found", task_id=task_id, operation="edit")
            return

        task.text = text
        logger.info("task_edited", task_id=task_id)


class _ChangePriority:
    operation = ""

    def __init__(self, tasks_repository: TaskRepository) -> None:
        self._tasks_repository = tasks_repository

    def _step(self, priority: Priority) -> Priority:
        raise NotImplementedError

    def __call__(self, task_id: int) -> None:
        task = self._tasks_repository.find_by_id(task_id)
        if task is None:
            logger.info("task_not_found", task_id=task_id, operation=self.operation)
            return

        previous = task.priority
        task.priority = self._step(previous)
        logger.info(
            "task_priority_changed",
            task_id=task_id,
            previous=previous.name,
            current=task.priority.name,
        )


class RaisePriority(_ChangePriority):
    operation = "raise"

    def _step(self, priority: Priority) -> Priority:
        return priority.up()


class LowerPriority(_ChangePriority):
    operation = "lower"

    def _step(self, priority: Priority) -> Priority:
        return priority.down()


class PrintTasks:
    def __init__(
        self,
        task_renderer: TaskRenderer,
        tasks_repository: TaskRepository,
        echo: Callable[[str], None] = print,
    ) -> None:
        self._task_renderer = task_renderer
        self._tasks_repository = tasks_repository
        self._echo = echo

    def __call__(self) -> None:
        for task in self._tasks_repository.list_tasks():
            self._echo(self._task_renderer.render(task))
