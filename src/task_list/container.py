"""Dependency wiring for Task List.

The container is built once at startup. Shared collaborators (the id
generator, factory and repository) live as long as the container does;
use cases are constructed from them on each access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import structlog

from task_list.config import Settings, get_settings
from task_list.core.factory import TaskFactory
from task_list.core.ids import IdGenerator
from task_list.db.memory import TaskRepository
from task_list.renderers import TaskRenderer, get_renderer
from task_list.use_cases import (
    AddTask,
    EditTask,
    LowerPriority,
    PrintTasks,
    RaisePriority,
    RemoveTask,
)

logger = structlog.get_logger()


@dataclass
class Container:
    id_generator: IdGenerator
    task_factory: TaskFactory
    tasks_repository: TaskRepository
    task_renderer: TaskRenderer
    echo: Callable[[str], None] = print

    @property
    def add_task(self) -> AddTask:
        return AddTask(task_factory=self.task_factory, tasks_repository=self.tasks_repository)

    @property
    def remove_task(self) -> RemoveTask:
        return RemoveTask(tasks_repository=self.tasks_repository)

    @property
    def edit_task(self) -> EditTask:
        return EditTask(tasks_repository=self.tasks_repository)

    @property
    def raise_priority(self) -> RaisePriority:
        return RaisePriority(tasks_repository=self.tasks_repository)

    @property
    def lower_priority(self) -> LowerPriority:
        return LowerPriority(tasks_repository=self.tasks_repository)

    @property
    def print_tasks(self) -> PrintTasks:
        return PrintTasks(
            task_renderer=self.task_renderer,
            tasks_repository=self.tasks_repository,
            echo=self.echo,
        )


def build_container(
    settings: Settings | None = None,
    *,
    tasks_repository: TaskRepository | None = None,
    task_renderer: TaskRenderer | None = None,
    echo: Callable[[str], None] = print,
) -> Container:
    """Wire the application. Keyword overrides replace the default collaborators."""
    settings = settings or get_settings()

    id_generator = IdGenerator(start=settings.id_start)
    container = Container(
        id_generator=id_generator,
        task_factory=TaskFactory(id_generator),
        tasks_repository=tasks_repository if tasks_repository is not None else TaskRepository(),
        task_renderer=task_renderer or get_renderer(settings.renderer),
        echo=echo,
    )
    logger.debug(
        "container_built",
        renderer=type(container.task_renderer).__name__,
        id_start=settings.id_start,
    )
    return container
