"""Task construction."""

from __future__ import annotations

from task_list.core.ids import IdGenerator
from task_list.core.models import Priority, Task


class TaskFactory:
    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator

    def create(self, text: str, priority: Priority | None = None) -> Task:
        """Build a task with a fresh id. Priority defaults to the lowest level."""
        return Task(
            id=self._id_generator.next(),
            text=text,
            priority=priority if priority is not None else Priority.lowest(),
        )
