"""Text renderers that turn a task into one display line."""

from __future__ import annotations

from typing import Protocol

from task_list.core.models import Task


class TaskRenderer(Protocol):
    def render(self, task: Task) -> str: ...


class PlainRenderer:
    def render(self, task: Task) -> str:
        return f"- {task.id}: {task.text}"


class CsvRenderer:
    """Comma-separated ``id,text,level``. Text is written as-is, without quoting."""

    def render(self, task: Task) -> str:
        return f"{task.id},{task.text},{task.priority.level}"


RENDERERS: dict[str, type[TaskRenderer]] = {
    "plain": PlainRenderer,
    "csv": CsvRenderer,
}


def get_renderer(name: str) -> TaskRenderer:
    try:
        renderer_cls = RENDERERS[name]
    except KeyError:
        valid = ", ".join(sorted(RENDERERS))
        raise ValueError(f"Unknown renderer '{name}'. Must be one of: {valid}")
    return renderer_cls()
