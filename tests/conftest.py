"""Shared fixtures for Task List tests."""

import pytest
import structlog

from task_list.config import configure_logging, get_settings
from task_list.core.factory import TaskFactory
from task_list.core.ids import IdGenerator
from task_list.core.models import Priority, Task
from task_list.db.memory import TaskRepository


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep settings independent of the developer's environment."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "RENDERER", "ID_START"):
        monkeypatch.delenv(f"TASK_LIST_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def debug_logging():
    """Let every event through so capture_logs can see it."""
    configure_logging("DEBUG")
    yield
    structlog.reset_defaults()


@pytest.fixture
def id_generator():
    return IdGenerator()


@pytest.fixture
def task_factory(id_generator):
    return TaskFactory(id_generator)


@pytest.fixture
def repository():
    return TaskRepository()


@pytest.fixture
def make_task():
    """Build a task directly, bypassing the factory."""

    def _make(task_id: int, text: str = "Task", priority: Priority = Priority.LOW) -> Task:
        return Task(id=task_id, text=text, priority=priority)

    return _make
