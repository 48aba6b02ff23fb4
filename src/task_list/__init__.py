"""Task List - an in-memory prioritised task list."""

from task_list.core import IdGenerator, InvalidPriority, Priority, Task, TaskFactory
from task_list.db.memory import TaskRepository

__version__ = "0.1.0"

__all__ = [
    "IdGenerator",
    "InvalidPriority",
    "Priority",
    "Task",
    "TaskFactory",
    "TaskRepository",
    "__version__",
]
