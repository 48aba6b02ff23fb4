"""Core domain types for Task List."""

from task_list.core.factory import TaskFactory
from task_list.core.ids import IdGenerator
from task_list.core.models import InvalidPriority, Priority, Task

__all__ = ["IdGenerator", "InvalidPriority", "Priority", "Task", "TaskFactory"]
