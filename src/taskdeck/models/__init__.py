"""Data models."""

from .priority import PriorityLevel
from .task import Task, sort_tasks, task_sort_key

__all__ = [
    "PriorityLevel",
    "Task",
    "sort_tasks",
    "task_sort_key",
]
