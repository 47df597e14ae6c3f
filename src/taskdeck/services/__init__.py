"""Service layer for business logic."""

from .task_list_service import TaskListService, run_inline

__all__ = [
    "TaskListService",
    "run_inline",
]
