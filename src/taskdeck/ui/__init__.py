"""UI components."""

from .screens.task_list import TaskListScreen
from .widgets.task_list import TaskList
from .widgets.task_row import TaskRow

__all__ = [
    "TaskList",
    "TaskListScreen",
    "TaskRow",
]
