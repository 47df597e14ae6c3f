"""Widget components."""

from ..screens.help import HelpScreen
from .clear_completed_modal import ClearCompletedModal
from .priority_selector import PrioritySelectorModal
from .task_list import EmptyListMessage, TaskList
from .task_row import TaskRow

__all__ = [
    "ClearCompletedModal",
    "EmptyListMessage",
    "HelpScreen",
    "PrioritySelectorModal",
    "TaskList",
    "TaskRow",
]
