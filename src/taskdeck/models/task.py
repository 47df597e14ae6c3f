"""Task domain model."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from ..errors import TaskDecodeError
from .priority import PriorityLevel


class Task(BaseModel):
    """A single entry in the task list.

    Tasks carry no identifier; they are addressed by their position in the
    current ordered snapshot.
    """

    name: str
    completed: bool = False
    priority: PriorityLevel = PriorityLevel.LOW

    def to_record(self) -> dict[str, Any]:
        """Convert to the dict written to storage."""
        return {
            "name": self.name,
            "completed": self.completed,
            "priority": self.priority.value,
        }

    @classmethod
    def from_record(cls, record: object) -> "Task":
        """Create a Task from a stored record, filling in missing fields."""
        if not isinstance(record, Mapping):
            raise TaskDecodeError(f"Task record must be an object, got {type(record).__name__}")

        name = record.get("name")
        if name is None:
            name = ""
        elif not isinstance(name, str):
            raise TaskDecodeError(f"Task name must be a string, got {type(name).__name__}")

        completed = record.get("completed")
        if completed is None:
            completed = False
        elif not isinstance(completed, bool):
            raise TaskDecodeError(
                f"Task completed flag must be a boolean, got {type(completed).__name__}"
            )

        return cls(
            name=name,
            completed=completed,
            priority=PriorityLevel.parse(record.get("priority")),
        )


def task_sort_key(task: Task) -> tuple[int, bool, str]:
    """Sort key for the task list.

    Higher priority first, then incomplete before completed, then name
    (case-insensitive).
    """
    return (-task.priority.weight, task.completed, task.name.casefold())


def sort_tasks(tasks: list[Task]) -> None:
    """Sort tasks in place using task_sort_key."""
    tasks.sort(key=task_sort_key)
