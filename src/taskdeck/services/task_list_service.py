"""Service for the in-memory task list and its persistence."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import StoreAlreadyLoadedError, StoreNotLoadedError, TaskIndexError
from ..models import PriorityLevel, Task, sort_tasks
from ..repositories import TaskStore

logger = logging.getLogger(__name__)

PersistJob = Callable[[], object]
Dispatcher = Callable[[PersistJob], None]


def run_inline(job: PersistJob) -> None:
    """Default dispatcher: run the persist job on the calling thread."""
    job()


class TaskListService:
    """
    Owns the ordered task list.

    Every mutation updates memory, re-sorts where the operation calls for
    it, then hands a snapshot to the dispatcher for saving. The dispatcher
    decides where the save runs; callers never wait on it.

    Indexes refer to the snapshot returned by the previous call and are
    invalidated by any mutation.
    """

    def __init__(self, store: TaskStore, dispatch: Dispatcher | None = None) -> None:
        self.store = store
        self._dispatch = dispatch or run_inline
        self._tasks: list[Task] = []
        self._loaded = False

    @property
    def tasks(self) -> list[Task]:
        """Copy of the current ordered list for rendering."""
        return [task.model_copy() for task in self._tasks]

    @property
    def has_completed(self) -> bool:
        """Whether any task is completed (clear_completed would remove something)."""
        return any(task.completed for task in self._tasks)

    def load(self) -> list[Task]:
        """Populate the list from the store. Must be called exactly once."""
        if self._loaded:
            raise StoreAlreadyLoadedError("Task list already loaded")

        self._tasks = self.store.load()
        sort_tasks(self._tasks)
        self._loaded = True
        logger.info("Task list ready with %d task(s)", len(self._tasks))
        return self.tasks

    def add_task(self, name: str, priority: PriorityLevel = PriorityLevel.MEDIUM) -> list[Task]:
        """
        Add a new incomplete task.

        Leading and trailing whitespace is stripped from name. A name that
        is empty after stripping is ignored and nothing is saved.
        """
        self._require_loaded()

        name = name.strip()
        if not name:
            logger.debug("Ignoring task with empty name")
            return self.tasks

        self._tasks.append(Task(name=name, priority=priority))
        sort_tasks(self._tasks)
        logger.info("Task added: %r (priority=%s)", name, priority.value)
        self._persist()
        return self.tasks

    def toggle_completed(self, index: int, completed: bool | None = None) -> list[Task]:
        """
        Set the completed flag of the task at index.

        None (the default) is treated as False. The list is not re-sorted,
        so the task keeps its position until the next add, priority change
        or load.
        """
        task = self._get(index)
        task.completed = bool(completed)
        logger.info("Task %s: %r", "completed" if task.completed else "reopened", task.name)
        self._persist()
        return self.tasks

    def delete_task(self, index: int) -> list[Task]:
        """Remove the task at index."""
        task = self._get(index)
        del self._tasks[index]
        logger.info("Task deleted: %r", task.name)
        self._persist()
        return self.tasks

    def change_priority(self, index: int, priority: PriorityLevel) -> list[Task]:
        """Set the priority of the task at index and re-sort."""
        task = self._get(index)
        old_priority = task.priority
        task.priority = priority
        sort_tasks(self._tasks)
        logger.info(
            "Task priority changed: %r (%s -> %s)", task.name, old_priority.value, priority.value
        )
        self._persist()
        return self.tasks

    def clear_completed(self) -> list[Task]:
        """Remove every completed task, keeping the order of the rest."""
        self._require_loaded()

        before = len(self._tasks)
        self._tasks = [task for task in self._tasks if not task.completed]
        logger.info("Cleared %d completed task(s)", before - len(self._tasks))
        self._persist()
        return self.tasks

    # --- Private Methods ---

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise StoreNotLoadedError("Task list has not been loaded yet")

    def _get(self, index: int) -> Task:
        """Return the task at index, rejecting negative and out-of-range values."""
        self._require_loaded()
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))
        return self._tasks[index]

    def _persist(self) -> None:
        """Hand a snapshot of the list to the dispatcher for saving."""
        snapshot = self.tasks
        self._dispatch(lambda: self.store.save(snapshot))
