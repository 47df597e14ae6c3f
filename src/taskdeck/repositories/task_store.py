"""Single-key JSON blob store for the task list."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence

from ..errors import StorageError, TaskDecodeError
from ..models import Task
from .protocol import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks_v1"

ErrorHook = Callable[[str, Exception], None]


class TaskStore:
    """
    Persists the whole task list as one JSON array under a fixed key.

    Load and save never raise. Failures are logged and, when an error hook
    is given, reported to it as ``(operation, exception)`` where operation
    is "load" or "save".
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = DEFAULT_STORAGE_KEY,
        on_error: ErrorHook | None = None,
    ) -> None:
        self.storage = storage
        self.key = key
        self._on_error = on_error

    def load(self) -> list[Task]:
        """Load all stored tasks in stored order.

        Returns an empty list if nothing is stored or the stored value
        cannot be decoded.
        """
        try:
            raw = self.storage.get_string(self.key)
        except (OSError, StorageError) as e:
            self._report("load", e)
            return []

        if raw is None:
            logger.debug("No stored tasks under %r", self.key)
            return []

        try:
            tasks = decode_tasks(raw)
        except (ValueError, TypeError, RecursionError) as e:
            self._report("load", e)
            return []

        logger.info("Loaded %d task(s) from %r", len(tasks), self.key)
        return tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        """Overwrite the stored list with tasks.

        Returns:
            True if the write succeeded, False if it failed.
        """
        raw = encode_tasks(tasks)
        try:
            self.storage.set_string(self.key, raw)
        except (OSError, StorageError) as e:
            self._report("save", e)
            return False

        logger.debug("Saved %d task(s) to %r", len(tasks), self.key)
        return True

    def _report(self, operation: str, exc: Exception) -> None:
        logger.warning("Task %s failed for key %r: %s", operation, self.key, exc)
        if self._on_error is not None:
            self._on_error(operation, exc)


def encode_tasks(tasks: Sequence[Task]) -> str:
    """Serialize tasks to a JSON array string."""
    return json.dumps([task.to_record() for task in tasks])


def decode_tasks(raw: str) -> list[Task]:
    """Parse a JSON array string into tasks.

    Raises:
        ValueError: If the JSON is malformed or not an array of task records.
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TaskDecodeError(f"Stored tasks must be a JSON array, got {type(data).__name__}")
    return [Task.from_record(item) for item in data]
