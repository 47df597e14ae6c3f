"""Exception types raised by taskdeck."""


class TaskdeckError(Exception):
    """Base class for all taskdeck errors."""


class TaskIndexError(TaskdeckError, IndexError):
    """A position does not reference a task in the current snapshot."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Task index {index} out of range for list of {size}")
        self.index = index
        self.size = size


class StoreNotLoadedError(TaskdeckError):
    """A mutation was attempted before the task list was loaded."""


class StoreAlreadyLoadedError(TaskdeckError):
    """The task list was loaded more than once."""


class StorageError(TaskdeckError):
    """The key-value backend could not be read or written."""


class TaskDecodeError(TaskdeckError, ValueError):
    """A stored task record could not be decoded."""
