"""Repository layer for data access."""

from .key_value import InMemoryStorage, YamlFileStorage
from .protocol import KeyValueStorage
from .task_store import DEFAULT_STORAGE_KEY, TaskStore

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "InMemoryStorage",
    "KeyValueStorage",
    "TaskStore",
    "YamlFileStorage",
]
