"""Storage protocol for key-value backends."""

from typing import Protocol


class KeyValueStorage(Protocol):
    """Interface for flat string-keyed storage backends.

    Implementations include:
    - In-memory (tests, ephemeral sessions)
    - YAML file on disk

    Backends raise StorageError when the underlying medium cannot be
    read or written.
    """

    def get_string(self, key: str) -> str | None:
        """Read the value stored under key.

        Returns:
            The stored string, or None if the key is absent.
        """
        ...

    def set_string(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...
