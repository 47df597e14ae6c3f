"""Key-value storage backends."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import yaml

from ..errors import StorageError

logger = logging.getLogger(__name__)


class InMemoryStorage:
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get_string(self, key: str) -> str | None:
        return self._values.get(key)

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = value


class YamlFileStorage:
    """
    Flat string map persisted to a single YAML file.

    Every write rewrites the whole file through a temporary file in the
    same directory, so a crash mid-write leaves the previous file intact.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize storage.

        Args:
            path: Path to the YAML file (e.g., ~/.local/share/taskdeck/preferences.yaml)
        """
        self.path = path

    def get_string(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is None:
            return None
        return str(value)

    def set_string(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    # --- Private Methods ---

    def _read(self) -> dict[str, str]:
        """Load the whole map; a missing file is an empty map."""
        if not self.path.exists():
            return {}

        try:
            with self.path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not contain a key-value map")
        return data

    def _write(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}-", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write("# Auto-generated - do not edit manually\n")
                    yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

        logger.debug("Wrote %d key(s) to %s", len(data), self.path)
