"""Application settings."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from ..repositories.task_store import DEFAULT_STORAGE_KEY


def _default_data_dir() -> Path:
    """XDG data directory for taskdeck."""
    base = os.environ.get("XDG_DATA_HOME")
    root = Path(base) if base else Path.home() / ".local" / "share"
    return root / "taskdeck"


class Settings(BaseSettings):
    """Application settings."""

    data_dir: Path = Field(
        default_factory=_default_data_dir,
        description="Directory holding preferences.yaml",
    )

    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        description="Key the task list is stored under",
    )

    dark: bool = Field(
        default=False,
        description="Start with the dark theme",
    )

    ephemeral: bool = Field(
        default=False,
        description="Keep tasks in memory only",
    )

    strict: bool = Field(
        default=False,
        description="Show storage errors in the UI instead of only logging them",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKDECK_",
    }

    @property
    def store_path(self) -> Path:
        """Path of the key-value file backing the task store."""
        return self.data_dir / "preferences.yaml"
