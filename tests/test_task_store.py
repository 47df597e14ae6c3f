"""Tests for TaskStore."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from taskdeck.errors import StorageError
from taskdeck.models import PriorityLevel, Task
from taskdeck.repositories import (
    DEFAULT_STORAGE_KEY,
    InMemoryStorage,
    TaskStore,
    YamlFileStorage,
)
from taskdeck.repositories.task_store import decode_tasks, encode_tasks
from taskdeck.services import TaskListService


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage: InMemoryStorage) -> TaskStore:
    return TaskStore(storage)


class FailingStorage:
    """Storage whose reads and writes always fail."""

    def get_string(self, key: str) -> str | None:
        raise StorageError("disk on fire")

    def set_string(self, key: str, value: str) -> None:
        raise StorageError("disk on fire")


class TestTaskStoreLoad:
    """Tests for TaskStore.load."""

    def test_load_absent_key_returns_empty(self, store: TaskStore):
        """Nothing stored yet loads as an empty list."""
        assert store.load() == []

    def test_load_decodes_records_in_stored_order(self, storage: InMemoryStorage, store: TaskStore):
        """Records load in the order they were stored (no sorting)."""
        storage.set_string(
            DEFAULT_STORAGE_KEY,
            json.dumps(
                [
                    {"name": "Low one", "completed": False, "priority": "low"},
                    {"name": "High one", "completed": True, "priority": "high"},
                ]
            ),
        )

        tasks = store.load()

        assert tasks == [
            Task(name="Low one", priority=PriorityLevel.LOW),
            Task(name="High one", completed=True, priority=PriorityLevel.HIGH),
        ]

    def test_load_fills_missing_fields(self, storage: InMemoryStorage, store: TaskStore):
        """Missing fields get the lenient defaults."""
        storage.set_string(DEFAULT_STORAGE_KEY, '[{"name": "Only a name"}, {}]')

        tasks = store.load()

        assert tasks == [Task(name="Only a name"), Task(name="")]

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            "{",
            '{"name": "object not array"}',
            '"a string"',
            "[1, 2, 3]",
            '[{"name": "ok"}, "bad"]',
            '[{"name": "x", "completed": "nope"}]',
            "[" * 200000,
        ],
    )
    def test_load_malformed_returns_empty(self, storage: InMemoryStorage, raw: str):
        """Any decode failure loads as an empty list and reports to the hook."""
        on_error = MagicMock()
        storage.set_string(DEFAULT_STORAGE_KEY, raw)

        tasks = TaskStore(storage, on_error=on_error).load()

        assert tasks == []
        on_error.assert_called_once()
        assert on_error.call_args[0][0] == "load"

    def test_load_storage_failure_returns_empty(self):
        """A failing backend loads as an empty list."""
        on_error = MagicMock()
        store = TaskStore(FailingStorage(), on_error=on_error)

        assert store.load() == []
        operation, exc = on_error.call_args[0]
        assert operation == "load"
        assert isinstance(exc, StorageError)

    def test_load_failure_without_hook_is_silent(self):
        """No hook: failures are only logged."""
        assert TaskStore(FailingStorage()).load() == []

    def test_load_uses_configured_key(self, storage: InMemoryStorage):
        """Only the configured key is read."""
        storage.set_string("other", '[{"name": "elsewhere"}]')
        assert TaskStore(storage, key="tasks_v2").load() == []
        assert TaskStore(storage, key="other").load() == [Task(name="elsewhere")]


class TestTaskStoreSave:
    """Tests for TaskStore.save."""

    def test_save_writes_json_array(self, storage: InMemoryStorage, store: TaskStore):
        """The whole list is written as one JSON array."""
        tasks = [
            Task(name="Fix bug", priority=PriorityLevel.HIGH),
            Task(name="Buy milk", completed=True, priority=PriorityLevel.MEDIUM),
        ]

        assert store.save(tasks) is True

        assert json.loads(storage.get_string(DEFAULT_STORAGE_KEY)) == [
            {"name": "Fix bug", "completed": False, "priority": "high"},
            {"name": "Buy milk", "completed": True, "priority": "medium"},
        ]

    def test_save_overwrites_previous_value(self, storage: InMemoryStorage, store: TaskStore):
        """Each save fully replaces the stored snapshot."""
        store.save([Task(name="a"), Task(name="b")])
        store.save([Task(name="c")])

        assert store.load() == [Task(name="c")]

    def test_save_then_load_round_trip(self, store: TaskStore):
        """Well-formed lists survive a save/load cycle."""
        tasks = [
            Task(name="Water plants", priority=PriorityLevel.LOW),
            Task(name="Fix bug", completed=True, priority=PriorityLevel.HIGH),
            Task(name="Ünïcødé [brackets]", priority=PriorityLevel.MEDIUM),
        ]
        store.save(tasks)
        assert store.load() == tasks

    def test_save_empty_list(self, storage: InMemoryStorage, store: TaskStore):
        """An empty list is stored as an empty array, not removed."""
        store.save([])
        assert storage.get_string(DEFAULT_STORAGE_KEY) == "[]"

    def test_save_failure_returns_false(self):
        """Write errors are swallowed and reported to the hook."""
        on_error = MagicMock()
        store = TaskStore(FailingStorage(), on_error=on_error)

        assert store.save([Task(name="lost")]) is False
        assert on_error.call_args[0][0] == "save"


class TestTaskStoreWithYamlFile:
    """TaskStore on top of the YAML file backend."""

    def test_round_trip_through_file(self, tmp_path: Path):
        """Tasks written by one store are read by a fresh one."""
        path = tmp_path / "preferences.yaml"
        TaskStore(YamlFileStorage(path)).save([Task(name="Persisted", completed=True)])

        assert TaskStore(YamlFileStorage(path)).load() == [Task(name="Persisted", completed=True)]

    def test_corrupt_file_loads_empty(self, tmp_path: Path):
        """An unreadable preferences file loads as an empty list."""
        path = tmp_path / "preferences.yaml"
        path.write_text("- just\n- a list\n")

        assert TaskStore(YamlFileStorage(path)).load() == []

    def test_non_utf8_file_loads_empty(self, tmp_path: Path):
        """Undecodable bytes load as an empty list and reach the hook."""
        path = tmp_path / "preferences.yaml"
        path.write_bytes(b"tasks_v1: '[\xff\xfe]'\n")
        on_error = MagicMock()

        assert TaskListService(TaskStore(YamlFileStorage(path), on_error=on_error)).load() == []
        operation, exc = on_error.call_args[0]
        assert operation == "load"
        assert isinstance(exc, StorageError)

    def test_non_utf8_file_save_reports_failure(self, tmp_path: Path):
        """Saving over an undecodable file fails soft instead of raising."""
        path = tmp_path / "preferences.yaml"
        path.write_bytes(b"tasks_v1: '[\xff\xfe]'\n")
        on_error = MagicMock()

        assert TaskStore(YamlFileStorage(path), on_error=on_error).save([Task(name="x")]) is False
        assert on_error.call_args[0][0] == "save"


class TestCodec:
    """Tests for encode_tasks / decode_tasks."""

    def test_encode_empty(self):
        assert encode_tasks([]) == "[]"

    def test_decode_rejects_non_array(self):
        with pytest.raises(ValueError):
            decode_tasks('{"tasks": []}')
