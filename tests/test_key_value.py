"""Tests for key-value storage backends."""

from pathlib import Path

import pytest
import yaml

from taskdeck.errors import StorageError
from taskdeck.repositories import InMemoryStorage, YamlFileStorage


class TestInMemoryStorage:
    """Tests for InMemoryStorage."""

    def test_get_missing_returns_none(self):
        assert InMemoryStorage().get_string("missing") is None

    def test_set_then_get(self):
        storage = InMemoryStorage()
        storage.set_string("key", "value")
        assert storage.get_string("key") == "value"

    def test_initial_values_are_copied(self):
        """The initial dict is not shared with the storage."""
        initial = {"key": "value"}
        storage = InMemoryStorage(initial)
        storage.set_string("key", "changed")
        assert initial == {"key": "value"}


@pytest.fixture
def path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "preferences.yaml"


class TestYamlFileStorage:
    """Tests for YamlFileStorage."""

    def test_missing_file_is_empty(self, path: Path):
        """A missing file reads as an empty map."""
        assert YamlFileStorage(path).get_string("tasks_v1") is None

    def test_set_creates_parent_directory(self, path: Path):
        """Writing creates the data directory."""
        YamlFileStorage(path).set_string("tasks_v1", "[]")
        assert path.exists()

    def test_set_then_get_new_instance(self, path: Path):
        """Values persist across instances."""
        YamlFileStorage(path).set_string("tasks_v1", '[{"name": "x"}]')
        assert YamlFileStorage(path).get_string("tasks_v1") == '[{"name": "x"}]'

    def test_set_preserves_other_keys(self, path: Path):
        """Writing one key keeps the rest of the map."""
        storage = YamlFileStorage(path)
        storage.set_string("theme", "dark")
        storage.set_string("tasks_v1", "[]")

        data = yaml.safe_load(path.read_text())
        assert data == {"theme": "dark", "tasks_v1": "[]"}

    def test_no_temp_files_left_behind(self, path: Path):
        """Atomic writes clean up after themselves."""
        storage = YamlFileStorage(path)
        storage.set_string("a", "1")
        storage.set_string("a", "2")
        assert [p.name for p in path.parent.iterdir()] == ["preferences.yaml"]

    def test_empty_file_is_empty_map(self, path: Path):
        path.parent.mkdir(parents=True)
        path.write_text("")
        assert YamlFileStorage(path).get_string("a") is None

    def test_non_mapping_file_raises(self, path: Path):
        """A file that is not a key-value map is a storage error."""
        path.parent.mkdir(parents=True)
        path.write_text("- a\n- b\n")
        with pytest.raises(StorageError):
            YamlFileStorage(path).get_string("a")

    def test_non_utf8_file_raises(self, path: Path):
        """Bytes that are not UTF-8 are a storage error."""
        path.parent.mkdir(parents=True)
        path.write_bytes(b"tasks_v1: '[\xff\xfe]'\n")
        with pytest.raises(StorageError):
            YamlFileStorage(path).get_string("tasks_v1")

    def test_unicode_values_round_trip(self, path: Path):
        YamlFileStorage(path).set_string("tasks_v1", '[{"name": "Ünïcødé"}]')
        assert YamlFileStorage(path).get_string("tasks_v1") == '[{"name": "Ünïcødé"}]'

    def test_invalid_yaml_raises(self, path: Path):
        """Syntax errors are storage errors."""
        path.parent.mkdir(parents=True)
        path.write_text("key: [unclosed\n")
        with pytest.raises(StorageError):
            YamlFileStorage(path).get_string("key")

    def test_write_failure_raises(self, tmp_path: Path):
        """A data directory that cannot be created is a storage error."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        storage = YamlFileStorage(blocker / "preferences.yaml")
        with pytest.raises(StorageError):
            storage.set_string("a", "1")
