"""Tests for the YAML entry file and the serialized entry record."""

import pendulum
import pytest
from yaml import dump

from conftest import T0, entity_id
from ticktrack.errors import PersistenceLoadError, PersistenceSaveError
from ticktrack.repository.entry import (
    EntryRepository,
    deserialize_entry,
    serialize_entry,
)
from ticktrack.service import entry as engine
from ticktrack.template.entry import get_entry_template


@pytest.fixture
def entries_path(temp_dir):
    return temp_dir / "time-entries.yaml"


@pytest.fixture
def sample_entries():
    running = get_entry_template(
        id=entity_id(1), created=T0, status="running", description="My Project"
    )
    stopped = get_entry_template(id=entity_id(2), created=T0.add(seconds=30))
    stopped = engine.set_status(stopped, "running", lambda: T0.add(seconds=60))
    stopped = engine.set_status(stopped, "stopped", lambda: T0.add(seconds=95))
    return [running, stopped]


class TestSerializedRecord:
    """Test the serialized field layout."""

    def test_unnamed_stopped_entry(self):
        entry = get_entry_template(id=entity_id(1), created=T0)

        record = serialize_entry(entry)

        assert record == {
            "id": "00000000-0000-0000-0000-000000000001",
            "description": {"unnamed": {}},
            "status": {"stopped": {}},
            "accumulated_time": {
                "total": 0.0,
                "accumulated_session": 0.0,
                "current_session": 0.0,
            },
            "created_at": T0.timestamp(),
            "updated_at": T0.timestamp(),
        }

    def test_running_entry_carries_start_date(self):
        entry = get_entry_template(
            id=entity_id(1), created=T0, status="running", description="My Task"
        )

        record = serialize_entry(entry)

        assert record["description"] == {"named": "My Task"}
        assert record["status"] == {"running": {}}
        assert record["accumulated_time"]["start_date"] == T0.timestamp()

    def test_unnamed_round_trip(self):
        entry = get_entry_template(id=entity_id(1), created=T0)

        assert deserialize_entry(serialize_entry(entry)) == entry

    def test_named_empty_record_loads_as_unnamed(self):
        record = {
            "id": entity_id(3),
            "description": {"named": ""},
            "status": {"running": {}},
            "accumulated_time": {
                "total": 0,
                "accumulated_session": 0,
                "current_session": 0,
                "start_date": 1111100000,
            },
            "created_at": 1111100000,
            "updated_at": 1111100000,
        }

        entry = deserialize_entry(record)

        assert entry["description"] is None
        assert entry["status"] == "running"
        assert entry["accumulated_time"]["start"] == pendulum.from_timestamp(1111100000)
        assert entry["created"] == pendulum.from_timestamp(1111100000)

    def test_unknown_status_tag_is_rejected(self):
        record = serialize_entry(get_entry_template(id=entity_id(1), created=T0))
        record["status"] = {"paused": {}}

        with pytest.raises(ValueError):
            deserialize_entry(record)

    def test_running_record_without_start_date_is_rejected(self):
        entry = get_entry_template(id=entity_id(1), created=T0, status="running")
        record = serialize_entry(entry)
        del record["accumulated_time"]["start_date"]

        with pytest.raises(ValueError):
            deserialize_entry(record)

    def test_stopped_record_with_start_date_is_rejected(self):
        record = serialize_entry(get_entry_template(id=entity_id(1), created=T0))
        record["accumulated_time"]["start_date"] = T0.timestamp()

        with pytest.raises(ValueError):
            deserialize_entry(record)


class TestEntryRepository:
    """Test the file-backed persistence port."""

    def test_save_then_load_round_trips(self, entries_path, sample_entries):
        repository = EntryRepository(entries_path)

        repository.save(sample_entries)

        assert repository.load() == sample_entries

    def test_missing_file_loads_empty(self, entries_path):
        assert EntryRepository(entries_path).load() == []

    def test_empty_file_loads_empty(self, entries_path):
        entries_path.write_text("")

        assert EntryRepository(entries_path).load() == []

    def test_malformed_yaml_raises_load_error(self, entries_path):
        entries_path.write_text("entries: [unclosed")

        with pytest.raises(PersistenceLoadError):
            EntryRepository(entries_path).load()

    def test_unexpected_layout_raises_load_error(self, entries_path):
        entries_path.write_text("- just\n- a list\n")

        with pytest.raises(PersistenceLoadError):
            EntryRepository(entries_path).load()

    def test_invalid_record_raises_load_error(self, entries_path):
        entries_path.write_text("entries:\n  - id: abc\n")

        with pytest.raises(PersistenceLoadError):
            EntryRepository(entries_path).load()

    def test_frozen_running_record_raises_load_error(self, entries_path):
        record = serialize_entry(
            get_entry_template(id=entity_id(1), created=T0, status="running")
        )
        del record["accumulated_time"]["start_date"]
        entries_path.write_text(dump({"entries": [record]}))

        with pytest.raises(PersistenceLoadError):
            EntryRepository(entries_path).load()

    def test_unwritable_path_raises_save_error(self, temp_dir):
        # The target path is a directory
        with pytest.raises(PersistenceSaveError):
            EntryRepository(temp_dir).save([])

    def test_save_creates_missing_directory(self, temp_dir, sample_entries):
        path = temp_dir / "nested" / "time-entries.yaml"

        EntryRepository(path).save(sample_entries)

        assert path.is_file()
