# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ticktrack import configuration, time
from ticktrack.errors import PersistenceLoadError, PersistenceSaveError
from ticktrack.model.entry import AccumulatedTime, Entry, EntryStatus
from ticktrack.template.entry import normalize_description

logger = logging.getLogger(__name__)


def serialize_description(description: Optional[str]) -> dict[str, Any]:
    if description is None:
        return {"unnamed": {}}
    return {"named": description}


def deserialize_description(raw: dict[str, Any]) -> Optional[str]:
    if "named" in raw:
        return normalize_description(str(raw["named"]))
    if "unnamed" in raw:
        return None
    raise ValueError(f"unknown description tag: {sorted(raw)}")


def serialize_status(status: EntryStatus) -> dict[str, Any]:
    return {status: {}}


def deserialize_status(raw: dict[str, Any]) -> EntryStatus:
    if "running" in raw:
        return "running"
    if "stopped" in raw:
        return "stopped"
    raise ValueError(f"unknown status tag: {sorted(raw)}")


def serialize_entry(entry: Entry) -> dict[str, Any]:
    accumulated_time = entry["accumulated_time"]
    serialized_accumulated_time: dict[str, Any] = {
        "total": accumulated_time["total"],
        "accumulated_session": accumulated_time["accumulated_session"],
        "current_session": accumulated_time["current_session"],
    }
    if accumulated_time["start"] is not None:
        serialized_accumulated_time["start_date"] = time.datetime_to_epoch(
            accumulated_time["start"]
        )
    return {
        "id": entry["id"],
        "description": serialize_description(entry["description"]),
        "status": serialize_status(entry["status"]),
        "accumulated_time": serialized_accumulated_time,
        "created_at": time.datetime_to_epoch(entry["created"]),
        "updated_at": time.datetime_to_epoch(entry["updated"]),
    }


def deserialize_entry(raw: dict[str, Any]) -> Entry:
    raw_accumulated_time = raw["accumulated_time"]
    status = deserialize_status(raw["status"])
    # A running entry needs its session start, a stopped one must not have it
    if (status == "running") != (raw_accumulated_time.get("start_date") is not None):
        raise ValueError(f"entry {raw['id']}: start_date does not match status {status}")

    accumulated_time: AccumulatedTime = {
        "total": float(raw_accumulated_time["total"]),
        "accumulated_session": float(raw_accumulated_time["accumulated_session"]),
        "current_session": float(raw_accumulated_time["current_session"]),
        "start": time.datetime_from_epoch_optional(
            raw_accumulated_time.get("start_date")
        ),
    }
    return {
        "id": str(raw["id"]),
        "description": deserialize_description(raw["description"]),
        "status": status,
        "accumulated_time": accumulated_time,
        "created": time.datetime_from_epoch(raw["created_at"]),
        "updated": time.datetime_from_epoch(raw["updated_at"]),
    }


class EntryRepository:
    """YAML file holding the whole entry collection."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_ENTRIES_PATH

    def load(self) -> list[Entry]:
        if not self.path.is_file():
            logger.info("No entries file at %s, starting empty", self.path)
            return []

        try:
            raw_data = load(self.path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise PersistenceLoadError(f"could not read {self.path}: {e}") from e

        if raw_data is None:
            return []
        if not isinstance(raw_data, dict) or not isinstance(
            raw_data.get("entries"), list
        ):
            raise PersistenceLoadError(f"unexpected layout in {self.path}")

        try:
            return [deserialize_entry(raw_entry) for raw_entry in raw_data["entries"]]
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceLoadError(f"invalid entry in {self.path}: {e}") from e

    def save(self, entries: list[Entry]) -> None:
        serializable_entries = {
            "entries": [serialize_entry(entry) for entry in entries]
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump(serializable_entries, Dumper=Dumper))
        except OSError as e:
            raise PersistenceSaveError(f"could not write {self.path}: {e}") from e
