"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from copy import deepcopy
from pathlib import Path

import pendulum
import pytest

from ticktrack.errors import PersistenceLoadError, PersistenceSaveError
from ticktrack.template.collection import get_environment

T0 = pendulum.datetime(2023, 2, 5, 12, 0, 0, tz="UTC")


def entity_id(number: int) -> str:
    """Build a stable uuid-shaped id, e.g. 00000000-0000-0000-0000-000000000001."""
    base = "00000000-0000-0000-0000-000000000000"
    suffix = str(number)
    return base[: len(base) - len(suffix)] + suffix


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, start=T0):
        self.current = start

    def __call__(self):
        return self.current

    def advance(self, seconds):
        self.current = self.current.add(seconds=seconds)
        return self.current

    def set(self, value):
        self.current = value
        return self.current


class SequentialIds:
    """Id generator returning 00..01, 00..02, ..."""

    def __init__(self):
        self.counter = 0

    def __call__(self):
        self.counter += 1
        return entity_id(self.counter)


class MemoryPersistence:
    """In-memory persistence port recording every save."""

    def __init__(self, entries=None):
        self.stored = deepcopy(entries) if entries is not None else []
        self.saves = []
        self.load_calls = 0
        self.fail_load = False
        self.fail_save = False

    def load(self):
        self.load_calls += 1
        if self.fail_load:
            raise PersistenceLoadError("disk on fire")
        return deepcopy(self.stored)

    def save(self, entries):
        if self.fail_save:
            raise PersistenceSaveError("disk full")
        self.saves.append(deepcopy(entries))
        self.stored = deepcopy(entries)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def environment(clock, ids):
    return get_environment(
        now=clock,
        generate_id=ids,
        description_save_debounce_seconds=0.05,
    )


@pytest.fixture
def persistence():
    return MemoryPersistence()
