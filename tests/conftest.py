"""Shared fixtures for tasktrack tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from pathlib import Path
from uuid import UUID

import pytest

from tasktrack.models import Priority, Status
from tasktrack.store import TaskStore

from .helpers import HEX_DIGITS, make_id


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_tracker_dir(temp_project: Path) -> Path:
    """Create a temporary .tasktrack directory."""
    tracker_dir = temp_project / ".tasktrack"
    tracker_dir.mkdir()
    return tracker_dir


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data."""
    return {
        "display": {"style": "plain", "id_length": 8, "verbose_errors": True},
        "lookup": {"require_unique_prefix": True},
        "logging": {"level": "INFO", "file": ".tasktrack/tasktrack.log"},
    }


@pytest.fixture
def id_sequence() -> Callable[[], UUID]:
    """Id factory yielding aaaaaaaa-..., bbbbbbbb-..., and so on."""
    ids: Iterator[UUID] = iter(make_id(c) for c in HEX_DIGITS)
    return lambda: next(ids)


@pytest.fixture
def store(id_sequence: Callable[[], UUID]) -> TaskStore:
    """An empty store with predictable ids."""
    return TaskStore(id_factory=id_sequence)


@pytest.fixture
def populated_store(store: TaskStore) -> TaskStore:
    """A store holding four tasks with ids starting a, b, c, d."""
    store.add("Buy milk", "", Priority.LOW, Status.TODO)
    store.add("Fix bug", "urgent", Priority.HIGH, Status.DONE)
    store.add("Write report", "quarterly", Priority.MEDIUM, Status.IN_PROGRESS)
    store.add("Call plumber", "kitchen sink", Priority.HIGH, Status.DONE)
    return store
