"""Shared fixtures."""

import os
import tempfile

# Keep the app's import-time database and image directory out of the repo
_scratch = tempfile.mkdtemp(prefix="goaltracker-tests-")
os.environ.setdefault("DB_PATH", os.path.join(_scratch, "goals.db"))
os.environ.setdefault("STATIC_DIR", os.path.join(_scratch, "static"))

import pytest

from goaltracker.core.catalog import default_goals
from goaltracker.core.models import AggregateState
from goaltracker.store.database import KeyValueStore
from goaltracker.store.repository import StateRepository


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(str(tmp_path / "goals.db"))


@pytest.fixture
def repository(store):
    return StateRepository(store)


@pytest.fixture
def state():
    return AggregateState(goals=default_goals())
