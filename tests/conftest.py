"""Pytest configuration and fixtures."""

import tempfile
from datetime import UTC, datetime
from pathlib import Path

import pytest

from sample_models import Profile, Record, Role
from storable.models.model_options import BaseDirectory
from storable.storage.file_store import FileStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def data_dir(temp_dir: Path) -> Path:
    """User data root inside the temporary directory (not created yet)."""
    return temp_dir / "data"


@pytest.fixture
def cache_dir(temp_dir: Path) -> Path:
    """Cache root inside the temporary directory (not created yet)."""
    return temp_dir / "cache"


@pytest.fixture
def store(data_dir: Path, cache_dir: Path) -> FileStore:
    """Create a FileStore rooted in the temporary directory."""
    return FileStore(roots={BaseDirectory.USER_DATA: data_dir, BaseDirectory.CACHE: cache_dir})


@pytest.fixture
def record() -> Record:
    """Create the sample record from the documentation."""
    return Record(username="alice", age=30)


@pytest.fixture
def profile() -> Profile:
    """Create a profile exercising enums, lists, datetimes and optionals."""
    return Profile(
        name="Alice Liddell",
        role=Role.ADMIN,
        tags=["reader", "writer"],
        created_at=datetime(2024, 5, 17, 9, 30, tzinfo=UTC),
    )
