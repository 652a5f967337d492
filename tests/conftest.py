"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from session_metadata.context import PluginContext
from session_metadata.integrations.session_api.fake import FakeSessionApi
from session_metadata.integrations.time.fake import FakeTime
from session_metadata.metadata_store import MetadataStore
from tests.test_utils.fixed_time import FIXED_NOW


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """Metadata storage directory inside the test's tmp_path."""
    return tmp_path / "storage" / "session-metadata"


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime(now=FIXED_NOW)


@pytest.fixture
def store(storage_root: Path, fake_time: FakeTime) -> MetadataStore:
    """Provide a fresh MetadataStore for each test."""
    return MetadataStore(storage_root, fake_time)


@pytest.fixture
def fake_session_api() -> FakeSessionApi:
    """FakeSessionApi knowing a single session ses-1 in project proj-123."""
    return FakeSessionApi(
        sessions={
            "ses-1": {
                "id": "ses-1",
                "projectID": "proj-123",
                "directory": "/fake/workspace",
                "title": "Initial title",
                "version": "0.9.0",
            }
        }
    )


@pytest.fixture
def plugin_context(
    storage_root: Path, fake_session_api: FakeSessionApi, fake_time: FakeTime
) -> PluginContext:
    """PluginContext wired with fakes."""
    return PluginContext.for_test(
        storage_root=storage_root,
        session_api=fake_session_api,
        time=fake_time,
    )
