"""
Shared fixtures.

Each API test gets a fresh scheduler and an update-file store rooted in
a temporary directory.
"""

import pytest
from fastapi.testclient import TestClient

from gateway.infrastructure.file_store import LocalUpdateFileStore
from gateway.infrastructure.scheduler import InMemoryIndexScheduler
from gateway.interfaces.indexes.dependencies import get_file_store, get_scheduler
from gateway.main import app


@pytest.fixture
def scheduler() -> InMemoryIndexScheduler:
    return InMemoryIndexScheduler()


@pytest.fixture
def client(scheduler, tmp_path):
    app.dependency_overrides[get_scheduler] = lambda: scheduler
    app.dependency_overrides[get_file_store] = lambda: LocalUpdateFileStore(tmp_path)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
