import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api.deps import task_repository
from backend_fastapi.main import app
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


@pytest.fixture
def repository():
    return InMemoryTaskRepository()


@pytest.fixture
def api_client(repository):
    app.dependency_overrides[task_repository] = lambda: repository
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
