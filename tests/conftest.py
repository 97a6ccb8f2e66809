import os
import tempfile

# Keep test runs from writing ./logs; must happen before the app module is imported.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="todo-portal-logs-"))

import pytest
from fastapi.testclient import TestClient

from todo_portal.app.main import create_app
from todo_portal.infra.task_store import TaskStore


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
