import json
import os
import sys
import pytest

CURRENT_DIR = os.path.dirname(__file__)
SERVICE_ROOT = os.path.dirname(CURRENT_DIR)
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

# до импорта приложения: settings читаются один раз
os.environ["RATE_LIMIT_ENABLED"] = "false"

from fastapi.testclient import TestClient
from students_api.domain.entities import Identity
from students_api.infrastructure.security import create_access_token
from students_api.infrastructure.store import JsonStudentStore, get_store
from students_api.interfaces.http.ratelimit import limiter
from students_api.main import app

SEED = [
    {"id": 1, "name": "Alice Johnson", "age": 20, "email": "alice@example.com", "isActive": True},
    {"id": 2, "name": "Bob Smith", "age": 22, "email": "bob@example.com", "isActive": False},
    {"id": 3, "name": "Carla Diaz", "age": 21, "email": "carla@example.com", "isActive": True},
]


@pytest.fixture(autouse=True)
def disable_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = False


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "students.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    return path


@pytest.fixture
def store(data_file):
    s = JsonStudentStore(data_file)
    s.load()
    return s


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.pop(get_store, None)


@pytest.fixture
def token():
    return create_access_token(Identity(username="testuser", role="student-admin"))


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def read_file(path) -> list[dict]:
    return json.loads(path.read_text(encoding="utf-8"))
