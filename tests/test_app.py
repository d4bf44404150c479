import json

from fastapi.testclient import TestClient

from students_api.config import settings
from students_api.infrastructure.store import get_store
from students_api.main import app


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["timestamp"].endswith("Z")


def test_echo_headers(client):
    response = client.get("/test/headers", headers={"X-Practice": "42"})
    assert response.status_code == 200
    assert response.json()["headers"]["x-practice"] == "42"


def test_set_and_get_cookies(client):
    response = client.get("/test/set-cookie")
    assert response.status_code == 200
    assert "demoCookie=hello-from-server" in response.headers["set-cookie"]

    client.cookies.set("demoCookie", "hello-from-server")
    response = client.get("/test/get-cookies")
    assert response.json() == {"cookies": {"demoCookie": "hello-from-server"}}


def test_unknown_route(client):
    """Неизвестный путь -> 404 с путем и методом"""
    response = client.get("/nope?x=1")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found", "pathTried": "/nope?x=1", "method": "GET"}


def test_unsupported_method_is_not_found(client):
    response = client.post("/health")
    assert response.status_code == 404
    assert response.json()["method"] == "POST"


def test_malformed_json(client, auth_headers):
    """Битый JSON -> 400"""
    response = client.post(
        "/students",
        content="{broken",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


class _BrokenStore:
    def __init__(self, exc):
        self.exc = exc

    def all(self):
        raise self.exc


class _TeapotError(Exception):
    status_code = 418


def test_unhandled_error_returns_500():
    """Необработанное исключение -> 500, процесс не падает"""
    app.dependency_overrides[get_store] = lambda: _BrokenStore(RuntimeError("boom"))
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/students")
    finally:
        app.dependency_overrides.pop(get_store, None)
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error", "message": "boom"}


def test_unhandled_error_keeps_own_status():
    """Статус исключения используется, если он есть"""
    app.dependency_overrides[get_store] = lambda: _BrokenStore(_TeapotError())
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/students")
    finally:
        app.dependency_overrides.pop(get_store, None)
    assert response.status_code == 418
    assert response.json()["message"] == "Something went wrong."


def test_lifespan_loads_data_file(tmp_path, monkeypatch):
    """При старте данные читаются из DATA_FILE"""
    path = tmp_path / "students.json"
    path.write_text(json.dumps([
        {"id": 5, "name": "Zoe", "age": 24, "email": "zoe@example.com", "isActive": True},
    ]), encoding="utf-8")
    monkeypatch.setattr(settings, "DATA_FILE", str(path))
    with TestClient(app) as c:
        response = c.get("/students")
    assert response.json()["count"] == 1
    assert response.json()["data"][0]["id"] == 5


def test_cors_reflects_origin(client):
    response = client.get("/health", headers={"Origin": "http://localhost:5173"})
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_metrics_endpoint(client, auth_headers):
    """Endpoint метрик"""
    client.post(
        "/students",
        json={"name": "M", "age": 30, "email": "m@example.com", "isActive": True},
        headers=auth_headers,
    )
    client.get("/auth/me")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "text/plain" in response.headers["content-type"]
    assert "http_requests_total" in response.text
    assert 'student_mutations_total{operation="create"}' in response.text
    assert 'auth_failures_total{guard="jwt",reason="missing_header"}' in response.text


def test_metrics_label_by_route_template(client):
    """В метках шаблон маршрута, неизвестные пути сводятся в один"""
    for i in range(5):
        client.get(f"/random-{i}")
    client.get("/students/2")
    client.get("/students/3")
    text = client.get("/metrics").text
    assert "/random-" not in text
    assert 'endpoint="unmatched"' in text
    assert 'endpoint="/students/{student_id}"' in text
    assert 'endpoint="/students/2"' not in text
