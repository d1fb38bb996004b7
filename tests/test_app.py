"""Tests for app-level behaviour: envelope, error handlers, health, middleware."""

from fastapi.testclient import TestClient

from app.main import app, create_app
from apps.blog.main import BLOG, get_blog_service
from apps.content.service import ResourceService
from apps.shared.responses import error_body, success_body


class FailingRepository:
    def list(self, status=None):
        raise RuntimeError("connection refused by 10.0.0.5")

    def get(self, entity_id):
        raise RuntimeError("connection refused by 10.0.0.5")


def test_success_body_omits_empty_message():
    assert success_body([1, 2]) == {"success": True, "data": [1, 2]}
    assert success_body(None, "done") == {"success": True, "data": None, "message": "done"}


def test_error_body_omits_empty_details():
    assert error_body("boom") == {"success": False, "data": None, "error": "boom"}
    body = error_body("bad", [{"field": "title", "message": "required"}])
    assert body["details"] == [{"field": "title", "message": "required"}]


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "healthy"


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "healthy"
    assert data["database"] == "connected"


def test_unknown_route(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"success": False, "data": None, "error": "Route not found"}


def test_request_id_is_echoed(client):
    response = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"

    generated = client.get("/").headers["X-Request-ID"]
    assert generated


def test_storage_error_envelope(client):
    app.dependency_overrides[get_blog_service] = lambda: ResourceService(BLOG, FailingRepository())

    response = client.get("/api/blogs")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["error"].startswith("Failed to fetch blogs.")
    assert "10.0.0.5" not in response.text


def test_unhandled_exception_envelope():
    test_app = create_app()

    @test_app.get("/explode")
    def explode():
        raise RuntimeError("secret internals")

    client = TestClient(test_app, raise_server_exceptions=False)
    response = client.get("/explode")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "data": None,
        "error": "Internal server error",
    }
    assert "secret internals" not in response.text
