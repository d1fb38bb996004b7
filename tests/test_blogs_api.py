"""API tests for the blog endpoints."""

from datetime import datetime, timezone


def _create(client, **payload):
    body = {"title": "A", "content": "B", **payload}
    response = client.post("/api/blogs", json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_minimal_blog(client):
    response = client.post("/api/blogs", json={"title": "A", "content": "B"})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Blog created successfully"
    data = body["data"]
    assert isinstance(data["id"], int)
    assert data["status"] == "draft"
    assert data["publishedAt"] is None
    assert data["coverImageUrl"] is None
    assert data["createdAt"] and data["updatedAt"]


def test_create_published_stamps_timestamp(client):
    before = datetime.now(timezone.utc)
    data = _create(client, status="published")

    published_at = datetime.fromisoformat(data["publishedAt"])
    assert published_at >= before


def test_create_validation_error(client):
    response = client.post("/api/blogs", json={"title": "", "coverImageUrl": "nope"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["error"] == "Validation failed"
    fields = {d["field"] for d in body["details"]}
    assert fields == {"title", "content", "coverImageUrl"}


def test_create_rejects_non_iso_published_at(client):
    for value in (0, "2025-01-01"):
        response = client.post(
            "/api/blogs",
            json={"title": "A", "content": "B", "status": "published", "publishedAt": value},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["details"] == [
            {"field": "publishedAt", "message": "Must be an ISO 8601 datetime"}
        ]

    assert client.get("/api/blogs").json()["data"] == []


def test_create_invalid_json(client):
    response = client.post(
        "/api/blogs",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid JSON format"


def test_get_round_trip(client):
    created = _create(client, excerpt="short", coverImageUrl="https://img.test/a.png")

    response = client.get(f"/api/blogs/{created['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Blog retrieved successfully"
    assert body["data"] == created


def test_get_missing_returns_404(client):
    response = client.get("/api/blogs/999999")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None
    assert "999999" in body["error"]


def test_invalid_id_returns_400(client):
    for bad in ("abc", "0", "-1", "1.5"):
        response = client.get(f"/api/blogs/{bad}")
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid ID parameter. Must be a positive integer."
        assert body["details"][0]["field"] == "id"


def test_list_filters_and_orders(client):
    first = _create(client, title="first")
    second = _create(client, title="second", status="published")
    third = _create(client, title="third")

    response = client.get("/api/blogs")
    assert response.status_code == 200
    body = response.json()
    assert [b["id"] for b in body["data"]] == [third["id"], second["id"], first["id"]]
    assert body["message"] == "Retrieved 3 blogs"

    response = client.get("/api/blogs", params={"status": "published"})
    body = response.json()
    assert [b["id"] for b in body["data"]] == [second["id"]]
    assert body["message"] == "Retrieved 1 blogs with status: published"

    response = client.get("/api/blogs", params={"status": "draft"})
    assert [b["id"] for b in response.json()["data"]] == [third["id"], first["id"]]


def test_list_empty(client):
    response = client.get("/api/blogs")
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_list_rejects_unknown_status(client):
    response = client.get("/api/blogs", params={"status": "archived"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid query parameters"
    assert body["details"][0]["field"] == "status"


def test_publish_via_update(client):
    created = _create(client)

    response = client.put(f"/api/blogs/{created['id']}", json={"status": "published"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "published"
    assert data["publishedAt"] is not None
    datetime.fromisoformat(data["publishedAt"])


def test_partial_update_preserves_other_fields(client):
    created = _create(client, excerpt="keep me", coverImageUrl="https://img.test/a.png")

    response = client.put(f"/api/blogs/{created['id']}", json={"title": "X"})

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["title"] == "X"
    for key in created:
        if key in ("title", "updatedAt"):
            continue
        assert updated[key] == created[key], key
    assert datetime.fromisoformat(updated["updatedAt"]) >= datetime.fromisoformat(
        created["updatedAt"]
    )


def test_update_explicit_null_published_at(client):
    created = _create(client)

    response = client.put(
        f"/api/blogs/{created['id']}",
        json={"status": "published", "publishedAt": None},
    )

    assert response.status_code == 200
    assert response.json()["data"]["publishedAt"] is None


def test_update_missing_returns_404(client):
    response = client.put("/api/blogs/12345", json={"title": "X"})
    assert response.status_code == 404
    assert response.json()["error"] == "Blog with ID 12345 not found"


def test_update_rejects_null_title(client):
    created = _create(client)
    response = client.put(f"/api/blogs/{created['id']}", json={"title": None})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "title"


def test_delete(client):
    created = _create(client)

    response = client.delete(f"/api/blogs/{created['id']}")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] is None
    assert body["message"] == "Blog deleted successfully"

    assert client.get(f"/api/blogs/{created['id']}").status_code == 404


def test_delete_missing_twice(client):
    for _ in range(2):
        response = client.delete("/api/blogs/777")
        assert response.status_code == 404
        assert "777" in response.json()["error"]
