from fastapi.testclient import TestClient

from app.core.exceptions import StoreError
from app.dependencies import get_category_service
from app.main import app


def test_create_category_returns_envelope(client):
    response = client.post(
        "/api/category",
        json={"name": "Drinks", "description": "Beverages"},
    )

    assert response.status_code == 201
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "status": "success",
        "message": "Category created successfully",
        "data": {
            "id": 1,
            "name": "Drinks",
            "description": "Beverages",
            "deleted_at": None,
        },
    }


def test_create_then_get_by_id(client, make_category):
    created = make_category("Snacks", "Chips and crackers")

    response = client.get(f"/api/category/{created['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Category retrieved successfully"
    assert body["data"] == created


def test_create_rejects_malformed_body(client):
    response = client.post(
        "/api/category",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"status": "failed", "message": "Invalid request body"}


def test_create_requires_name(client):
    response = client.post("/api/category", json={"description": "no name"})

    assert response.status_code == 400
    assert response.json()["status"] == "failed"


def test_list_excludes_deleted(client, make_category):
    kept = make_category("Drinks")
    removed = make_category("Frozen")

    assert client.delete(f"/api/category/{removed['id']}").status_code == 200

    response = client.get("/api/category")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Categories retrieved successfully"
    assert [c["id"] for c in body["data"]] == [kept["id"]]


def test_list_empty(client):
    response = client.get("/api/category")

    assert response.status_code == 200
    assert response.json()["data"] == []


def test_get_unknown_category_is_404(client):
    response = client.get("/api/category/999")

    assert response.status_code == 404
    assert response.json() == {"status": "failed", "message": "Category not found"}


def test_non_numeric_id_is_rejected_before_the_service(client):
    class ExplodingService:
        def __getattr__(self, name):
            raise AssertionError("service must not be called")

    app.dependency_overrides[get_category_service] = lambda: ExplodingService()

    for method in ("get", "put", "delete"):
        kwargs = {"json": {"name": "x"}} if method == "put" else {}
        response = getattr(client, method)("/api/category/abc", **kwargs)

        assert response.status_code == 400
        assert response.json() == {"status": "failed", "message": "Invalid Category ID"}


def test_update_only_name_keeps_description(client, make_category):
    created = make_category("Drinks", "Beverages")

    response = client.put(f"/api/category/{created['id']}", json={"name": "Minuman"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Category updated successfully"
    assert body["data"]["name"] == "Minuman"
    assert body["data"]["description"] == "Beverages"


def test_update_without_fields_leaves_category_unchanged(client, make_category):
    created = make_category("Drinks", "Beverages")

    response = client.put(f"/api/category/{created['id']}", json={})

    assert response.status_code == 200
    assert response.json()["data"] == created


def test_update_null_fields_are_ignored(client, make_category):
    created = make_category("Drinks", "Beverages")

    response = client.put(
        f"/api/category/{created['id']}",
        json={"name": None, "description": None},
    )

    assert response.status_code == 200
    assert response.json()["data"] == created


def test_update_with_empty_strings_leaves_category_unchanged(client, make_category):
    created = make_category("Drinks", "Beverages")

    response = client.put(
        f"/api/category/{created['id']}",
        json={"name": "", "description": ""},
    )

    assert response.status_code == 200
    assert response.json()["data"] == created


def test_update_empty_description_keeps_stored_value(client, make_category):
    created = make_category("Drinks", "Beverages")

    response = client.put(
        f"/api/category/{created['id']}",
        json={"name": "Minuman", "description": ""},
    )

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Minuman"
    assert response.json()["data"]["description"] == "Beverages"


def test_update_deleted_category_is_404(client, make_category):
    created = make_category()
    client.delete(f"/api/category/{created['id']}")

    response = client.put(f"/api/category/{created['id']}", json={"name": "Back"})

    assert response.status_code == 404
    assert response.json()["message"] == "Category not found"


def test_delete_then_get_is_404(client, make_category):
    created = make_category()

    response = client.delete(f"/api/category/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"status": "success", "message": "Category deleted successfully"}

    assert client.get(f"/api/category/{created['id']}").status_code == 404


def test_delete_twice_is_404(client, make_category):
    created = make_category()
    client.delete(f"/api/category/{created['id']}")

    response = client.delete(f"/api/category/{created['id']}")

    assert response.status_code == 404


def test_store_failure_is_500_with_error_text(client):
    class BrokenService:
        def get_all(self):
            raise StoreError("connection refused")

    app.dependency_overrides[get_category_service] = lambda: BrokenService()

    response = client.get("/api/category")

    assert response.status_code == 500
    assert response.json() == {
        "status": "failed",
        "message": "Failed to fetch categories: connection refused",
    }


def test_unsupported_method_is_405(client):
    response = client.patch("/api/category/1", json={})

    assert response.status_code == 405
    assert response.json() == {"status": "failed", "message": "Method not allowed"}


def test_id_beyond_integer_range_is_invalid(client):
    for method in ("get", "put", "delete"):
        kwargs = {"json": {"name": "x"}} if method == "put" else {}
        response = getattr(client, method)("/api/category/99999999999999999999999", **kwargs)

        assert response.status_code == 400
        assert response.json() == {"status": "failed", "message": "Invalid Category ID"}


def test_unexpected_error_is_500_envelope(client):
    class FaultyService:
        def get_by_id(self, category_id):
            raise RuntimeError("disk on fire")

    app.dependency_overrides[get_category_service] = lambda: FaultyService()

    with TestClient(app, raise_server_exceptions=False) as quiet_client:
        response = quiet_client.get("/api/category/1")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "status": "failed",
        "message": "Internal server error: disk on fire",
    }
