from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.main import app
from app.models.categories import Category
from app.models.soft_delete import AlreadyDeletedError, RecordState
from app.schemas.category import CategoryUpdate
from app.services.category import merge_fields


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "message": "API Running"}


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["status"] == "failed"


def test_startup_fails_when_store_is_unreachable(monkeypatch):
    def unreachable():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr("app.main.check_connection", unreachable)

    with pytest.raises(OperationalError):
        with TestClient(app):
            pass


def test_merge_fields_applies_only_present_values():
    existing = SimpleNamespace(name="Drinks", description="Beverages")

    assert merge_fields(existing, CategoryUpdate(name="Minuman"), ("name", "description")) == {
        "name": "Minuman",
        "description": "Beverages",
    }
    assert merge_fields(existing, CategoryUpdate(), ("name", "description")) == {
        "name": "Drinks",
        "description": "Beverages",
    }


def test_record_state_is_set_once():
    category = Category(id=1, name="Drinks", description="")

    assert category.state is RecordState.ACTIVE
    assert category.is_active

    category.mark_deleted()
    assert category.state is RecordState.DELETED

    with pytest.raises(AlreadyDeletedError):
        category.mark_deleted()
