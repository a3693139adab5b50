import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.database import Base, build_engine, get_db
from app.main import app


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_category(client):
    def _make(name="Drinks", description="Beverages"):
        response = client.post(
            "/api/category",
            json={"name": name, "description": description},
        )
        assert response.status_code == 201
        return response.json()["data"]

    return _make


@pytest.fixture
def make_product(client):
    def _make(name="Teh Botol", price=5000, stock=10, category_id=None):
        response = client.post(
            "/api/product",
            json={
                "name": name,
                "price": price,
                "stock": stock,
                "category_id": category_id,
            },
        )
        assert response.status_code == 201
        return response.json()["data"]

    return _make
