from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["JWT_SECRET_KEY"] = "test-secret-key"
    os.environ.setdefault("ADMIN_EMAILS", '["admin@example.com"]')


@pytest.fixture()
def client() -> Any:
    from app.database import Base, engine
    from app.main import create_app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    with TestClient(app) as c:
        yield c


def register(client, *, name: str, email: str, password: str = "secret1") -> None:
    r = client.post("/api/users/register", json={"name": name, "email": email, "password": password})
    assert r.status_code == 200, r.text


def login(client, *, email: str, password: str = "secret1") -> str:
    r = client.post("/api/users/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["token"]


def auth_headers(token: str) -> dict[str, str]:
    return {"x-auth-token": token}


@pytest.fixture()
def make_user(client):
    """Register and log in a user; returns (user_id, headers)."""

    def _make(name: str, email: str, password: str = "secret1") -> tuple[str, dict[str, str]]:
        register(client, name=name, email=email, password=password)
        headers = auth_headers(login(client, email=email, password=password))
        me = client.get("/api/users/me", headers=headers)
        assert me.status_code == 200
        return me.json()["user"]["id"], headers

    return _make
