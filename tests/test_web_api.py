"""Tests for the web API."""

import pytest
from pathlib import Path

# Only run if fastapi/httpx are installed
try:
    from fastapi.testclient import TestClient
    from gql_import.web import create_app
    HAS_WEB = True
except ImportError:
    HAS_WEB = False

pytestmark = pytest.mark.skipif(not HAS_WEB, reason="web dependencies not installed")

FIXTURES = Path(__file__).parent / "fixtures"

SOURCES = {
    "a.graphql": "type A { b: B }",
    "b.graphql": "type B { id: ID }\ntype C { id: ID }",
}


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200


def test_closure(client):
    res = client.post("/api/closure", json={"sources": SOURCES, "targets": ["A"]})
    assert res.status_code == 200
    data = res.json()
    assert data["count"] == 2
    assert data["definitions"] == [
        {"name": "A", "kind": "object"},
        {"name": "B", "kind": "object"},
    ]
    assert "type B" in data["sdl"]
    assert "type C" not in data["sdl"]


def test_closure_all(client):
    res = client.post("/api/closure", json={"sources": SOURCES, "all": True})
    assert res.status_code == 200
    assert res.json()["count"] == 3


def test_closure_missing_type(client):
    res = client.post(
        "/api/closure",
        json={"sources": {"a.graphql": "type A { foo: Foo }"}, "targets": ["A"]},
    )
    assert res.status_code == 422
    detail = res.json()["detail"]
    assert detail["kind"] == "MissingType"
    assert detail["target"] == "Foo"


def test_closure_syntax_error(client):
    res = client.post(
        "/api/closure",
        json={"sources": {"bad.graphql": "type A {"}, "targets": ["A"]},
    )
    assert res.status_code == 400


def test_closure_no_seed(client):
    res = client.post("/api/closure", json={"sources": SOURCES, "targets": ["Z"]})
    assert res.status_code == 404


def test_scan_nonexistent_path(client):
    res = client.post("/api/scan", json={"path": "/nonexistent/path"})
    assert res.status_code == 404


def test_path_traversal_blocked(client):
    res = client.post("/api/scan", json={"path": "/etc"})
    assert res.status_code == 403
