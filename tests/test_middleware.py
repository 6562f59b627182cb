"""CORS middleware tests."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import settings
from app.middleware import install_cors_middleware, is_api_path


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/api", True),
        ("/api/writing", True),
        ("/api/v2/anything", True),
        ("/apiary", False),
        ("/health", False),
        ("/", False),
    ],
)
def test_is_api_path(path: str, expected: bool) -> None:
    assert is_api_path(path, "/api") is expected


def build_app() -> FastAPI:
    demo = FastAPI()
    install_cors_middleware(demo)

    @demo.get("/api/ping")
    async def ping() -> dict:
        return {"pong": True}

    @demo.get("/public")
    async def public() -> dict:
        return {"ok": True}

    return demo


def test_headers_added_without_origin() -> None:
    client = TestClient(build_app())
    response = client.get("/api/ping")
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type"


def test_headers_added_to_unknown_api_routes() -> None:
    client = TestClient(build_app())
    response = client.get("/api/missing")
    assert response.status_code == 404
    assert response.headers["access-control-allow-origin"] == "*"


def test_non_api_routes_untouched() -> None:
    client = TestClient(build_app())
    response = client.get("/public", headers={"Origin": "https://example.com"})
    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


def test_header_values_follow_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "cors_allow_origin", "https://app.example.com")
    client = TestClient(build_app())
    response = client.get("/api/ping")
    assert response.headers["access-control-allow-origin"] == "https://app.example.com"
