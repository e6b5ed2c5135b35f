"""E2E tests for the check and health endpoints.

Runs the real application (lifespan, middleware, router, use case, provider
client) with the TeraBox API mocked via respx.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from typing import Any

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from sharecheck.infrastructure.config import AppConfig
from sharecheck.interfaces.app import create_app

pytestmark = pytest.mark.e2e

_SHARE_URL = "https://www.terabox.com/s/1abcXYZ"


@pytest.fixture()
def mock_api() -> Iterator[respx.MockRouter]:
    # TestClient's in-process transport is not intercepted by respx.
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture()
def client(mock_api: respx.MockRouter) -> Iterator[TestClient]:
    app = create_app(AppConfig(environment="test"))
    with TestClient(app) as c:
        yield c


def _primary(mock_api: respx.MockRouter) -> respx.Route:
    return mock_api.route(
        method="GET", host="dm.nephobox.com", path="/api/shorturlinfo"
    )


def _fallback(mock_api: respx.MockRouter) -> respx.Route:
    return mock_api.route(method="GET", host="www.terabox.app", path="/share/list")


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/health")

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "OK"
        assert data["uptime"] >= 0
        datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
        assert resp.headers["Access-Control-Allow-Origin"] == "*"


class TestCheckEndpoint:
    def test_info_document(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["usage"].startswith("GET /?url=")

    def test_missing_cookie(self, client: TestClient) -> None:
        resp = client.get("/", params={"url": _SHARE_URL})
        assert resp.status_code == 401

    def test_options(self, client: TestClient) -> None:
        resp = client.options("/")
        assert resp.status_code == 200
        assert resp.content == b""

    def test_primary_success(
        self,
        client: TestClient,
        mock_api: respx.MockRouter,
        single_file_payload: dict[str, Any],
    ) -> None:
        primary = _primary(mock_api).respond(200, json=single_file_payload)
        fallback = _fallback(mock_api).respond(200, json={"errno": 0, "list": []})

        resp = client.get("/", params={"url": _SHARE_URL, "cookie": "abc123"})

        assert resp.status_code == 200
        assert resp.json() == {
            "exists": True,
            "total_files": 1,
            "files": [{"name": "a.txt", "size": 10, "isdir": 0}],
        }
        request = primary.calls.last.request
        assert request.url.params["shorturl"] == "abcXYZ"
        assert request.headers["Cookie"] == "ndus=abc123"
        assert not fallback.called

    def test_fallback_after_primary_failure(
        self,
        client: TestClient,
        mock_api: respx.MockRouter,
        single_file_payload: dict[str, Any],
    ) -> None:
        _primary(mock_api).respond(200, json={"errno": -6, "errmsg": "not login"})
        _fallback(mock_api).respond(200, json=single_file_payload)

        resp = client.get("/", params={"url": _SHARE_URL, "cookie": "ndus=abc"})

        assert resp.status_code == 200
        assert resp.json()["exists"] is True
        assert resp.json()["files"][0]["name"] == "a.txt"

    def test_both_fail_is_200_with_error(
        self, client: TestClient, mock_api: respx.MockRouter
    ) -> None:
        _primary(mock_api).mock(side_effect=httpx.ConnectError("down"))
        _fallback(mock_api).respond(500)

        resp = client.get("/", params={"url": _SHARE_URL, "cookie": "abc"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["exists"] is False
        assert data["error"]

    def test_unparseable_url_is_200(
        self, client: TestClient, mock_api: respx.MockRouter
    ) -> None:
        primary = _primary(mock_api).respond(200, json={"errno": 0, "list": []})

        resp = client.get(
            "/", params={"url": "https://www.terabox.com/main", "cookie": "abc"}
        )

        assert resp.status_code == 200
        assert resp.json() == {"exists": False, "error": "Could not parse Short URL"}
        assert not primary.called

    def test_non_ascii_cookie_is_200(
        self, client: TestClient, mock_api: respx.MockRouter
    ) -> None:
        _fallback(mock_api).respond(200, json={"errno": 2})

        resp = client.get("/", params={"url": _SHARE_URL, "cookie": "café"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["exists"] is False
        assert data["error"].startswith("Network error")

    def test_malformed_host_falls_back(
        self,
        client: TestClient,
        mock_api: respx.MockRouter,
        single_file_payload: dict[str, Any],
    ) -> None:
        fallback = _fallback(mock_api).respond(200, json=single_file_payload)

        resp = client.get(
            "/",
            params={
                "url": _SHARE_URL,
                "cookie": "abc",
                "host": "dm.nephobox.com:notaport",
            },
        )

        assert resp.status_code == 200
        assert resp.json()["exists"] is True
        assert fallback.called
