"""Tests for the share check router."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sharecheck.domain.entities.share import CheckRequest, CheckResult, FileEntry
from sharecheck.infrastructure.config import AppConfig
from sharecheck.interfaces.api.check.router import API_INFO, normalize_cookie, router

_SHARE_URL = "https://www.terabox.com/s/1abcXYZ"


def _make_app(
    *,
    config: AppConfig | None = None,
    result: CheckResult | None = None,
) -> tuple[FastAPI, AsyncMock]:
    """Create a minimal FastAPI app with the check router and a mocked use case."""
    app = FastAPI()
    app.include_router(router)

    uc = AsyncMock()
    uc.execute.return_value = result or CheckResult.found(
        [FileEntry(name="a.txt", size=10, isdir=0)]
    )
    app.state.config = config or AppConfig(environment="test")
    app.state.check_share_uc = uc
    return app, uc


class TestNormalizeCookie:
    def test_adds_prefix(self) -> None:
        assert normalize_cookie("abc123") == "ndus=abc123"

    def test_keeps_prefixed_value(self) -> None:
        assert normalize_cookie("ndus=abc123") == "ndus=abc123"


class TestInfoDocument:
    def test_no_params_returns_info(self) -> None:
        app, uc = _make_app()
        resp = TestClient(app).get("/")

        assert resp.status_code == 200
        assert resp.json() == API_INFO
        uc.execute.assert_not_awaited()

    def test_empty_params_return_info(self) -> None:
        app, _ = _make_app()
        resp = TestClient(app).get("/", params={"url": "", "cookie": ""})

        assert resp.status_code == 200
        assert resp.json()["name"] == "TeraBox URL Checker"


class TestValidation:
    def test_missing_cookie_is_401(self) -> None:
        app, uc = _make_app()
        resp = TestClient(app).get("/", params={"url": _SHARE_URL})

        assert resp.status_code == 401
        assert resp.json() == {"error": "Missing 'cookie' parameter"}
        uc.execute.assert_not_awaited()

    def test_missing_url_is_400(self) -> None:
        app, uc = _make_app()
        resp = TestClient(app).get("/", params={"cookie": "abc"})

        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing 'url' parameter"}
        uc.execute.assert_not_awaited()

    def test_strict_domains_rejects_foreign_url(self) -> None:
        config = AppConfig(environment="test", strict_domains=True)
        app, uc = _make_app(config=config)
        resp = TestClient(app).get(
            "/", params={"url": "https://example.com/s/1abc", "cookie": "abc"}
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid TeraBox URL"}
        uc.execute.assert_not_awaited()

    def test_strict_domains_accepts_provider_url(self) -> None:
        config = AppConfig(environment="test", strict_domains=True)
        app, uc = _make_app(config=config)
        resp = TestClient(app).get("/", params={"url": _SHARE_URL, "cookie": "abc"})

        assert resp.status_code == 200
        uc.execute.assert_awaited_once()

    def test_foreign_url_allowed_by_default(self) -> None:
        app, uc = _make_app()
        resp = TestClient(app).get(
            "/", params={"url": "https://example.com/s/1abc", "cookie": "abc"}
        )

        assert resp.status_code == 200
        uc.execute.assert_awaited_once()


class TestCheck:
    @pytest.mark.parametrize("cookie", ["abc123", "ndus=abc123"])
    def test_builds_request_with_prefixed_cookie(self, cookie: str) -> None:
        app, uc = _make_app()
        resp = TestClient(app).get("/", params={"url": _SHARE_URL, "cookie": cookie})

        assert resp.status_code == 200
        uc.execute.assert_awaited_once_with(
            CheckRequest(url=_SHARE_URL, cookie="ndus=abc123", host="dm.nephobox.com")
        )

    def test_host_parameter_overrides_default(self) -> None:
        app, uc = _make_app()
        TestClient(app).get(
            "/",
            params={"url": _SHARE_URL, "cookie": "c", "host": "www.terabox.com"},
        )

        request = uc.execute.await_args.args[0]
        assert request.host == "www.terabox.com"

    def test_configured_default_host(self) -> None:
        config = AppConfig(environment="test", default_host="api.example.test")
        app, uc = _make_app(config=config)
        TestClient(app).get("/", params={"url": _SHARE_URL, "cookie": "c"})

        assert uc.execute.await_args.args[0].host == "api.example.test"

    def test_returns_result_json(self) -> None:
        app, _ = _make_app()
        resp = TestClient(app).get("/", params={"url": _SHARE_URL, "cookie": "c"})

        assert resp.json() == {
            "exists": True,
            "total_files": 1,
            "files": [{"name": "a.txt", "size": 10, "isdir": 0}],
        }

    def test_missing_share_is_still_200(self) -> None:
        app, _ = _make_app(result=CheckResult.missing("File not found or deleted"))
        resp = TestClient(app).get("/", params={"url": _SHARE_URL, "cookie": "c"})

        assert resp.status_code == 200
        assert resp.json() == {"exists": False, "error": "File not found or deleted"}
