"""Share check endpoint (``GET /``)."""

from __future__ import annotations

from typing import Any, cast

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from sharecheck.domain.entities.share import CheckRequest
from sharecheck.infrastructure.terabox.urls import is_provider_url
from sharecheck.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(tags=["check"])

COOKIE_PREFIX = "ndus="

API_INFO: dict[str, Any] = {
    "name": "TeraBox URL Checker",
    "version": "1.0.0",
    "description": "Lightweight API to check if TeraBox files exist",
    "usage": "GET /?url=TERABOX_URL&cookie=ndus=YOUR_COOKIE",
    "endpoints": {
        "/": "Check URL",
        "/health": "Health check",
    },
    "response": {
        "exists": "true/false",
        "total_files": "number",
        "files": "[{name, size, isdir}]",
    },
}


def normalize_cookie(cookie: str) -> str:
    """Prefix a bare session value with ``ndus=``."""
    if cookie.startswith(COOKIE_PREFIX):
        return cookie
    return f"{COOKIE_PREFIX}{cookie}"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/", response_model=None)
async def check_share(
    request: Request,
    url: str | None = None,
    cookie: str | None = None,
    host: str | None = None,
) -> dict[str, Any] | JSONResponse:
    """Check whether the files behind a TeraBox share URL still exist.

    Without ``url`` and ``cookie`` the API description is returned. Missing
    parameters are client errors; a share that cannot be found is not, it
    comes back as 200 with ``exists: false``.
    """
    state = cast(AppState, request.app.state)
    config = state.config

    if not url and not cookie:
        return API_INFO

    if not url:
        return _error(400, "Missing 'url' parameter")

    if not cookie:
        log.info("check_rejected_missing_cookie")
        return _error(401, "Missing 'cookie' parameter")

    if config.strict_domains and not is_provider_url(url):
        log.info("check_rejected_foreign_url", url=url)
        return _error(400, "Invalid TeraBox URL")

    check_request = CheckRequest(
        url=url,
        cookie=normalize_cookie(cookie),
        host=host or config.default_host,
    )
    result = await state.check_share_uc.execute(check_request)
    return result.to_dict()
