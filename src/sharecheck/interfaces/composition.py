"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from sharecheck.application.use_cases import CheckShareUseCase
from sharecheck.infrastructure.config.schema import AppConfig
from sharecheck.infrastructure.terabox import TeraboxClient
from sharecheck.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


def _build_http_client(config: AppConfig) -> httpx.AsyncClient:
    kwargs: dict[str, object] = {"follow_redirects": config.http_follow_redirects}
    if config.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(config.http_timeout_seconds)
    return httpx.AsyncClient(**kwargs)  # type: ignore[arg-type]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: Initialize and cleanup all resources (DI Composition Root).

    Order matters:
        1. HTTP client (shared, holds no per-request state)
        2. TeraBox provider client (uses HTTP client)
        3. Check use case (uses provider)
    """
    state = cast(AppState, app.state)
    config = state.config

    # 1) HTTP client
    state.http_client = _build_http_client(config)
    log.info(
        "http_client_initialized",
        timeout_seconds=config.http_timeout_seconds,
        follow_redirects=config.http_follow_redirects,
    )

    # 2) Provider
    state.share_provider = TeraboxClient(
        http_client=state.http_client,
        fallback_url=config.fallback_url,
    )

    # 3) Use case
    state.check_share_uc = CheckShareUseCase(
        provider=state.share_provider,
        fallback_enabled=config.fallback_enabled,
    )
    log.info(
        "check_share_initialized",
        default_host=config.default_host,
        fallback_enabled=config.fallback_enabled,
        strict_domains=config.strict_domains,
    )

    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("http_client_closed")
