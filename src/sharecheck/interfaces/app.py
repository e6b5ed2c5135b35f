"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, Request
from starlette.responses import Response

from sharecheck.infrastructure.config import AppConfig
from sharecheck.interfaces.api.middleware import CorsMiddleware
from sharecheck.interfaces.app_state import AppState
from sharecheck.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def create_app(config: AppConfig) -> FastAPI:
    """Create FastAPI app — configuration ONLY, NO resource initialization.

    Resources (HTTP client, provider, use case) are created in lifespan().
    """
    app = FastAPI(
        title="sharecheck",
        description="Checks whether TeraBox share links still point to files",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config
    app.state.started_at = time.monotonic()

    app.add_middleware(CorsMiddleware)

    from sharecheck.interfaces.api.check.router import router as check_router

    app.include_router(check_router)

    @app.get("/health")
    async def health() -> dict[str, str | float]:
        """Liveness check: 200 as long as the process is running."""
        return {
            "status": "OK",
            "timestamp": _utc_timestamp(),
            "uptime": round(time.monotonic() - app.state.started_at, 3),
        }

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code = getattr(locals().get("response", None), "status_code", 500)

            # Query strings carry session cookies; log the path only.
            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app
