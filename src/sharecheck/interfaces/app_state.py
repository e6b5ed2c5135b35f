"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from sharecheck.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from sharecheck.application.use_cases import CheckShareUseCase
    from sharecheck.domain.ports import ShareProviderPort


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Process start (time.monotonic()), for /health uptime
    started_at: float

    # Infrastructure
    http_client: httpx.AsyncClient

    # Domain Ports
    share_provider: ShareProviderPort

    # Application Services
    check_share_uc: CheckShareUseCase
