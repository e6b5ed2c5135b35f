from __future__ import annotations

import structlog

from sharecheck.application.result_mapper import map_result
from sharecheck.domain.entities.share import (
    CheckRequest,
    CheckResult,
    ProviderResult,
    ShareUrlError,
)
from sharecheck.domain.ports import ShareProviderPort
from sharecheck.infrastructure.terabox.urls import (
    api_short_id,
    extract_short_id,
    normalize_host,
)

log = structlog.get_logger(__name__)


class CheckShareUseCase:
    """Check whether the share behind a URL still has files.

    Flow:
        1. Rewrite alias hostnames to the request's API host
        2. Extract the short identifier (strip the version digit)
        3. Primary lookup with the session cookie
        4. Fallback lookup, only if the primary failed
        5. Map the listing to a CheckResult

    Never raises for pipeline failures; they come back as
    ``CheckResult(exists=False, error=...)``.
    """

    def __init__(
        self,
        *,
        provider: ShareProviderPort,
        fallback_enabled: bool = True,
    ) -> None:
        self._provider = provider
        self._fallback_enabled = fallback_enabled

    async def execute(self, request: CheckRequest) -> CheckResult:
        url = normalize_host(request.url, request.host)

        try:
            short_id = api_short_id(extract_short_id(url))
        except ShareUrlError as e:
            log.info("share_url_unparseable", url=request.url, reason=str(e))
            return CheckResult.missing(str(e))

        log.info("share_check_started", short_id=short_id, host=request.host)

        result = await self._provider.lookup(short_id, request.cookie, request.host)
        if not result.success and self._fallback_enabled:
            result = await self._fallback(short_id, primary=result)

        check = map_result(result)
        log.info(
            "share_check_finished",
            short_id=short_id,
            exists=check.exists,
            total_files=check.total_files,
        )
        return check

    async def _fallback(
        self, short_id: str, *, primary: ProviderResult
    ) -> ProviderResult:
        log.info(
            "share_primary_failed",
            short_id=short_id,
            errno=primary.error_code,
            error=primary.error_message,
        )
        fallback = await self._provider.fallback_lookup(short_id)
        if fallback.success:
            return fallback

        # Both failed: the authenticated answer is the more telling one.
        log.info(
            "share_fallback_failed",
            short_id=short_id,
            error=fallback.error_message,
        )
        return primary
