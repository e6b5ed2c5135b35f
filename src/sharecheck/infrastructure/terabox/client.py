"""TeraBox share-info client — primary (cookie) and fallback (guest) lookups.

Primary lookup:
    GET https://{host}/api/shorturlinfo?clienttype=1&root=1&shorturl={id}
    (session cookie + mobile client signature headers)

Fallback lookup:
    GET {fallback_url}  (unauthenticated share-list endpoint)

Both endpoints answer ``{"errno": 0, "list": [...]}`` on success. Any
non-zero ``errno`` means the share is gone or the request was refused.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from sharecheck.domain.entities.share import ProviderResult

log = structlog.get_logger(__name__)

DEFAULT_HOST = "dm.nephobox.com"

DEFAULT_FALLBACK_URL = (
    "https://www.terabox.app/share/list?app_id=250528&shorturl={short_id}&root=1"
)

# The API rejects requests without a known client signature.
_CLIENT_HEADERS = {
    "Accept": "*/*",
    "Accept-Language": "en-IN,en;q=0.9",
    "Connection": "keep-alive",
    "User-Agent": "dubox;4.7.1;iPhone16ProMax;ios-iphone;26.0.1;en_IN",
}


class TeraboxClient:
    """Looks up TeraBox share listings.

    Each lookup is a single attempt. Nothing raises: transport errors,
    non-2xx answers and provider error codes all become failed
    ``ProviderResult`` values.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        fallback_url: str = DEFAULT_FALLBACK_URL,
    ) -> None:
        self._http = http_client
        self._fallback_url = fallback_url

    async def lookup(
        self, short_id: str, cookie: str, host: str = DEFAULT_HOST
    ) -> ProviderResult:
        url = f"https://{host}/api/shorturlinfo"
        params = {"clienttype": "1", "root": "1", "shorturl": short_id}
        headers = {**_CLIENT_HEADERS, "Cookie": cookie}
        return await self._fetch(
            url, params=params, headers=headers, source="primary", short_id=short_id
        )

    async def fallback_lookup(self, short_id: str) -> ProviderResult:
        url = self._fallback_url.format(short_id=quote(short_id, safe=""))
        return await self._fetch(
            url,
            params=None,
            headers={"Accept": "application/json"},
            source="fallback",
            short_id=short_id,
        )

    async def _fetch(
        self,
        url: str,
        *,
        params: dict[str, str] | None,
        headers: dict[str, str],
        source: str,
        short_id: str,
    ) -> ProviderResult:
        # InvalidURL (bad host/port) and UnicodeEncodeError (non-ASCII cookie)
        # are raised before any request is sent and are not HTTPError.
        try:
            resp = await self._http.get(url, params=params, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            log.warning(
                "terabox_request_failed",
                source=source,
                short_id=short_id,
                error=str(e),
            )
            return ProviderResult.failed(f"Network error: {e}")

        if not resp.is_success:
            log.warning(
                "terabox_http_error",
                source=source,
                short_id=short_id,
                status=resp.status_code,
            )
            return ProviderResult.failed("Request failed")

        try:
            data: Any = resp.json()
        except ValueError:
            log.warning("terabox_invalid_json", source=source, short_id=short_id)
            return ProviderResult.failed("Invalid response from provider")

        if not isinstance(data, dict):
            log.warning("terabox_unexpected_payload", source=source, short_id=short_id)
            return ProviderResult.failed("Invalid response from provider")

        errno = data.get("errno")
        if errno != 0:
            log.info(
                "terabox_api_error",
                source=source,
                short_id=short_id,
                errno=errno,
                errmsg=data.get("errmsg"),
            )
            code = errno if isinstance(errno, int) else None
            return ProviderResult.failed(
                data.get("errmsg") or "API error", error_code=code
            )

        log.debug("terabox_lookup_ok", source=source, short_id=short_id)
        return ProviderResult.ok(data)
