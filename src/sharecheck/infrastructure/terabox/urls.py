"""URL helpers for TeraBox share links.

TeraBox serves the same share under a family of mirror domains. Share URLs
come in two shapes:

    https://www.terabox.com/s/1AbCdEf          (path token)
    https://www.terabox.com/sharing/link?surl=AbCdEf  (query parameter)

Path tokens carry a leading version digit ``1`` which the share-info API
does not accept, so it is stripped before lookups.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse, urlunparse

from sharecheck.domain.entities.share import InvalidShareUrl, ShortLinkError

# Hostnames rewritten to the canonical API host.
ALIAS_DOMAINS: frozenset[str] = frozenset(
    {
        "terabox.com",
        "www.terabox.com",
        "terabox.app",
        "www.terabox.app",
        "teraboxapp.com",
        "www.teraboxapp.com",
        "1024terabox.com",
        "www.1024terabox.com",
        "1024tera.com",
        "www.1024tera.com",
        "nephobox.com",
        "www.nephobox.com",
        "4funbox.com",
        "www.4funbox.com",
        "mirrobox.com",
        "www.mirrobox.com",
        "momerybox.com",
        "www.momerybox.com",
        "freeterabox.com",
        "www.freeterabox.com",
        "tibibox.com",
        "www.tibibox.com",
        "teraboxlink.com",
        "terasharelink.com",
    }
)

# Substrings accepted by the strict domain check.
PROVIDER_DOMAIN_MARKERS: tuple[str, ...] = (
    "terabox",
    "1024tera",
    "nephobox",
    "4funbox",
    "mirrobox",
    "momerybox",
    "tibibox",
    "terasharelink",
)

_SHORT_PATH_RE = re.compile(r"/s/([^/?&]+)")


def normalize_host(url: str, target_host: str) -> str:
    """Rewrite known TeraBox alias hostnames to ``target_host``.

    Unknown hosts and malformed URLs are returned unchanged.
    """
    try:
        parsed = urlparse(url)
        hostname = (parsed.hostname or "").lower()
        if hostname not in ALIAS_DOMAINS:
            return url

        netloc = target_host
        if parsed.port is not None:
            netloc = f"{netloc}:{parsed.port}"
        userinfo, sep, _ = parsed.netloc.rpartition("@")
        if sep:
            netloc = f"{userinfo}@{netloc}"
        return urlunparse(parsed._replace(netloc=netloc))
    except ValueError:
        return url


def is_provider_url(url: str) -> bool:
    lowered = url.lower()
    return any(marker in lowered for marker in PROVIDER_DOMAIN_MARKERS)


def extract_short_id(url: str) -> str:
    """Extract the raw short identifier from a share URL.

    Tries the ``surl`` query parameter first, then a ``/s/<token>`` path
    segment.

    Raises:
        InvalidShareUrl: The input is not an absolute URL.
        ShortLinkError: No identifier could be found.
    """
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidShareUrl(url) from e

    if not parsed.scheme or not parsed.netloc:
        raise InvalidShareUrl(url)

    surl = parse_qs(parsed.query).get("surl")
    if surl and surl[0]:
        return surl[0]

    match = _SHORT_PATH_RE.search(url)
    if match:
        return match.group(1)

    raise ShortLinkError(url)


def api_short_id(short_id: str) -> str:
    """Strip the leading version digit ``1`` (only if something remains)."""
    if short_id.startswith("1") and len(short_id) > 1:
        return short_id[1:]
    return short_id
