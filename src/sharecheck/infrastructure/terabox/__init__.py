"""TeraBox provider adapter: URL handling and the share-info client."""

from __future__ import annotations

from .client import DEFAULT_FALLBACK_URL, DEFAULT_HOST, TeraboxClient
from .urls import api_short_id, extract_short_id, is_provider_url, normalize_host

__all__ = [
    "DEFAULT_FALLBACK_URL",
    "DEFAULT_HOST",
    "TeraboxClient",
    "api_short_id",
    "extract_short_id",
    "is_provider_url",
    "normalize_host",
]
