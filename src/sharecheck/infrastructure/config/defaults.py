"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "sharecheck",
    "environment": "dev",
    "http": {
        "timeout_seconds": None,  # None = httpx default
        "follow_redirects": False,
    },
    "provider": {
        "default_host": "dm.nephobox.com",
        "fallback_enabled": True,
        "fallback_url": (
            "https://www.terabox.app/share/list"
            "?app_id=250528&shorturl={short_id}&root=1"
        ),
        "strict_domains": False,
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
