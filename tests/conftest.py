"""Shared test fixtures for the sharecheck test suite."""

from __future__ import annotations

from typing import Any

import pytest

from sharecheck.domain.entities.share import CheckRequest, ProviderResult
from sharecheck.infrastructure.config import AppConfig

# ---------------------------------------------------------------------------
# Provider payload fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def single_file_payload() -> dict[str, Any]:
    """Minimal successful share-info payload with one file."""
    return {
        "errno": 0,
        "list": [{"server_filename": "a.txt", "size": 10, "isdir": 0}],
    }


@pytest.fixture()
def folder_payload() -> dict[str, Any]:
    """Share-info payload with a folder and two files, in provider order."""
    return {
        "errno": 0,
        "share_id": 123456,
        "list": [
            {"server_filename": "Season 1", "size": 0, "isdir": 1, "fs_id": 1},
            {"server_filename": "movie.mkv", "size": 1_073_741_824, "isdir": 0},
            {"server_filename": "notes.txt", "size": 512, "isdir": "0"},
        ],
    }


# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def check_request() -> CheckRequest:
    return CheckRequest(
        url="https://www.terabox.com/s/1abcXYZ",
        cookie="ndus=abc123",
        host="dm.nephobox.com",
    )


@pytest.fixture()
def primary_ok(single_file_payload: dict[str, Any]) -> ProviderResult:
    return ProviderResult.ok(single_file_payload)


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def app_config() -> AppConfig:
    """AppConfig with test environment and all defaults."""
    return AppConfig(environment="test")
