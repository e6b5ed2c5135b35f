"""Map raw provider listings to the public CheckResult shape."""

from __future__ import annotations

from typing import Any

from sharecheck.domain.entities.share import (
    MISSING,
    CheckResult,
    FileEntry,
    ProviderResult,
)

NOT_FOUND_MESSAGE = "File not found or deleted"
NO_FILES_MESSAGE = "No files found"


def _to_file_entry(item: Any) -> FileEntry:
    if not isinstance(item, dict):
        return FileEntry()
    return FileEntry(
        name=item.get("server_filename", MISSING),
        size=item.get("size", MISSING),
        isdir=item.get("isdir", MISSING),
    )


def map_result(result: ProviderResult) -> CheckResult:
    """Convert a provider lookup into a CheckResult.

    A successful lookup with an empty listing is reported as missing with
    ``NO_FILES_MESSAGE``.
    """
    if not result.success:
        return CheckResult.missing(result.error_message or NOT_FOUND_MESSAGE)

    payload = result.payload or {}
    file_list = payload.get("list") or []
    if not file_list:
        return CheckResult.missing(NO_FILES_MESSAGE)

    return CheckResult.found([_to_file_entry(item) for item in file_list])
