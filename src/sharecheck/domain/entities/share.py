"""Domain entities for share-link existence checks.

Pure value objects — no framework dependencies, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class _Missing:
    """Marker for a key the provider did not send."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class ShareCheckError(Exception):
    """Base class for share check errors."""


class ShareUrlError(ShareCheckError):
    """The share URL could not be turned into a short identifier."""


class InvalidShareUrl(ShareUrlError):
    def __init__(self, url: str) -> None:
        super().__init__("Invalid URL format")
        self.url = url


class ShortLinkError(ShareUrlError):
    def __init__(self, url: str) -> None:
        super().__init__("Could not parse Short URL")
        self.url = url


@dataclass(frozen=True)
class CheckRequest:
    """One inbound check, built per request and never stored."""

    url: str
    cookie: str
    host: str


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of a single provider lookup (primary or fallback)."""

    success: bool
    payload: dict[str, Any] | None = None
    error_code: int | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls, payload: dict[str, Any]) -> ProviderResult:
        return cls(success=True, payload=payload)

    @classmethod
    def failed(cls, message: str, *, error_code: int | None = None) -> ProviderResult:
        return cls(success=False, error_code=error_code, error_message=message)


@dataclass(frozen=True)
class FileEntry:
    """A single file of a share, copied as-is from the provider listing."""

    name: Any = MISSING
    size: Any = MISSING
    isdir: Any = MISSING

    def to_dict(self) -> dict[str, Any]:
        # Absent upstream keys stay absent; explicit nulls are kept.
        data = {"name": self.name, "size": self.size, "isdir": self.isdir}
        return {k: v for k, v in data.items() if v is not MISSING}


@dataclass(frozen=True)
class CheckResult:
    """Externally observable result of a share check.

    Invariant: ``len(files) == total_files`` whenever ``exists`` is True.
    """

    exists: bool
    files: tuple[FileEntry, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def total_files(self) -> int:
        return len(self.files)

    @classmethod
    def found(cls, files: list[FileEntry]) -> CheckResult:
        return cls(exists=True, files=tuple(files))

    @classmethod
    def missing(cls, error: str) -> CheckResult:
        return cls(exists=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        if not self.exists:
            return {"exists": False, "error": self.error or ""}
        return {
            "exists": True,
            "total_files": self.total_files,
            "files": [f.to_dict() for f in self.files],
        }
