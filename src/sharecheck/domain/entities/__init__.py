from .share import (
    MISSING,
    CheckRequest,
    CheckResult,
    FileEntry,
    InvalidShareUrl,
    ProviderResult,
    ShareCheckError,
    ShareUrlError,
    ShortLinkError,
)

__all__ = [
    "MISSING",
    "CheckRequest",
    "CheckResult",
    "FileEntry",
    "InvalidShareUrl",
    "ProviderResult",
    "ShareCheckError",
    "ShareUrlError",
    "ShortLinkError",
]
