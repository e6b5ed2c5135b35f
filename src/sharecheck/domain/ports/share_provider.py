"""Port for looking up share listings at the storage provider."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sharecheck.domain.entities.share import ProviderResult


@runtime_checkable
class ShareProviderPort(Protocol):
    """Looks up the file listing behind a short identifier.

    Implementations never raise: every transport or provider failure is
    returned as an unsuccessful ``ProviderResult``.
    """

    async def lookup(self, short_id: str, cookie: str, host: str) -> ProviderResult:
        """Authenticated lookup against the primary share-info API."""
        ...

    async def fallback_lookup(self, short_id: str) -> ProviderResult:
        """Unauthenticated lookup against the secondary share-list endpoint."""
        ...
