"""Interface consumed by the search orchestrator for remote lookups."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RemoteCategoryLookup(Protocol):
    """List categories whose name starts with a prefix.

    Implementations raise ``TransportError`` on network or IO failure. Retry
    and timeout policy belong to the implementation, not to its callers.
    """

    async def fetch(self, prefix: str, limit: int) -> list[str]:
        """Return at most ``limit`` category names starting with ``prefix``."""
        ...
