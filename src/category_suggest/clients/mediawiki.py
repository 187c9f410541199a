"""MediaWiki ``list=allcategories`` client.

Equivalent to:
https://commons.wikimedia.org/w/api.php?action=query&list=allcategories&acprefix=<prefix>&aclimit=25
"""

import logging
from typing import Any

import httpx

from category_suggest.config import Settings
from category_suggest.core.exceptions import TransportError

logger = logging.getLogger(__name__)


class MediaWikiCategoryLookup:
    """Prefix lookup against a MediaWiki API endpoint."""

    def __init__(self, client: httpx.AsyncClient, api_url: str):
        """Initialize the lookup.

        Args:
            client: HTTP client; its timeout and headers apply to every fetch
            api_url: Full URL of the wiki's api.php
        """
        self.client = client
        self.api_url = api_url

    @classmethod
    def from_settings(cls, settings: Settings) -> "MediaWikiCategoryLookup":
        """Build a lookup with its own client configured from settings."""
        client = httpx.AsyncClient(
            timeout=settings.request_timeout_seconds,
            headers={"User-Agent": settings.user_agent},
        )
        return cls(client, settings.mediawiki_api_url)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch(self, prefix: str, limit: int) -> list[str]:
        """List categories starting with ``prefix``, capped at ``limit``.

        Raises:
            TransportError: On network failure, non-2xx status, or an
                unreadable payload
        """
        params = {
            "action": "query",
            "list": "allcategories",
            "acprefix": prefix,
            "aclimit": str(limit),
            "format": "json",
            "formatversion": "2",
        }
        try:
            response = await self.client.get(self.api_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise TransportError(
                "LOOKUP_001",
                details={"prefix": prefix, "error_type": type(e).__name__},
            ) from e
        except ValueError as e:
            raise TransportError("LOOKUP_002", details={"prefix": prefix}) from e

        categories = self._parse(payload)
        logger.debug("Prefix lookup %r returned %d categories", prefix, len(categories))
        return categories

    @staticmethod
    def _parse(payload: Any) -> list[str]:
        if not isinstance(payload, dict) or "error" in payload:
            error = payload.get("error") if isinstance(payload, dict) else None
            raise TransportError("LOOKUP_002", details={"api_error": error})

        query = payload.get("query", {})
        entries = query.get("allcategories", []) if isinstance(query, dict) else None
        if not isinstance(entries, list):
            raise TransportError("LOOKUP_002", details={"query_type": type(query).__name__})

        categories = []
        for entry in entries:
            # formatversion=2 uses "category", the legacy format uses "*".
            name = entry.get("category", entry.get("*")) if isinstance(entry, dict) else None
            if isinstance(name, str):
                categories.append(name)
        return categories
