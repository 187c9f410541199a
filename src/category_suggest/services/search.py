"""Prefix search orchestration.

Picks the data source for a typed prefix (defaults, cache or the remote
lookup), runs the result through the year-relevance filter and hands it
back to the caller, either as an awaited return value or through a
completion callback for searches started in the background while the user
is still typing.
"""

import asyncio
import itertools
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from category_suggest.clients.base import RemoteCategoryLookup
from category_suggest.core.exceptions import TransportError
from category_suggest.filtering.years import TemporalContext, filter_years
from category_suggest.repositories.cache import ResultCache

logger = logging.getLogger(__name__)

SEARCH_CATS_LIMIT = 25

DefaultsProvider = Callable[[], Sequence[str]]


def no_defaults() -> list[str]:
    return []


class SearchSource(str, Enum):
    """Where the unfiltered names of a search came from."""

    DEFAULTS = "defaults"
    CACHE = "cache"
    REMOTE = "remote"


@dataclass(frozen=True)
class SearchRequest:
    """Inputs of one search, captured before it starts."""

    sequence: int
    prefix: str
    defaults: DefaultsProvider
    cached: tuple[str, ...] | None


@dataclass(frozen=True)
class SearchOutcome:
    """Filtered result of one search.

    ``failed`` is set when the remote lookup raised a transport error; the
    categories are then empty, same as a lookup that found nothing.
    """

    sequence: int
    prefix: str
    categories: list[str]
    source: SearchSource
    failed: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.categories


class PrefixSearchOrchestrator:
    """Service layer for prefix-based category suggestions."""

    def __init__(
        self,
        lookup: RemoteCategoryLookup,
        cache: ResultCache | None = None,
        limit: int = SEARCH_CATS_LIMIT,
        clock: Callable[[], TemporalContext] = TemporalContext.now,
        write_through: bool = True,
    ):
        """Initialize the orchestrator.

        Args:
            lookup: Remote prefix lookup used on cache misses
            cache: Result cache; a private empty one when omitted
            limit: Maximum number of names requested from the lookup
            clock: Returns the years treated as current, once per search
            write_through: Store successful remote results in the cache
        """
        self.lookup = lookup
        self.cache = cache if cache is not None else ResultCache()
        self.limit = limit
        self.clock = clock
        self.write_through = write_through

        self._sequence = itertools.count(1)
        self._last_delivered = 0
        self._pending: set[asyncio.Task] = set()

    @property
    def last_delivered(self) -> int:
        """Sequence number of the newest outcome handed to a callback."""
        return self._last_delivered

    def prepare(self, prefix: str, defaults: DefaultsProvider | None = None) -> SearchRequest:
        """Snapshot everything a search needs so it can run detached.

        Only the cache entry for the request's own prefix is copied; the
        empty prefix never touches the cache.
        """
        prefix = prefix or ""
        cached = self.cache.get(prefix) if prefix else None
        return SearchRequest(
            sequence=next(self._sequence),
            prefix=prefix,
            defaults=defaults or no_defaults,
            cached=tuple(cached) if cached is not None else None,
        )

    async def execute(self, request: SearchRequest) -> SearchOutcome:
        """Run one search. Never raises on lookup failure."""
        prefix = request.prefix

        if not prefix:
            raw = list(request.defaults())
            logger.debug("Merged default items, waiting for filter")
            return self._outcome(request, raw, SearchSource.DEFAULTS)

        if request.cached is not None:
            raw = list(request.cached)
            logger.debug("Found cache items for %r, waiting for filter", prefix)
            return self._outcome(request, raw, SearchSource.CACHE)

        try:
            raw = await self.lookup.fetch(prefix, self.limit)
        except TransportError as e:
            logger.warning(
                "Remote category lookup failed",
                extra={"prefix": prefix, "error_code": e.error_code, "sequence": request.sequence},
                exc_info=True,
            )
            return SearchOutcome(
                sequence=request.sequence,
                prefix=prefix,
                categories=[],
                source=SearchSource.REMOTE,
                failed=True,
            )

        if self.write_through:
            self.cache.put(prefix, raw)
        logger.debug("Found categories from prefix search for %r, waiting for filter", prefix)
        return self._outcome(request, raw, SearchSource.REMOTE)

    async def search(self, prefix: str, defaults: DefaultsProvider | None = None) -> list[str]:
        """Search for category names matching a prefix.

        Args:
            prefix: Text typed so far; empty means "show defaults"
            defaults: Supplies suggestions for the empty prefix

        Returns:
            Filtered category names, possibly empty
        """
        outcome = await self.execute(self.prepare(prefix, defaults))
        return outcome.categories

    def submit(
        self,
        prefix: str,
        defaults: DefaultsProvider | None,
        on_complete: Callable[[SearchOutcome], None],
        on_started: Callable[[SearchRequest], None] | None = None,
    ) -> asyncio.Task:
        """Start a search in the background.

        ``on_complete`` runs on the event loop when the search finishes,
        unless an outcome of a newer search was already delivered; results
        of overlapping searches are never delivered out of order.

        Returns:
            The task running the search
        """
        request = self.prepare(prefix, defaults)
        if on_started is not None:
            on_started(request)

        task = asyncio.get_running_loop().create_task(
            self._run_and_deliver(request, on_complete),
            name=f"prefix-search-{request.sequence}",
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        task.add_done_callback(self._log_failure)
        return task

    async def aclose(self) -> None:
        """Cancel background searches that have not completed yet."""
        tasks = list(self._pending)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    @staticmethod
    def _log_failure(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "Background prefix search failed",
                extra={"error_type": type(exc).__name__},
                exc_info=exc,
            )

    async def _run_and_deliver(
        self, request: SearchRequest, on_complete: Callable[[SearchOutcome], None]
    ) -> SearchOutcome:
        outcome = await self.execute(request)
        if outcome.sequence < self._last_delivered:
            logger.debug(
                "Discarding stale result for %r",
                request.prefix,
                extra={"sequence": outcome.sequence},
            )
            return outcome
        self._last_delivered = outcome.sequence
        on_complete(outcome)
        return outcome

    def _outcome(
        self, request: SearchRequest, raw: list[str], source: SearchSource
    ) -> SearchOutcome:
        categories = filter_years(raw, self.clock())
        logger.info(
            "Prefix search completed",
            extra={
                "prefix": request.prefix,
                "source": source.value,
                "sequence": request.sequence,
                "count": len(categories),
            },
        )
        return SearchOutcome(
            sequence=request.sequence,
            prefix=request.prefix,
            categories=categories,
            source=source,
        )
