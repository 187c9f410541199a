import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

sys.path.append(str(Path(__file__).parents[1] / "src"))

from category_suggest.filtering.years import TemporalContext
from category_suggest.main import create_app
from category_suggest.repositories.cache import ResultCache
from category_suggest.services.search import PrefixSearchOrchestrator

TEST_YEAR = 2024


@pytest.fixture
def now() -> TemporalContext:
    """Years treated as current in tests (2024 / 2023)."""
    return TemporalContext.for_year(TEST_YEAR)


@pytest.fixture
def mock_lookup():
    """Remote lookup that finds nothing unless a test says otherwise."""
    lookup = AsyncMock()
    lookup.fetch = AsyncMock(return_value=[])
    return lookup


@pytest.fixture
def result_cache() -> ResultCache:
    return ResultCache()


@pytest.fixture
def orchestrator(mock_lookup, result_cache, now) -> PrefixSearchOrchestrator:
    return PrefixSearchOrchestrator(mock_lookup, cache=result_cache, clock=lambda: now)


@pytest.fixture
async def client(orchestrator):
    """Provide test client wired to the test orchestrator.

    ASGITransport doesn't run the lifespan, so no real HTTP client is built.
    """
    app = create_app()
    app.state.orchestrator = orchestrator
    app.state.defaults_provider = lambda: ["A 1999", "B"]

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
