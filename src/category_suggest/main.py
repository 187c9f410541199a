from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from category_suggest import __version__
from category_suggest.api.middleware.error_handler import (
    handle_generic_error,
    handle_validation_error,
)
from category_suggest.api.middleware.logging import RequestLoggingMiddleware
from category_suggest.api.v1 import router as v1_router
from category_suggest.api.v1.health import router as health_router
from category_suggest.clients.mediawiki import MediaWikiCategoryLookup
from category_suggest.config import settings
from category_suggest.core.logging import setup_logging
from category_suggest.repositories.cache import ResultCache
from category_suggest.services.search import PrefixSearchOrchestrator


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.log_level, json_format=settings.log_json)
    lookup = MediaWikiCategoryLookup.from_settings(settings)
    app.state.orchestrator = PrefixSearchOrchestrator(
        lookup,
        cache=ResultCache(max_entries=settings.cache_max_entries),
        limit=settings.search_cats_limit,
        write_through=settings.cache_write_through,
    )
    yield
    # Shutdown
    await app.state.orchestrator.aclose()
    await lookup.aclose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Category Suggest API",
        description="Prefix-based category suggestions with year-relevance filtering",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
