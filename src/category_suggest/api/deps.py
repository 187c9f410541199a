"""FastAPI dependency injection for search components."""

from fastapi import Request

from category_suggest.config import Settings, get_settings
from category_suggest.services.search import DefaultsProvider, PrefixSearchOrchestrator


def get_orchestrator(request: Request) -> PrefixSearchOrchestrator:
    """Get the orchestrator created at application startup."""
    return request.app.state.orchestrator


def get_defaults_provider(request: Request) -> DefaultsProvider:
    """
    Get the provider of suggestions for an empty prefix.

    Falls back to the configured default categories when the application
    state doesn't carry a provider.
    """
    provider = getattr(request.app.state, "defaults_provider", None)
    if provider is not None:
        return provider

    settings: Settings = get_settings()
    return lambda: list(settings.default_categories)
