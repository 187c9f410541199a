"""Category suggestion endpoints."""

from fastapi import APIRouter, Depends, Query

from category_suggest.api.deps import get_defaults_provider, get_orchestrator
from category_suggest.schemas.suggestion import SuggestionListResult
from category_suggest.services.search import DefaultsProvider, PrefixSearchOrchestrator

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "/suggest",
    response_model=SuggestionListResult,
    summary="Suggest categories for a prefix",
    description="""
    Suggest category names for the text typed so far.

    - Empty prefix: the configured default categories
    - Previously searched prefix: cached results
    - Otherwise: a remote prefix lookup

    Categories tied to past years or old decades are filtered out.
    A failed remote lookup yields an empty list.
    """,
)
async def suggest_categories(
    prefix: str = Query("", max_length=255, description="Text typed so far"),
    orchestrator: PrefixSearchOrchestrator = Depends(get_orchestrator),
    defaults: DefaultsProvider = Depends(get_defaults_provider),
) -> SuggestionListResult:
    outcome = await orchestrator.execute(orchestrator.prepare(prefix, defaults))
    return SuggestionListResult.from_outcome(outcome)
