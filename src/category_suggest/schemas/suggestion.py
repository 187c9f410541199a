"""Pydantic schemas for category suggestion responses."""

from pydantic import BaseModel, Field

from category_suggest.services.search import SearchOutcome, SearchSource


class SuggestionListResult(BaseModel):
    """Filtered category suggestions for a prefix."""

    prefix: str = Field(description="Prefix the suggestions were computed for")
    categories: list[str] = Field(description="Category names in source order")
    total: int = Field(description="Number of categories returned")
    source: SearchSource = Field(description="Where the unfiltered names came from")

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> "SuggestionListResult":
        return cls(
            prefix=outcome.prefix,
            categories=outcome.categories,
            total=len(outcome.categories),
            source=outcome.source,
        )
