"""Year-relevance filtering for category suggestions.

Categories tied to a specific past year (e.g. "Events in 1995") or to an old
decade (e.g. "1980s fashion") are rarely what a user wants to tag a new
upload with, so they are dropped from suggestion lists.
"""

from .years import TemporalContext, filter_years, is_relevant

__all__ = ["TemporalContext", "filter_years", "is_relevant"]
