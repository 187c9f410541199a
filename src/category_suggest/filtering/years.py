"""Deterministic year-relevance filter.

Rules are evaluated per item, in this order (earlier matches win):

1. Explicit year: the name contains a year token, "19" or "20" followed by
   two digits. Keep it only if it also contains the current or previous
   year. A name carrying the current or previous year is always kept.
2. Decade phrase: the name contains "<digits>0s". Keep it only if one of
   the phrases is "2000s" or "2010s".
3. Everything else is kept.

A four-digit decade ("1990s", "2000s") is read as a decade phrase, not as a
year token. Rule 1 still short-circuits rule 2: "2000s in 1995" is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_CENTURIES = ("19", "20")
_RECENT_DECADES = ("200", "201")


@dataclass(frozen=True)
class TemporalContext:
    """The years considered current when filtering."""

    current_year: int
    previous_year: int

    @classmethod
    def for_year(cls, year: int) -> TemporalContext:
        return cls(current_year=year, previous_year=year - 1)

    @classmethod
    def now(cls) -> TemporalContext:
        """Build the context from the wall clock."""
        return cls.for_year(datetime.now().year)


def _is_digit(text: str, index: int) -> bool:
    return 0 <= index < len(text) and text[index] in _DIGITS


def _is_decade_suffix(text: str, zero_index: int) -> bool:
    """True when text[zero_index:] starts with "0s" after at least one digit."""
    return text.startswith("0s", zero_index) and _is_digit(text, zero_index - 1)


def _has_year_token(text: str) -> bool:
    for i in range(len(text) - 3):
        if text[i : i + 2] not in _CENTURIES:
            continue
        if not (_is_digit(text, i + 2) and _is_digit(text, i + 3)):
            continue
        if _is_decade_suffix(text, i + 3):
            # "1990s": the decade rule owns this one.
            continue
        return True
    return False


def _decade_phrases(text: str) -> list[int]:
    """Return the index of the "0" in every "<digits>0s" occurrence."""
    positions = []
    start = 0
    while True:
        index = text.find("0s", start)
        if index == -1:
            return positions
        if _is_digit(text, index - 1):
            positions.append(index)
        start = index + 1


def is_relevant(name: str, now: TemporalContext) -> bool:
    """Classify a single category name."""
    if str(now.current_year) in name or str(now.previous_year) in name:
        return True

    if _has_year_token(name):
        return False

    decades = _decade_phrases(name)
    if decades:
        return any(name[i - 3 : i] in _RECENT_DECADES for i in decades if i >= 3)

    return True


def filter_years(items: Iterable[str], now: TemporalContext | None = None) -> list[str]:
    """Drop category names tied to past years or old decades.

    Args:
        items: Category names in source order.
        now: Years to treat as current; read from the wall clock when omitted.

    Returns:
        A new list with the relevant names, in their original order.
    """
    if now is None:
        now = TemporalContext.now()
    logger.debug("Filtering years (current=%s, previous=%s)", now.current_year, now.previous_year)

    kept = []
    for name in items:
        if is_relevant(name, now):
            kept.append(name)
        else:
            logger.debug("Filtering out %r", name)
    return kept
