"""
Scoring and ranking of free candidate slots.

The morning rule is fixed: a slot scores 1 when its start, converted to the
display timezone, falls in the local hours [9, 12), and 0 otherwise.
"""

from typing import Iterable, List, Sequence

from pendulum import DateTime
from pendulum.tz.timezone import Timezone

from .models import Candidate

MORNING_START_HOUR = 9
MORNING_END_HOUR = 12
DEFAULT_LIMIT = 5


def morning_score(slot_start: DateTime, timezone: Timezone | str) -> int:
    """Return 1 if the local start hour is in the morning peak, else 0."""
    local_hour = slot_start.in_timezone(timezone).hour
    return 1 if MORNING_START_HOUR <= local_hour < MORNING_END_HOUR else 0


def score_candidates(
    slot_starts: Iterable[DateTime],
    timezone: Timezone | str,
) -> List[Candidate]:
    """Wrap each free slot start in a scored Candidate, keeping grid order."""
    return [
        Candidate(slot_start=start, score=morning_score(start, timezone))
        for start in slot_starts
    ]


def rank_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """
    Order candidates by score descending, then start time ascending.

    ``sorted`` is stable, so equal keys keep their incoming order.
    """
    return sorted(candidates, key=lambda c: (-c.score, c.slot_start))


def top_candidates(ranked: Sequence[Candidate], limit: int = DEFAULT_LIMIT) -> List[Candidate]:
    """Return at most ``limit`` entries; an empty list is a valid result."""
    return list(ranked[:limit])
