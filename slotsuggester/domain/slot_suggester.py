"""
Core business logic for suggesting interview slots.

Pure domain logic without any external dependencies (no file access, no
rendering): the grid, the conflict check and the ranking run entirely in
memory on values handed in by the caller.
"""

import logging
from typing import Iterable, List

from pendulum.tz.timezone import Timezone

from .conflict_checker import ConflictChecker
from .models import BusyInterval, Candidate, SearchWindow
from .ranker import rank_candidates, score_candidates
from .slot_grid import generate_slot_starts

logger = logging.getLogger(__name__)


class SlotSuggester:
    """
    Computes the ranked list of free 30-minute slots.

    Algorithm:
    1. Generate the slot grid for the search window
    2. Drop every slot that overlaps a buffered busy interval
    3. Score the remaining slots (morning peak in the display timezone)
    4. Sort by score descending, then by start time ascending
    """

    def __init__(self, window: SearchWindow, timezone: Timezone | str = "UTC"):
        self.window = window
        self.timezone = timezone

    def suggest(self, busy_intervals: Iterable[BusyInterval]) -> List[Candidate]:
        """Return all free candidates, ranked best first."""
        checker = ConflictChecker(busy_intervals, buffer_minutes=self.window.buffer_minutes)

        free_starts = []
        blocked = 0
        for slot_start in generate_slot_starts(self.window):
            if checker.is_free(slot_start):
                free_starts.append(slot_start)
            else:
                blocked += 1

        logger.debug(
            "Grid produced %d free and %d blocked slots", len(free_starts), blocked
        )

        return rank_candidates(score_candidates(free_starts, self.timezone))
