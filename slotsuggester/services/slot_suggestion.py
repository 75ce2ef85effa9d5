"""
Application service for suggesting interview slots.

The service coordinates reading busy intervals via a calendar reader adapter
and delegates the grid, conflict and ranking work to the domain-level
``SlotSuggester``. "Now" is always passed in, so a run is fully determined
by its inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol, Sequence

from pendulum import DateTime
from pendulum.tz.timezone import Timezone

from ..config import SearchSettings, resolve_timezone
from ..domain.models import BusyInterval, Candidate, SearchWindow
from ..domain.ranker import top_candidates
from ..domain.slot_suggester import SlotSuggester

logger = logging.getLogger(__name__)


class CalendarReaderProtocol(Protocol):
    """Protocol describing the calendar reader behaviour needed by the service."""

    def read_busy_intervals(
        self,
        paths: Sequence[Path],
        not_before: DateTime,
    ) -> List[BusyInterval]:
        """Return the busy intervals of all calendars."""


@dataclass(frozen=True)
class SuggestionResult:
    """Outcome of one run: the window searched and the top-ranked slots."""
    window: SearchWindow
    timezone: Timezone
    busy_intervals: List[BusyInterval]
    suggestions: List[Candidate]


class SlotSuggestionService:
    """
    Orchestrates busy-interval extraction and slot ranking.

    Depending on a protocol keeps the .ics adapter swappable with an in-memory
    stub in tests.
    """

    def __init__(self, calendar_reader: CalendarReaderProtocol) -> None:
        self._calendar_reader = calendar_reader

    def suggest(
        self,
        *,
        paths: Sequence[Path],
        settings: SearchSettings,
        now: DateTime,
    ) -> SuggestionResult:
        """
        Resolve the timezone, read every calendar and rank the free slots.

        The timezone is validated before any file is touched.
        """
        timezone = resolve_timezone(settings.timezone)

        window = SearchWindow.starting_after(
            now,
            days_ahead=settings.days_ahead,
            day_start_hour=settings.start_hour,
            day_end_hour=settings.end_hour,
            buffer_minutes=settings.buffer_minutes,
        )
        logger.debug(
            "Search window %s -> %s (buffer %d min)",
            window.first_slot_start,
            window.window_end,
            window.buffer_minutes,
        )

        busy_intervals = self._calendar_reader.read_busy_intervals(
            list(paths),
            window.window_start,
        )

        ranked = SlotSuggester(window=window, timezone=timezone).suggest(busy_intervals)

        return SuggestionResult(
            window=window,
            timezone=timezone,
            busy_intervals=busy_intervals,
            suggestions=top_candidates(ranked, settings.limit),
        )
