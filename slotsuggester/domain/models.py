"""
Domain models for busy intervals, candidate slots and the search window.
"""

from dataclasses import dataclass

from pendulum import DateTime

SLOT_DURATION_MINUTES = 30


@dataclass(frozen=True)
class BusyInterval:
    """
    An immutable busy period taken from a calendar event, in UTC.

    Invariant: start must be before end.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Start time {self.start} must be before end time {self.end}")

    def widened(self, buffer_minutes: int) -> "BusyInterval":
        """Return a copy padded by ``buffer_minutes`` on both ends."""
        if not buffer_minutes:
            return self
        return BusyInterval(
            start=self.start.subtract(minutes=buffer_minutes),
            end=self.end.add(minutes=buffer_minutes),
        )

    def overlaps(self, start: DateTime, end: DateTime) -> bool:
        """Half-open overlap test against ``[start, end)``."""
        return start < self.end and end > self.start

    def __str__(self) -> str:
        return f"{self.start.format('YYYY-MM-DD HH:mm')} - {self.end.format('HH:mm')} UTC"


@dataclass(frozen=True)
class Candidate:
    """
    A candidate slot on the grid. The end is always derived from the start.
    """
    slot_start: DateTime
    score: int = 0

    @property
    def slot_end(self) -> DateTime:
        return self.slot_start.add(minutes=SLOT_DURATION_MINUTES)

    @property
    def is_morning(self) -> bool:
        return self.score == 1


@dataclass(frozen=True)
class SearchWindow:
    """
    Immutable search configuration for one run.

    ``window_start`` is the instant one full day after "now"; events ending
    before it are ignored. ``window_end`` is the last search day at
    ``day_end_hour:59:59`` and is the only upper bound applied to the grid.
    """
    window_start: DateTime
    window_end: DateTime
    day_start_hour: int
    day_end_hour: int
    buffer_minutes: int

    @classmethod
    def starting_after(
        cls,
        now: DateTime,
        *,
        days_ahead: int,
        day_start_hour: int,
        day_end_hour: int,
        buffer_minutes: int,
    ) -> "SearchWindow":
        """Build the window for a run that starts at ``now`` (skips the current day)."""
        now = now.in_timezone("UTC")
        window_start = now.add(days=1)
        window_end = window_start.add(days=days_ahead).set(
            hour=day_end_hour, minute=59, second=59, microsecond=0
        )
        return cls(
            window_start=window_start,
            window_end=window_end,
            day_start_hour=day_start_hour,
            day_end_hour=day_end_hour,
            buffer_minutes=buffer_minutes,
        )

    @property
    def first_slot_start(self) -> DateTime:
        """The first grid instant: first search day at ``day_start_hour:00``."""
        return self.window_start.set(
            hour=self.day_start_hour, minute=0, second=0, microsecond=0
        )
