"""
Conflict detection between candidate slots and buffered busy intervals.
"""

from typing import Iterable, List

from pendulum import DateTime

from .models import SLOT_DURATION_MINUTES, BusyInterval


class ConflictChecker:
    """
    Decides whether a slot overlaps any busy interval once every interval is
    widened by ``buffer_minutes`` on both sides.

    Intervals are widened and sorted by start once, so each check can stop as
    soon as the remaining intervals start after the slot ends.
    """

    def __init__(self, busy_intervals: Iterable[BusyInterval], buffer_minutes: int = 0):
        self._buffered: List[BusyInterval] = sorted(
            (interval.widened(buffer_minutes) for interval in busy_intervals),
            key=lambda interval: interval.start,
        )

    @property
    def buffered_intervals(self) -> List[BusyInterval]:
        return list(self._buffered)

    def has_conflict(
        self,
        slot_start: DateTime,
        slot_minutes: int = SLOT_DURATION_MINUTES,
    ) -> bool:
        """Return True if ``[slot_start, slot_start + slot_minutes)`` hits any buffered interval."""
        slot_end = slot_start.add(minutes=slot_minutes)

        for interval in self._buffered:
            if interval.start >= slot_end:
                break
            if interval.overlaps(slot_start, slot_end):
                return True

        return False

    def is_free(self, slot_start: DateTime) -> bool:
        return not self.has_conflict(slot_start)
