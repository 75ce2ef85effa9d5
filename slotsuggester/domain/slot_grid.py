"""
Generation of the regular grid of candidate slot starts.
"""

from typing import Iterator

from pendulum import DateTime

from .models import SLOT_DURATION_MINUTES, SearchWindow


def generate_slot_starts(
    window: SearchWindow,
    slot_minutes: int = SLOT_DURATION_MINUTES,
) -> Iterator[DateTime]:
    """
    Lazily yield slot start instants from the first search day at
    ``day_start_hour:00`` up to and including ``window.window_end``.

    Only the overall window end bounds the grid. Intermediate days are not
    clipped at ``day_end_hour``, so the grid runs through the night until the
    final cutoff.
    """
    current = window.first_slot_start

    while current <= window.window_end:
        yield current
        current = current.add(minutes=slot_minutes)
