"""
Shared fixtures and helpers for the test suite.
"""

from pathlib import Path
from typing import Iterable, Tuple

import pendulum
import pytest


@pytest.fixture
def fixed_now():
    """Sunday afternoon; the search starts Monday 2024-11-25."""
    return pendulum.datetime(2024, 11, 24, 15, 30, tz="UTC")


def build_ics(events: Iterable[Tuple[str, ...]]) -> str:
    """
    Build a minimal VCALENDAR document.

    Each event is a tuple of raw property lines, e.g.
    ``("DTSTART:20241125T090000Z", "DTEND:20241125T100000Z")``.
    """
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0", "PRODID:-//slotsuggester tests//EN"]
    for index, properties in enumerate(events):
        lines.append("BEGIN:VEVENT")
        lines.append(f"UID:event-{index}@example.com")
        lines.append(f"SUMMARY:Event {index}")
        lines.extend(properties)
        lines.append("END:VEVENT")
    lines.append("END:VCALENDAR")
    return "\r\n".join(lines) + "\r\n"


@pytest.fixture
def write_ics(tmp_path: Path):
    """Write an .ics file built from event property tuples and return its path."""

    def _write(name: str, events: Iterable[Tuple[str, ...]]) -> Path:
        path = tmp_path / name
        path.write_text(build_ics(events), encoding="utf-8")
        return path

    return _write
