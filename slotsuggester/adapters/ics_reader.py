"""
iCalendar (.ics) reader that extracts busy intervals in UTC.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import pendulum
from icalendar import Calendar
from pendulum import DateTime

from ..domain.exceptions import CalendarFileError, CalendarParseError
from ..domain.models import BusyInterval

logger = logging.getLogger(__name__)

# YYYYMMDDTHHMMSS
_UTC_BODY_LENGTH = 15


def parse_ics_datetime(value: str) -> Optional[DateTime]:
    """
    Parse a fully-qualified UTC iCalendar timestamp such as ``19960918T143000Z``.

    Any other form (TZID-bound or floating local times, all-day dates,
    offsets) returns None rather than raising.
    """
    if not value.endswith("Z"):
        return None

    body = value[:-1]
    if len(body) != _UTC_BODY_LENGTH:
        return None

    digits = body[0:8] + body[9:15]
    if not digits.isdigit():
        return None

    try:
        return pendulum.datetime(
            int(body[0:4]),
            int(body[4:6]),
            int(body[6:8]),
            int(body[9:11]),
            int(body[11:13]),
            int(body[13:15]),
            tz="UTC",
        )
    except ValueError:
        return None


def _raw_property(event, name: str) -> Optional[str]:
    """
    Return the first value of ``name`` serialized back to iCalendar text.

    A TZID parameter means the written value was a local time, even when the
    zone is UTC, so it is returned with the zone name prefixed and never
    matches the bare ``...Z`` form.
    """
    prop = event.get(name)
    if prop is None:
        return None
    if isinstance(prop, list):
        if not prop:
            return None
        prop = prop[0]

    raw = prop.to_ical() if hasattr(prop, "to_ical") else prop
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")

    tzid = getattr(prop, "params", {}).get("TZID")
    if tzid:
        return f"TZID={tzid}:{raw}"
    return str(raw)


class IcsCalendarReader:
    """
    Reads one or more .ics exports and returns their busy intervals.

    Files are read sequentially; the first file that cannot be opened or
    parsed aborts the whole read. Inside a readable calendar, events without
    a usable UTC start and end are skipped.
    """

    def read_busy_intervals(
        self,
        paths: Iterable[Path],
        not_before: DateTime,
    ) -> List[BusyInterval]:
        """
        Collect busy intervals from every file.

        Args:
            paths: Calendar files to read, in order
            not_before: Intervals ending before this instant are dropped

        Returns:
            Union of all files' busy intervals

        Raises:
            CalendarFileError: If a file cannot be opened
            CalendarParseError: If a file is not valid iCalendar data
        """
        intervals: List[BusyInterval] = []

        for path in paths:
            file_intervals = self.read_file(Path(path), not_before)
            logger.info("Loaded %d busy interval(s) from %s", len(file_intervals), path)
            intervals.extend(file_intervals)

        return intervals

    def read_file(self, path: Path, not_before: DateTime) -> List[BusyInterval]:
        calendars = self._load_calendars(path)

        intervals: List[BusyInterval] = []
        for calendar in calendars:
            for event in calendar.walk("VEVENT"):
                interval = self._event_to_interval(event)
                if interval is None:
                    continue
                if interval.end < not_before:
                    logger.debug("Ignoring past interval %s", interval)
                    continue
                logger.debug("Busy %s", interval)
                intervals.append(interval)

        return intervals

    @staticmethod
    def _load_calendars(path: Path) -> List[Calendar]:
        try:
            with open(path, "rb") as file_handle:
                data = file_handle.read()
        except OSError as exc:
            raise CalendarFileError(f"Failed to open .ics file {path}: {exc}") from exc

        try:
            return Calendar.from_ical(data, multiple=True)
        except ValueError as exc:
            raise CalendarParseError(
                f"Failed to parse .ics calendar {path}: {exc}. "
                "Check the format or try exporting again from your calendar app."
            ) from exc

    @staticmethod
    def _event_to_interval(event) -> Optional[BusyInterval]:
        start_raw = _raw_property(event, "DTSTART")
        end_raw = _raw_property(event, "DTEND")
        summary = event.get("SUMMARY", "?")

        if start_raw is None or end_raw is None:
            logger.debug("Skipping event %s: missing DTSTART or DTEND", summary)
            return None

        start = parse_ics_datetime(start_raw)
        end = parse_ics_datetime(end_raw)
        if start is None or end is None:
            logger.debug(
                "Skipping event %s: unsupported timestamp form (%s, %s)",
                summary,
                start_raw,
                end_raw,
            )
            return None

        if start >= end:
            logger.debug("Skipping event %s: start %s is not before end %s", summary, start, end)
            return None

        return BusyInterval(start=start, end=end)
