"""
Adapters layer - External integrations (iCalendar files).
"""

from .ics_reader import IcsCalendarReader, parse_ics_datetime

__all__ = ["IcsCalendarReader", "parse_ics_datetime"]
