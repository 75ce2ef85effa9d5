"""
Domain-specific exception hierarchy for the slot suggester application.
"""


class SlotSuggesterError(Exception):
    """Base class for all application-level errors."""


class InvalidTimezoneError(SlotSuggesterError):
    """Raised when a timezone identifier is malformed or unknown."""


class CalendarFileError(SlotSuggesterError):
    """Raised when a calendar file cannot be opened or read."""


class CalendarParseError(SlotSuggesterError):
    """Raised when a calendar file is not a well-formed iCalendar document."""
