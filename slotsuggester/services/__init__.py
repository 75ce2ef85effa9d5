"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .slot_suggestion import CalendarReaderProtocol, SlotSuggestionService, SuggestionResult

__all__ = ["CalendarReaderProtocol", "SlotSuggestionService", "SuggestionResult"]
