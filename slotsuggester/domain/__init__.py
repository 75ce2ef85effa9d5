"""
Domain layer - Pure business logic without external dependencies.
"""

from .conflict_checker import ConflictChecker
from .models import BusyInterval, Candidate, SearchWindow
from .slot_suggester import SlotSuggester

__all__ = ["BusyInterval", "Candidate", "SearchWindow", "ConflictChecker", "SlotSuggester"]
