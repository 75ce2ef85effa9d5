"""
slotsuggester - suggest free 30-minute interview slots from .ics calendars.
"""

__version__ = "0.1.0"
