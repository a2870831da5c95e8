"""
lazyassign testing utilities

Shared in-memory publishers and observable slots for the test suite.
"""

from .helpers import LeakySubject, Slot, Subject

__all__ = [
    "LeakySubject",
    "Slot",
    "Subject",
]
