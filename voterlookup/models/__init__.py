"""
Data models for the voter lookup application.

These models mirror the rows of the external record store and are designed
to be easily serializable to JSON.
"""

from .voter import Voter, VoterStatus, STRUCK_OFF_STATUSES
from .hierarchy import Panchayat, Ward, Booth

__all__ = [
    # Voter models
    "Voter",
    "VoterStatus",
    "STRUCK_OFF_STATUSES",

    # Hierarchy
    "Panchayat",
    "Ward",
    "Booth",
]
