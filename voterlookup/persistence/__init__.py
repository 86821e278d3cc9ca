"""
Record sources.

Read-only access to voter lists exported from the external record store.
"""

from .repository import VoterRepository, InMemoryRepository, open_source
from .json_store import JSONStore
from .csv_store import CSVStore

__all__ = [
    "VoterRepository",
    "InMemoryRepository",
    "open_source",
    "JSONStore",
    "CSVStore",
]
