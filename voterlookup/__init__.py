"""
Voter roll lookup: Manglish transliteration and fuzzy voter search.

    from voterlookup import transliterate, build_index, query
    index = build_index(voters)
    results = query(index, "raju")
"""

from .search import transliterate, build_index, query, VoterListSearch, EmptyQuery
from .models import Voter, VoterStatus

__version__ = "0.1.0"

__all__ = [
    "transliterate",
    "build_index",
    "query",
    "VoterListSearch",
    "EmptyQuery",
    "Voter",
    "VoterStatus",
]
