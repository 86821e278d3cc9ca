"""
Manglish transliteration and fuzzy voter search.
"""

from .transliteration import transliterate, to_manglish, contains_malayalam
from .shadow import ShadowVoter, augment, augment_all
from .matcher import FieldMatch, FieldMatcher
from .index import MatchResult, SearchIndex, build_index, query
from .filters import filter_by_status, filter_voters, matches_substring
from .screen import EmptyQuery, VoterListSearch

__all__ = [
    # Transliteration
    "transliterate",
    "to_manglish",
    "contains_malayalam",

    # Shadow records
    "ShadowVoter",
    "augment",
    "augment_all",

    # Index
    "FieldMatch",
    "FieldMatcher",
    "MatchResult",
    "SearchIndex",
    "build_index",
    "query",

    # Screen-level search
    "filter_by_status",
    "filter_voters",
    "matches_substring",
    "EmptyQuery",
    "VoterListSearch",
]
