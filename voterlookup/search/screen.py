"""
Search state owned by one list screen.

Each screen holds its own VoterListSearch: loading a new record set
replaces the index wholesale, and nothing is shared between screens.
Debouncing keystrokes is the screen's business, not this class's.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from ..config import SearchConfig
from ..logger import get_logger
from ..models import Voter
from .filters import StatusLike, status_matches
from .index import MatchResult, SearchIndex, build_index
from .shadow import VoterLike, as_voter

logger = get_logger(__name__)


class EmptyQuery(str, Enum):
    """What a screen shows before the user has typed anything."""
    ALL = "all"    # full list in original order
    NONE = "none"  # empty state


class VoterListSearch:
    """
    Fuzzy search over the voters currently loaded on a screen.

    Args:
        empty_query: Result for an empty (or too short) term
        status_filter: Only return voters with this status ("all"/None = any)
        limit: Maximum number of results, None for no cap
        min_term_length: Terms shorter than this count as empty
        config: Search tuning, defaults to the shared SearchConfig
    """

    def __init__(
        self,
        empty_query: EmptyQuery = EmptyQuery.ALL,
        status_filter: StatusLike = None,
        limit: Optional[int] = None,
        min_term_length: int = 1,
        config: Optional[SearchConfig] = None,
    ):
        self.empty_query = EmptyQuery(empty_query)
        self.status_filter = status_filter
        self.limit = limit
        self.min_term_length = max(min_term_length, 1)
        self.config = config or SearchConfig()
        self.generation = 0
        self._voters: tuple[Voter, ...] = ()
        self._index: Optional[SearchIndex] = None

    @classmethod
    def for_voter_list(cls, **kwargs) -> "VoterListSearch":
        """Booth voter list: everything until the user types."""
        kwargs.setdefault("empty_query", EmptyQuery.ALL)
        return cls(**kwargs)

    @classmethod
    def for_individual_slips(cls, **kwargs) -> "VoterListSearch":
        """Slip picker: nothing until two characters, top 20 hits."""
        kwargs.setdefault("empty_query", EmptyQuery.NONE)
        kwargs.setdefault("min_term_length", 2)
        kwargs.setdefault("limit", 20)
        return cls(**kwargs)

    def __len__(self) -> int:
        return len(self._voters)

    @property
    def voters(self) -> tuple[Voter, ...]:
        return self._voters

    @property
    def index(self) -> Optional[SearchIndex]:
        return self._index

    def load(self, records: Iterable[VoterLike]) -> None:
        """Replace the record set and rebuild the index from scratch."""
        voters = tuple(as_voter(record) for record in records)
        index = build_index(voters, self.config)
        self._voters, self._index = voters, index
        self.generation += 1
        logger.info(f"Loaded {len(voters)} voter(s) for search")

    def clear(self) -> None:
        self._voters, self._index = (), None
        self.generation += 1

    def _cap(self, items: list) -> list:
        if self.limit is None:
            return items
        return items[:max(self.limit, 0)]

    def _is_empty(self, term: Optional[str]) -> bool:
        return not term or len(term.strip()) < self.min_term_length

    def search_with_scores(self, term: Optional[str]) -> list[MatchResult]:
        """
        Ranked results with scores.

        For an empty term under EmptyQuery.ALL every voter comes back with
        score 0 in list order.
        """
        if self._index is None:
            return []

        if self._is_empty(term):
            if self.empty_query is EmptyQuery.NONE:
                return []
            results = [
                MatchResult(
                    record=record,
                    score=0.0,
                    index=position,
                    include_score=self.config.include_score,
                )
                for position, record in enumerate(self._index.records)
            ]
        else:
            results = self._index.search(term)

        return self._cap([result for result in results if status_matches(result.voter, self.status_filter)])

    def search(self, term: Optional[str]) -> list[Voter]:
        """Voters to render for the current term."""
        return [result.voter for result in self.search_with_scores(term)]
