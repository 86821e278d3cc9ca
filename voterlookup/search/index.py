"""
Fuzzy search index over one voter list snapshot.

An index is built once per record set and never updated: when the list
changes, build a new one and drop the old. Building is synchronous and
cheap enough to redo on every load; searching runs on every keystroke.

Usage:
    index = build_index(voters)
    for result in query(index, "raju"):
        print(result.voter.name, result.score)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from ..config import SearchConfig
from ..logger import get_logger
from ..models import Voter
from ..utils.timing import timed_operation
from .matcher import FieldMatch, FieldMatcher, normalize_term
from .shadow import ShadowVoter, VoterLike, augment_all

logger = get_logger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """One ranked hit. index is the record's position in the source list."""
    record: ShadowVoter
    score: float
    index: int
    matches: tuple[FieldMatch, ...] = ()
    include_score: bool = field(default=True, compare=False)

    @property
    def voter(self) -> Voter:
        return self.record.voter

    @property
    def matched_fields(self) -> tuple[str, ...]:
        return tuple(match.field for match in self.matches)

    def to_dict(self, include_score: Optional[bool] = None) -> dict:
        """Voter row, plus score and matched fields unless scores are turned off."""
        if include_score is None:
            include_score = self.include_score
        data = self.voter.to_dict()
        if include_score:
            data["score"] = self.score
            data["matched_fields"] = list(self.matched_fields)
        return data


class SearchIndex:
    """
    Immutable weighted index over shadow records.

    Field values are lowercased once at build time; queries only lowercase
    the term.
    """

    def __init__(self, records: Sequence[ShadowVoter], config: Optional[SearchConfig] = None):
        self._config = config or SearchConfig()
        self._records = tuple(records)
        self._matcher = FieldMatcher(self._config)
        self._weights = self._config.normalized_weights
        self._rows = tuple(self._index_row(record) for record in self._records)

    def _index_row(self, record: ShadowVoter) -> tuple[tuple[str, str], ...]:
        """(field, lowercased value) pairs for the record's non-empty fields."""
        row = []
        for name in self._config.fields:
            value = record.field_value(name).strip().lower()
            if value:
                row.append((name, value))
        return tuple(row)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def records(self) -> tuple[ShadowVoter, ...]:
        """Shadow records in original list order."""
        return self._records

    def search(self, term: Optional[str], limit: Optional[int] = None) -> list[MatchResult]:
        """
        Rank records against a free-text term.

        An empty term matches nothing; callers that want "show everything"
        on empty input must short-circuit before calling this.
        """
        needle = normalize_term(term)
        if not needle or not self._matcher.accepts_term(needle):
            return []

        results = []
        for position, row in enumerate(self._rows):
            matches = []
            for name, value in row:
                match = self._matcher.score_field(name, needle, value)
                if match is not None:
                    matches.append(match)
            if not matches:
                continue
            score = FieldMatcher.combine(matches, self._weights)
            results.append(MatchResult(
                record=self._records[position],
                score=score,
                index=position,
                matches=tuple(matches),
                include_score=self._config.include_score,
            ))

        results.sort(key=lambda result: (result.score, result.index))
        logger.debug(f"Query {needle!r}: {len(results)} of {len(self)} voter(s) matched")

        if limit is not None:
            results = results[:max(limit, 0)]
        return results


def build_index(records: Iterable[VoterLike], config: Optional[SearchConfig] = None) -> Optional[SearchIndex]:
    """
    Augment records with shadow fields and index them.

    Returns None for an empty record set: there is nothing to search and
    query() treats a missing index as "no results".
    """
    with timed_operation("Search index build", logger):
        shadows = augment_all(records)
        index = SearchIndex(shadows, config) if shadows else None

    if index is None:
        logger.debug("No voters to index")
    else:
        logger.debug(f"Indexed {len(index)} voter(s)")
    return index


def query(index: Optional[SearchIndex], term: Optional[str], limit: Optional[int] = None) -> list[MatchResult]:
    """Search an index that may be absent."""
    if index is None:
        return []
    return index.search(term, limit=limit)
