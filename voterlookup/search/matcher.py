"""
Per-field approximate matching and weighted score aggregation.

Scores run from 0 (exact) to 1 (nothing in common). A field matches when
its score is within the configured threshold. A record's score is the
weighted product of its matched fields' scores, so matching on more fields,
on heavier fields, or on shorter fields all pull the score towards 0.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Mapping, Optional

from rapidfuzz import fuzz

from ..config import SearchConfig

# Stand-in for an exact per-field score; 0 would zero the whole product
EPSILON = sys.float_info.epsilon

# Guards the threshold comparison against float noise (0.25 vs 0.25000001)
_SCORE_TOLERANCE = 1e-9


@dataclass(frozen=True)
class FieldMatch:
    """How a term matched one field of one record."""
    field: str
    score: float
    norm: float
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@lru_cache(maxsize=4096)
def field_norm(value: str) -> float:
    """
    Length norm for a field value: 1/sqrt(token count), 3 decimals.

    A hit inside a long multi-word house name counts for less than a hit on
    a one-word name.
    """
    tokens = len(value.split()) or 1
    return round(1 / math.sqrt(tokens), 3)


def normalize_term(term: Optional[str]) -> str:
    if not term:
        return ""
    return str(term).strip().lower()


class FieldMatcher:
    """Scores a search term against single field values."""

    def __init__(self, config: SearchConfig):
        self.config = config

    def accepts_term(self, term: str) -> bool:
        """Terms shorter than the minimum match length never match."""
        return len(term) >= self.config.min_match_char_length

    def score_field(self, field: str, term: str, value: str) -> Optional[FieldMatch]:
        """
        Match a normalized term against a lowercased field value.

        Returns None when the field is empty or the best alignment falls
        outside the threshold.
        """
        if not value or not self.accepts_term(term):
            return None

        if len(term) <= len(value):
            # Best-aligned window anywhere in the field
            alignment = fuzz.partial_ratio_alignment(term, value)
            if alignment is None:
                return None
            similarity = alignment.score
            start, end = alignment.dest_start, alignment.dest_end
        else:
            # Term longer than the field: compare whole strings
            similarity = fuzz.ratio(term, value)
            start, end = 0, len(value)

        if end - start < self.config.min_match_char_length:
            return None

        score = 1.0 - similarity / 100.0
        if not self.config.ignore_location:
            score = self._with_location(score, start)

        if score > self.config.threshold + _SCORE_TOLERANCE:
            return None

        return FieldMatch(
            field=field,
            score=max(score, 0.0),
            norm=field_norm(value),
            start=start,
            end=end,
        )

    def _with_location(self, score: float, start: int) -> float:
        """Penalise matches that start away from the beginning of the field."""
        if not self.config.distance:
            return 1.0 if start else score
        return score + start / self.config.distance

    @staticmethod
    def combine(matches: Iterable[FieldMatch], weights: Mapping[str, float]) -> float:
        """
        Weighted product of matched field scores.

        weights must already be normalized to sum to 1.
        """
        total = 1.0
        for match in matches:
            weight = weights.get(match.field, 0.0)
            base = EPSILON if match.score == 0 and weight else match.score
            total *= base ** ((weight or 1.0) * match.norm)
        return total
