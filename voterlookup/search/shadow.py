"""
Shadow records: a voter plus Manglish copies of its native-script fields.

Shadow values are derived, never stored. They are recomputed from the
source voter every time a list is loaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Union

from ..models import Voter
from .transliteration import to_manglish

VoterLike = Union[Voter, dict]


@dataclass(frozen=True)
class ShadowVoter:
    """Read-only search view over one voter."""

    voter: Voter
    manglish_name: str = ""
    manglish_house: str = ""
    manglish_guardian: str = ""
    sl_no_str: str = ""

    def field_value(self, name: str) -> str:
        """
        Text of a searchable field; shadow fields first, then the voter.

        Unknown or empty fields give "".
        """
        if name in ("manglish_name", "manglish_house", "manglish_guardian", "sl_no_str"):
            return getattr(self, name)
        value: Any = getattr(self.voter, name, None)
        if value is None:
            return ""
        return str(value)


def as_voter(record: VoterLike) -> Voter:
    if isinstance(record, Voter):
        return record
    return Voter.from_dict(record)


def augment(record: VoterLike) -> ShadowVoter:
    voter = as_voter(record)
    return ShadowVoter(
        voter=voter,
        manglish_name=to_manglish(voter.name),
        manglish_house=to_manglish(voter.house_name),
        manglish_guardian=to_manglish(voter.guardian_name),
        sl_no_str=voter.sl_no_str,
    )


def augment_all(records: Iterable[VoterLike]) -> list[ShadowVoter]:
    """Augment a whole list, preserving order."""
    return [augment(record) for record in records]
