"""
Roll statistics for the reports screen.

Counts are computed in memory over whatever voter list the caller loaded
(a booth, a ward, or everything).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .models import Voter, VoterStatus

# Gender is free text in the roll: English words, initials or Malayalam
MALE_VALUES = frozenset({"male", "m", "പുരുഷൻ"})
FEMALE_VALUES = frozenset({"female", "f", "സ്ത്രീ"})


@dataclass
class VoterStats:
    """Totals by gender and status."""
    total: int = 0
    male: int = 0
    female: int = 0
    voted: int = 0
    by_status: dict[str, int] = field(
        default_factory=lambda: {status.value: 0 for status in VoterStatus}
    )

    @classmethod
    def from_voters(cls, voters: Iterable[Voter]) -> "VoterStats":
        stats = cls()
        for voter in voters:
            stats.total += 1

            gender = voter.gender.strip().lower()
            if gender in MALE_VALUES:
                stats.male += 1
            elif gender in FEMALE_VALUES:
                stats.female += 1

            if voter.has_voted:
                stats.voted += 1

            # Unknown status tags are not counted under any status
            if voter.status in stats.by_status:
                stats.by_status[voter.status] += 1
        return stats

    def count(self, status: VoterStatus) -> int:
        return self.by_status.get(status.value, 0)

    @property
    def turnout_percent(self) -> float:
        return (self.voted / self.total * 100) if self.total else 0.0

    def to_dict(self) -> dict:
        data = {
            "total": self.total,
            "male": self.male,
            "female": self.female,
            "voted": self.voted,
        }
        data.update(self.by_status)
        return data
