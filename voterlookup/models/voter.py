"""
Voter data models.

Represents individual voter records as they come from the record store.
Text fields are native script (Malayalam); missing values normalise to "".
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Any


class VoterStatus(str, Enum):
    """Roll status tag set by staff."""

    ACTIVE = "active"
    SHIFTED = "shifted"
    DELETED = "deleted"
    DEATH = "death"
    GULF = "gulf"
    OUT_OF_PLACE = "out_of_place"
    DUPLICATE = "duplicate"

    @property
    def label(self) -> str:
        """Display label, e.g. "Out of Place"."""
        return self.value.replace("_", " ").title()

    @classmethod
    def parse(cls, value: Any) -> Optional["VoterStatus"]:
        """Return the matching status or None for unknown/empty values."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


# Statuses the voter list stamps over the card
STRUCK_OFF_STATUSES = frozenset({VoterStatus.SHIFTED, VoterStatus.DELETED})


def _text(value: Any) -> str:
    if value is None:
        return ""
    # pandas hands us NaN for empty CSV cells
    if isinstance(value, float) and value != value:
        return ""
    return str(value).strip()


def _int(value: Any) -> Optional[int]:
    text = _text(value)
    if not text:
        return None
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        # "abc", "nan", "inf", "1e999"
        return None


@dataclass
class Voter:
    """
    A voter as stored in the roll.

    Only id, sl_no and name are always present; every other field may be
    empty. Search treats an empty field as contributing nothing.
    """

    id: str = ""
    sl_no: Optional[int] = None
    name: str = ""
    guardian_name: str = ""
    house_name: str = ""
    house_no: str = ""
    id_card_no: str = ""
    status: str = VoterStatus.ACTIVE.value
    age: Optional[int] = None
    gender: str = ""
    booth_id: str = ""
    has_voted: bool = False

    def __post_init__(self):
        """Clean data after initialization."""
        self.id = _text(self.id)
        self.sl_no = _int(self.sl_no)
        self.name = _text(self.name)
        self.guardian_name = _text(self.guardian_name)
        self.house_name = _text(self.house_name)
        self.house_no = _text(self.house_no)
        self.id_card_no = _text(self.id_card_no).upper()
        self.gender = _text(self.gender)
        self.booth_id = _text(self.booth_id)
        self.age = _int(self.age)

        status = VoterStatus.parse(self.status)
        self.status = status.value if status else (_text(self.status) or VoterStatus.ACTIVE.value)

        self.has_voted = bool(self.has_voted) if not isinstance(self.has_voted, str) \
            else self.has_voted.strip().lower() in ("1", "true", "yes")

    @property
    def status_enum(self) -> Optional[VoterStatus]:
        return VoterStatus.parse(self.status)

    @property
    def is_struck_off(self) -> bool:
        """Shifted and deleted voters are shown stamped in the list."""
        return self.status_enum in STRUCK_OFF_STATUSES

    @property
    def sl_no_str(self) -> str:
        return str(self.sl_no) if self.sl_no is not None else ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Voter":
        """Create Voter from a store row, ignoring columns we do not model."""
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })
