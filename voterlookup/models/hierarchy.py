"""
Administrative hierarchy: panchayat (region) -> ward (sub-region) -> booth
(polling station). Voters hang off booths by booth_id.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional, Any


def _from_dict(cls, data: dict[str, Any]):
    return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass
class Panchayat:
    id: str = ""
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Panchayat":
        return _from_dict(cls, data)


@dataclass
class Ward:
    id: str = ""
    name: str = ""
    ward_no: Optional[int] = None
    panchayat_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ward":
        return _from_dict(cls, data)


@dataclass
class Booth:
    id: str = ""
    name: str = ""
    booth_no: Optional[int] = None
    ward_id: str = ""
    contact_number: str = ""

    def breadcrumb(self, ward: Optional[Ward] = None, panchayat: Optional[Panchayat] = None) -> str:
        """Header line shown above a booth's voter list."""
        parts = []
        if panchayat and panchayat.name:
            parts.append(panchayat.name)
        if ward and ward.ward_no is not None:
            parts.append(f"Ward {ward.ward_no}")
        return " / ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Booth":
        return _from_dict(cls, data)
