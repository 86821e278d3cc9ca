"""
Repository pattern for voter record sources.

The record store itself is external; search only needs "give me the voters
of this booth, ordered by serial number". The abstract interface keeps the
CLI and viewer independent of where the rows come from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional

from ..exceptions import RecordSourceError
from ..models import Booth, Panchayat, Voter, Ward


def _serial_key(voter: Voter) -> tuple[int, int]:
    # Voters without a serial sort after numbered ones
    return (0, voter.sl_no) if voter.sl_no is not None else (1, 0)


class VoterRepository(ABC):
    """
    Abstract read-only source of the voter hierarchy.

    Implementations can read JSON exports, CSV rolls, or a database.
    """

    @abstractmethod
    def list_panchayats(self) -> List[Panchayat]:
        """All regions."""
        pass

    @abstractmethod
    def list_wards(self, panchayat_id: Optional[str] = None) -> List[Ward]:
        """
        Wards, optionally only those of one panchayat.

        Args:
            panchayat_id: Parent region id, None for all
        """
        pass

    @abstractmethod
    def list_booths(self, ward_id: Optional[str] = None) -> List[Booth]:
        """
        Booths, optionally only those of one ward.

        Args:
            ward_id: Parent ward id, None for all
        """
        pass

    @abstractmethod
    def all_voters(self) -> List[Voter]:
        """Every voter in the source, in source order."""
        pass

    def get_booth(self, booth_id: str) -> Booth:
        """
        Retrieve a booth by id.

        Raises:
            RecordSourceError: if no booth has this id
        """
        for booth in self.list_booths():
            if booth.id == booth_id:
                return booth
        raise RecordSourceError(f"Unknown booth: {booth_id}", operation="get_booth")

    def get_ward(self, ward_id: str) -> Optional[Ward]:
        return next((ward for ward in self.list_wards() if ward.id == ward_id), None)

    def get_panchayat(self, panchayat_id: str) -> Optional[Panchayat]:
        return next((p for p in self.list_panchayats() if p.id == panchayat_id), None)

    def fetch_voters(self, booth_id: str) -> List[Voter]:
        """Voters of one booth, ordered by serial number."""
        voters = [voter for voter in self.all_voters() if voter.booth_id == booth_id]
        return sorted(voters, key=_serial_key)

    def fetch_ward_voters(self, ward_id: str) -> List[Voter]:
        """Voters of every booth in a ward, booth by booth."""
        voters: List[Voter] = []
        for booth in self.list_booths(ward_id):
            voters.extend(self.fetch_voters(booth.id))
        return voters


class InMemoryRepository(VoterRepository):
    """Repository over lists already held in memory."""

    def __init__(
        self,
        voters: Iterable[Voter] = (),
        booths: Iterable[Booth] = (),
        wards: Iterable[Ward] = (),
        panchayats: Iterable[Panchayat] = (),
    ):
        self._voters = list(voters)
        self._booths = list(booths)
        self._wards = list(wards)
        self._panchayats = list(panchayats)

        if not self._booths:
            # Flat exports carry booth ids on voters only
            seen = dict.fromkeys(v.booth_id for v in self._voters if v.booth_id)
            self._booths = [Booth(id=booth_id, name=booth_id) for booth_id in seen]

    def list_panchayats(self) -> List[Panchayat]:
        return list(self._panchayats)

    def list_wards(self, panchayat_id: Optional[str] = None) -> List[Ward]:
        if panchayat_id is None:
            return list(self._wards)
        return [ward for ward in self._wards if ward.panchayat_id == panchayat_id]

    def list_booths(self, ward_id: Optional[str] = None) -> List[Booth]:
        if ward_id is None:
            return list(self._booths)
        return [booth for booth in self._booths if booth.ward_id == ward_id]

    def all_voters(self) -> List[Voter]:
        return list(self._voters)


def open_source(path: Path) -> VoterRepository:
    """
    Open a record source by file extension (.json or .csv).

    Raises:
        RecordSourceError: for missing files or unsupported formats
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        from .json_store import JSONStore
        return JSONStore(path)
    if suffix == ".csv":
        from .csv_store import CSVStore
        return CSVStore(path)
    raise RecordSourceError(
        f"Unsupported voter source format: {suffix or '(none)'}",
        source=str(path),
        operation="open",
    )
