"""
JSON file-based record source.

Reads a single export of the record store with the structure:

    {
      "panchayats": [{"id": ..., "name": ...}],
      "wards":      [{"id": ..., "name": ..., "ward_no": ..., "panchayat_id": ...}],
      "booths":     [{"id": ..., "name": ..., "booth_no": ..., "ward_id": ...}],
      "voters":     [{"id": ..., "sl_no": ..., "name": ..., "booth_id": ...}]
    }

Only "voters" is required. A bare JSON list is read as the voter list.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..exceptions import RecordSourceError
from ..logger import get_logger
from ..models import Booth, Panchayat, Voter, Ward
from .repository import InMemoryRepository

logger = get_logger(__name__)


class JSONStore(InMemoryRepository):
    """Voter hierarchy loaded from one JSON export."""

    def __init__(self, path: Path):
        """
        Load the export.

        Args:
            path: JSON file path

        Raises:
            RecordSourceError: if the file is missing, unreadable or malformed
        """
        self.path = Path(path)
        data = self._read()

        if isinstance(data, list):
            data = {"voters": data}
        if not isinstance(data, dict):
            raise RecordSourceError(
                "Expected an object with a 'voters' list",
                source=str(self.path),
                operation="load",
            )

        super().__init__(
            voters=[Voter.from_dict(row) for row in self._rows(data, "voters")],
            booths=[Booth.from_dict(row) for row in self._rows(data, "booths")],
            wards=[Ward.from_dict(row) for row in self._rows(data, "wards")],
            panchayats=[Panchayat.from_dict(row) for row in self._rows(data, "panchayats")],
        )
        logger.debug(f"Loaded {len(self._voters)} voter(s) from {self.path}")

    def _read(self):
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise RecordSourceError(
                f"Voter source not found: {self.path}", source=str(self.path), operation="load"
            ) from e
        except (OSError, json.JSONDecodeError) as e:
            raise RecordSourceError(
                f"Could not read voter source: {e}", source=str(self.path), operation="load"
            ) from e

    def _rows(self, data: dict, key: str) -> list[dict]:
        """Rows under key; a missing or null section is empty."""
        rows = data.get(key) or []
        if not isinstance(rows, list):
            raise RecordSourceError(
                f"'{key}' must be a list", source=str(self.path), operation="load"
            )
        for position, row in enumerate(rows):
            if not isinstance(row, dict):
                raise RecordSourceError(
                    f"'{key}' row {position} is not an object", source=str(self.path), operation="load"
                )
        return rows
