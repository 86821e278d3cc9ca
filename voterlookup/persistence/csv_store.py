"""
CSV record source.

One row per voter; columns named like the Voter fields (extra columns are
ignored). Booths are derived from the booth_id column.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..exceptions import RecordSourceError
from ..logger import get_logger
from ..models import Voter
from .repository import InMemoryRepository

logger = get_logger(__name__)


class CSVStore(InMemoryRepository):
    """Flat voter roll loaded from a CSV file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        df = self._read()

        if "name" not in df.columns:
            raise RecordSourceError(
                "CSV has no 'name' column", source=str(self.path), operation="load"
            )

        # Every cell is read as text; empty cells come back as ""
        super().__init__(voters=[Voter.from_dict(row) for row in df.to_dict(orient="records")])
        logger.debug(f"Loaded {len(self._voters)} voter(s) from {self.path}")

    def _read(self) -> pd.DataFrame:
        try:
            return pd.read_csv(self.path, dtype=str, keep_default_na=False, encoding="utf-8")
        except FileNotFoundError as e:
            raise RecordSourceError(
                f"Voter source not found: {self.path}", source=str(self.path), operation="load"
            ) from e
        except (OSError, ValueError, pd.errors.ParserError) as e:
            raise RecordSourceError(
                f"Could not read voter source: {e}", source=str(self.path), operation="load"
            ) from e
