import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from voterlookup.config import reset_config
from voterlookup.models import Voter


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def booth_voters():
    """A small booth roll in serial order."""
    rows = [
        {"id": "v1", "sl_no": 1, "name": "രാജു", "guardian_name": "കൃഷ്ണൻ",
         "house_name": "പുന്നക്കൽ", "house_no": "12/4", "id_card_no": "KLA1234567",
         "gender": "Male", "booth_id": "b1"},
        {"id": "v2", "sl_no": 2, "name": "രാജ", "guardian_name": "ചന്ദ്രൻ",
         "house_name": "തെക്കേടത്ത്", "house_no": "7", "id_card_no": "KLA7654321",
         "gender": "Female", "booth_id": "b1"},
        {"id": "v3", "sl_no": 3, "name": "ഉണ്ണി", "guardian_name": None,
         "house_name": None, "house_no": "", "id_card_no": "", "gender": "പുരുഷൻ",
         "status": "shifted", "booth_id": "b1"},
        {"id": "v4", "sl_no": 4, "name": "ശ്രീജ", "guardian_name": "ഉണ്ണി",
         "house_name": "മഠത്തിൽ", "house_no": "9A", "id_card_no": "KLA1112223",
         "gender": "F", "status": "gulf", "booth_id": "b1", "has_voted": True},
    ]
    return [Voter.from_dict(row) for row in rows]


@pytest.fixture
def export_file(tmp_path, booth_voters):
    """JSON export with a two-booth hierarchy."""
    data = {
        "panchayats": [{"id": "p1", "name": "കരുവാറ്റ"}],
        "wards": [{"id": "w1", "name": "North", "ward_no": 3, "panchayat_id": "p1"}],
        "booths": [
            {"id": "b1", "name": "Govt LP School", "booth_no": 1, "ward_id": "w1"},
            {"id": "b2", "name": "Library Hall", "booth_no": 2, "ward_id": "w1"},
        ],
        # Out of serial order on purpose
        "voters": [v.to_dict() for v in reversed(booth_voters)] + [
            {"id": "v9", "sl_no": 1, "name": "അമ്മിണി", "booth_id": "b2"},
        ],
    }
    path = tmp_path / "export.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path
