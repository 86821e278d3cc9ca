from voterlookup.models import Voter, VoterStatus
from voterlookup.reports import VoterStats


def test_counts_by_gender_and_status(booth_voters):
    stats = VoterStats.from_voters(booth_voters)

    assert stats.total == 4
    assert stats.male == 2      # "Male" and "പുരുഷൻ"
    assert stats.female == 2    # "Female" and "F"
    assert stats.voted == 1
    assert stats.count(VoterStatus.ACTIVE) == 2
    assert stats.count(VoterStatus.SHIFTED) == 1
    assert stats.count(VoterStatus.GULF) == 1
    assert stats.count(VoterStatus.DEATH) == 0
    assert stats.turnout_percent == 25.0


def test_unknown_gender_and_status_are_not_counted():
    stats = VoterStats.from_voters([Voter(gender="?", status="transferred")])
    assert stats.total == 1
    assert stats.male == stats.female == 0
    assert sum(stats.by_status.values()) == 0


def test_empty_list():
    stats = VoterStats.from_voters([])
    assert stats.total == 0
    assert stats.turnout_percent == 0.0


def test_to_dict_has_every_status(booth_voters):
    data = VoterStats.from_voters(booth_voters).to_dict()
    assert data["total"] == 4
    assert all(status.value in data for status in VoterStatus)
