import pytest

from voterlookup.models import Voter, VoterStatus
from voterlookup.search.filters import (
    filter_by_status,
    filter_voters,
    is_any_status,
    matches_substring,
    status_matches,
)


@pytest.mark.parametrize("status", [None, "", "  ", "all", "ALL"])
def test_any_status_values(status):
    assert is_any_status(status)


def test_status_matches_enum_and_string():
    voter = Voter(name="ഉണ്ണി", status="Shifted")
    assert status_matches(voter, VoterStatus.SHIFTED)
    assert status_matches(voter, " shifted ")
    assert not status_matches(voter, "active")


def test_filter_by_status_keeps_order(booth_voters):
    assert [v.id for v in filter_by_status(booth_voters, "active")] == ["v1", "v2"]
    assert filter_by_status(booth_voters, None) == booth_voters


def test_substring_matches_native_and_manglish(booth_voters):
    raju = booth_voters[0]
    assert matches_substring(raju, "രാജു")
    assert matches_substring(raju, "RAJU")
    assert matches_substring(raju, "punna")
    assert matches_substring(raju, "kla123")
    assert not matches_substring(raju, "xyz")


def test_substring_checks_serial_number():
    voters = [Voter(id="a", sl_no=15, name="രാജു"), Voter(id="b", sl_no=2, name="രാജ")]
    assert [v.id for v in filter_voters(voters, "15")] == ["a"]


def test_empty_term_returns_status_filtered_list(booth_voters):
    assert filter_voters(booth_voters, "") == booth_voters
    assert [v.id for v in filter_voters(booth_voters, None, status="gulf")] == ["v4"]


def test_status_then_substring(booth_voters):
    # ഉണ്ണി is v3's name and v4's guardian
    assert [v.id for v in filter_voters(booth_voters, "unni")] == ["v3", "v4"]
    assert [v.id for v in filter_voters(booth_voters, "unni", status="gulf")] == ["v4"]
