"""
Plain containment filters used where a screen does not need ranking.

The public voter list filters with lowercase substring checks over native
and Manglish fields; the staff screens also filter by status first.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from ..models import Voter, VoterStatus
from .shadow import ShadowVoter, augment

# Fields the public voter list checks, native and Manglish side by side
SUBSTRING_FIELDS: tuple[str, ...] = (
    "name",
    "manglish_name",
    "house_name",
    "manglish_house",
    "id_card_no",
    "guardian_name",
    "manglish_guardian",
    "sl_no_str",
)

StatusLike = Union[VoterStatus, str, None]


def is_any_status(status: StatusLike) -> bool:
    """None, "" and "all" mean no status filtering."""
    return status is None or (isinstance(status, str) and status.strip().lower() in ("", "all"))


def status_matches(voter: Voter, status: StatusLike) -> bool:
    if is_any_status(status):
        return True
    wanted = status.value if isinstance(status, VoterStatus) else str(status).strip().lower()
    return voter.status == wanted


def filter_by_status(voters: Iterable[Voter], status: StatusLike) -> list[Voter]:
    """Keep voters with the given status; None, "" or "all" keep everyone."""
    return [voter for voter in voters if status_matches(voter, status)]


def matches_substring(
    record: Union[Voter, ShadowVoter],
    term: str,
    fields: Sequence[str] = SUBSTRING_FIELDS,
) -> bool:
    """Case-insensitive containment of term in any of the fields."""
    shadow = record if isinstance(record, ShadowVoter) else augment(record)
    needle = term.lower()
    return any(needle in shadow.field_value(name).lower() for name in fields)


def filter_voters(
    voters: Iterable[Voter],
    term: Optional[str],
    status: StatusLike = None,
    fields: Sequence[str] = SUBSTRING_FIELDS,
) -> list[Voter]:
    """
    Status filter, then substring filter.

    An empty term short-circuits: the status-filtered list comes back
    unchanged and in order.
    """
    result = filter_by_status(voters, status)
    if not term:
        return result
    return [voter for voter in result if matches_substring(voter, term, fields)]
