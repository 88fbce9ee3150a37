# assertion_core/paths.py
from __future__ import annotations
from typing import List

from .context import AssertionContext
from .errors import InvalidTlfPathError
from .ids import TeamName, team_name_from_string
from .implicit_team import ImplicitTeamDisplayName, parse_implicit_team_display_name

TLF_VISIBILITIES = ("private", "public")


def _split_path(s: str, kinds) -> List[str]:
    parts = s.lower().split("/")
    if len(parts) != 4:
        raise InvalidTlfPathError(s, "Invalid team TLF name, must have four parts")
    if parts[0] != "" or parts[1] != "keybase" or parts[2] not in kinds:
        raise InvalidTlfPathError(s)
    return parts


def parse_implicit_team_tlf_path(ctx: AssertionContext, s: str) -> ImplicitTeamDisplayName:
    """Parse "/keybase/private/alice,bob@twitter#carol (conflicted 2017-03-04 #2)"."""
    parts = _split_path(s, TLF_VISIBILITIES)
    return parse_implicit_team_display_name(ctx, parts[3], is_public=parts[2] == "public")


def parse_team_kbfs_path(s: str) -> TeamName:
    """Parse "/keybase/team/happy.toucans"."""
    parts = _split_path(s, ("team",))
    return team_name_from_string(parts[3])
