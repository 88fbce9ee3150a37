"""
assertion_core.ids
------------------
Identifier codecs and syntax validators consumed by assertion atoms:

- UID / TeamID: 16-byte identifiers carried as lowercase hex, whose last
  byte tags what kind of identity they name
- TeamName: dot-separated hierarchy of name parts ("acme.sales.emea")
- check_username(): keybase username syntax, with a hint for users
- is_valid_hostname(): DNS hostname syntax for web/dns assertions

Each decoder raises the matching NormalizationError subclass so that callers
can surface the offending value directly.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import re

from .constants import (
    UID_LEN, UID_SUFFIXES, TEAMID_LEN,
    TEAMID_PRIVATE_SUFFIX, TEAMID_PUBLIC_SUFFIX,
    TEAMID_PRIVATE_SUBTEAM_SUFFIX, TEAMID_PUBLIC_SUBTEAM_SUFFIX,
    IMPLICIT_TEAM_PREFIX,
)
from .errors import InvalidUidError, InvalidTeamIdError, InvalidTeamNameError
from .utils import is_hex


# --------- UID ----------
@dataclass(frozen=True)
class UID:
    hex: str

    def __str__(self) -> str:
        return self.hex

    def to_bytes(self) -> bytes:
        return bytes.fromhex(self.hex)


def uid_from_hex(s: str) -> UID:
    if not is_hex(s):
        raise InvalidUidError(s, "not a hex string")
    raw = bytes.fromhex(s)
    if len(raw) != UID_LEN:
        raise InvalidUidError(s, f"wrong uid length; must be {UID_LEN} bytes")
    if raw[-1] not in UID_SUFFIXES:
        raise InvalidUidError(s, f"invalid uid suffix 0x{raw[-1]:02x}")
    return UID(s.lower())


# --------- TeamID ----------
_TEAMID_SUFFIXES = (
    TEAMID_PRIVATE_SUFFIX, TEAMID_PUBLIC_SUFFIX,
    TEAMID_PRIVATE_SUBTEAM_SUFFIX, TEAMID_PUBLIC_SUBTEAM_SUFFIX,
)


@dataclass(frozen=True)
class TeamID:
    hex: str

    def __str__(self) -> str:
        return self.hex

    def _suffix(self) -> int:
        return bytes.fromhex(self.hex)[-1]

    def is_public(self) -> bool:
        return self._suffix() in (TEAMID_PUBLIC_SUFFIX, TEAMID_PUBLIC_SUBTEAM_SUFFIX)

    def is_subteam(self) -> bool:
        return self._suffix() in (TEAMID_PRIVATE_SUBTEAM_SUFFIX, TEAMID_PUBLIC_SUBTEAM_SUFFIX)


def team_id_from_string(s: str) -> TeamID:
    if not is_hex(s):
        raise InvalidTeamIdError(s, "not a hex string")
    raw = bytes.fromhex(s)
    if len(raw) != TEAMID_LEN:
        raise InvalidTeamIdError(s, f"wrong team id length; must be {TEAMID_LEN} bytes")
    if raw[-1] not in _TEAMID_SUFFIXES:
        raise InvalidTeamIdError(s, f"invalid team id suffix 0x{raw[-1]:02x}")
    return TeamID(s.lower())


# --------- TeamName ----------
_TEAM_NAME_PART_RE = re.compile(r"(?:[a-zA-Z0-9][a-zA-Z0-9_]?)+")
_IMPLICIT_TEAM_PART_RE = re.compile(re.escape(IMPLICIT_TEAM_PREFIX) + r"[0-9a-f]{32}")


@dataclass(frozen=True)
class TeamName:
    parts: Tuple[str, ...]

    def __str__(self) -> str:
        return ".".join(self.parts)

    def depth(self) -> int:
        return len(self.parts)

    def is_root(self) -> bool:
        return len(self.parts) == 1

    def is_implicit(self) -> bool:
        return self.parts[0].startswith(IMPLICIT_TEAM_PREFIX)

    def root_ancestor(self) -> "TeamName":
        return TeamName(self.parts[:1])

    def parent(self) -> "TeamName":
        if self.is_root():
            raise InvalidTeamNameError(str(self), "root team has no parent")
        return TeamName(self.parts[:-1])


def team_name_from_string(s: str) -> TeamName:
    if not s:
        raise InvalidTeamNameError(s, "team names cannot be empty")
    parts = s.lower().split(".")
    for i, part in enumerate(parts):
        if i == 0 and _IMPLICIT_TEAM_PART_RE.fullmatch(part):
            continue
        if not 2 <= len(part) <= 16:
            raise InvalidTeamNameError(s, "team name parts must be between 2 and 16 characters")
        if not _TEAM_NAME_PART_RE.fullmatch(part):
            raise InvalidTeamNameError(
                s, "team name parts may only contain letters, numbers and single underscores")
    return TeamName(tuple(parts))


# --------- usernames / hostnames ----------
USERNAME_HINT = (
    "between 2 and 16 characters long; letters, numbers and single underscores, "
    "not starting with an underscore"
)
_USERNAME_RE = re.compile(r"(?:[a-zA-Z0-9][a-zA-Z0-9_]?)+")
_HOST_LABEL_RE = re.compile(r"[a-z0-9]|[a-z0-9][a-z0-9-]*[a-z0-9]", re.IGNORECASE)


def check_username(s: str) -> bool:
    return 2 <= len(s) <= 16 and _USERNAME_RE.fullmatch(s) is not None


def is_valid_hostname(s: str) -> bool:
    labels = s.split(".")
    if len(labels) < 2:
        return False
    if not all(_HOST_LABEL_RE.fullmatch(l) for l in labels):
        return False
    # TLDs must be >= 2 chars
    return len(labels[-1]) >= 2
