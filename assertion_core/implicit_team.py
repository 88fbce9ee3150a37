"""
assertion_core.implicit_team
----------------------------
Implicit teams are named by their members instead of a registered name:

    alice,bob@twitter#carol (conflicted 2017-03-04 #2)
    ^^^^^^^^^^^^^^^^^ ^^^^^  ^^^^^^^^^^^^^^^^^^^^^^^^^
    writers           readers  optional conflict suffix

Writers and readers are split into resolved keybase users and unresolved
social references. A person appears once across both lists (first
occurrence wins), and each list is sorted so that two spellings of the same
team compare equal.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Set, Tuple
import re

from .atoms import SocialAssertion
from .constants import KEYBASE_KEY
from .context import AssertionContext
from .errors import (
    AssertionCoreError, InvalidUsernameError, TooManySeparatorsError, NoWritersError,
    InvalidPartError, EmptySuffixError, BadSuffixError, BadGenerationError,
)
from .ids import USERNAME_HINT, check_username
from .logger import get_logger
from .parser import parse_atom
from .utils import parse_utc_date, format_utc_date

log = get_logger("assertion_core.implicit_team")

_CONFLICT_SUFFIX_RE = re.compile(r"\(conflicted ([0-9]{4}-[0-9]{2}-[0-9]{2})( #([0-9]+))?\)")


@dataclass(frozen=True)
class ImplicitTeamConflictInfo:
    generation: int
    time: datetime   # UTC midnight of the conflict date


@dataclass(frozen=True)
class ImplicitTeamUserSet:
    keybase_users: Tuple[str, ...] = ()
    unresolved_users: Tuple[SocialAssertion, ...] = ()

    def num_total_users(self) -> int:
        return len(self.keybase_users) + len(self.unresolved_users)

    def to_strings(self) -> List[str]:
        return list(self.keybase_users) + [f"{sa.user}@{sa.service}" for sa in self.unresolved_users]


@dataclass(frozen=True)
class ImplicitTeamDisplayName:
    is_public: bool
    writers: ImplicitTeamUserSet
    readers: ImplicitTeamUserSet = field(default_factory=ImplicitTeamUserSet)
    conflict_info: Optional[ImplicitTeamConflictInfo] = None

    def __str__(self) -> str:
        return format_implicit_team_display_name(self)


# --------- conflict suffix ----------
def parse_implicit_team_display_name_suffix(suffix: str) -> ImplicitTeamConflictInfo:
    if not suffix:
        raise EmptySuffixError("cannot parse empty suffix")
    m = _CONFLICT_SUFFIX_RE.fullmatch(suffix)
    if m is None:
        raise BadSuffixError(f"malformed suffix: '{suffix}'", suffix)

    try:
        conflict_time = parse_utc_date(m.group(1))
    except ValueError:
        raise BadSuffixError(f"malformed suffix time: {m.group(1)}", suffix)

    generation = 1
    if m.group(3) is not None:
        generation = int(m.group(3))
        if generation <= 0:
            raise BadGenerationError(f"malformed suffix generation: {m.group(3)}", suffix)

    return ImplicitTeamConflictInfo(generation=generation, time=conflict_time)


def format_implicit_team_display_name_suffix(conflict: ImplicitTeamConflictInfo) -> str:
    return f"(conflicted {format_utc_date(conflict.time)} #{conflict.generation})"


# --------- user sets ----------
def _parse_part(ctx: AssertionContext, part: str) -> SocialAssertion:
    delimiters = part.count(":") + part.count("@")
    if delimiters > 1:
        raise InvalidPartError(f"can have at most one ':' xor '@': {part}", part)
    if delimiters == 0:
        if not check_username(part):
            raise InvalidUsernameError(part, USERNAME_HINT)
        return SocialAssertion(service=KEYBASE_KEY, user=part.lower())
    try:
        atom = parse_atom(ctx, part, strict=True)
    except AssertionCoreError as e:
        log.debug(f"[ITEAM] bad part={part!r} err={e}")
        raise InvalidPartError(f"could not parse part as assertion: {part}", part) from e
    return SocialAssertion(service=atom.key, user=atom.value)


def _parse_user_set(ctx: AssertionContext, s: str, seen: Set[str]) -> ImplicitTeamUserSet:
    keybase_users: List[str] = []
    unresolved: List[SocialAssertion] = []
    for part in s.split(","):
        sa = _parse_part(ctx, part)
        idx = str(sa)
        if idx in seen:
            continue
        seen.add(idx)
        if sa.service == KEYBASE_KEY:
            keybase_users.append(sa.user)
        else:
            unresolved.append(sa)

    return ImplicitTeamUserSet(
        keybase_users=tuple(sorted(keybase_users)),
        unresolved_users=tuple(sorted(unresolved, key=str)),
    )


# --------- display names ----------
def parse_implicit_team_display_name(ctx: AssertionContext, s: str, is_public: bool) -> ImplicitTeamDisplayName:
    """Parse a name like "mlsteele,malgorithms@twitter#bot (conflicted 2017-03-04 #2)"."""
    s = s.lower()

    head, sep, suffix = s.partition(" ")
    groups = head.split("#")
    if len(groups) > 2:
        raise TooManySeparatorsError("can have at most one '#' separator", head)

    seen: Set[str] = set()
    writers = _parse_user_set(ctx, groups[0], seen)
    if writers.num_total_users() == 0:
        raise NoWritersError("need at least one writer", groups[0])

    readers = ImplicitTeamUserSet()
    if len(groups) == 2:
        readers = _parse_user_set(ctx, groups[1], seen)

    conflict_info = None
    if sep:
        if not suffix:
            raise EmptySuffixError("empty suffix")
        conflict_info = parse_implicit_team_display_name_suffix(suffix)

    return ImplicitTeamDisplayName(
        is_public=is_public,
        writers=writers,
        readers=readers,
        conflict_info=conflict_info,
    )


def format_implicit_team_display_name(name: ImplicitTeamDisplayName) -> str:
    ret = ",".join(name.writers.to_strings())
    if name.readers.num_total_users():
        ret += "#" + ",".join(name.readers.to_strings())
    if name.conflict_info is not None:
        ret += " " + format_implicit_team_display_name_suffix(name.conflict_info)
    return ret
