"""
assertion_core.atoms
--------------------
A single typed identity reference ("atom") such as keybase:alice,
uid:<hex>, twitter:bob or dns:example.com.

All kinds share one frozen dataclass tagged by AtomKind. Per-kind behavior
lives in the lookup tables and the normalizer table below, so adding a kind
means adding rows, not subclasses.

An atom is also a leaf of an assertion expression tree: it implements the
same matches / has_or / collect_atoms / to_string surface as AssertionOr
and AssertionAnd.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from .constants import (
    PGP_ASSERTION_KEY, PGP_FINGERPRINT_HEX_LEN, MIN_FINGERPRINT_QUERY_LEN,
)
from .errors import (
    AssertionCoreError, InvalidUsernameError, InvalidHostnameError, InvalidHexError,
    NotConvertibleError, FingerprintTooShortError, FingerprintTooLongError,
)
from .ids import (
    UID, TeamID, TeamName, USERNAME_HINT,
    uid_from_hex, team_id_from_string, team_name_from_string,
    check_username, is_valid_hostname,
)
from .proofs import Proof, ProofSet
from .utils import is_hex

if TYPE_CHECKING:
    from .context import AssertionContext


class AtomKind(str, Enum):
    KEYBASE = "keybase"
    UID = "uid"
    TEAM_ID = "tid"
    TEAM_NAME = "team"
    WEB = "web"
    HTTP = "http"
    HTTPS = "https"
    DNS = "dns"
    FINGERPRINT = PGP_ASSERTION_KEY
    SOCIAL = "social"   # any other key; the key names the service


KIND_BY_KEY: Dict[str, AtomKind] = {k.value: k for k in AtomKind if k is not AtomKind.SOCIAL}

REMOTE_KINDS = frozenset({AtomKind.WEB, AtomKind.HTTP, AtomKind.HTTPS, AtomKind.DNS})

# Kinds that can be handed to an external resolver as a (service, user) pair
SOCIAL_CONVERTIBLE_KINDS = REMOTE_KINDS | {AtomKind.SOCIAL, AtomKind.FINGERPRINT}

# Proof kinds each atom kind accepts; missing rows mean "own key only"
PROOF_KEYS: Dict[AtomKind, Tuple[str, ...]] = {
    AtomKind.WEB: ("dns", "http", "https"),
    AtomKind.HTTP: ("http", "https"),
}

# Resolver key for each kind; missing rows use the atom's own key
LOOKUP_KEYS: Dict[AtomKind, str] = {
    AtomKind.KEYBASE: "username",
}


def kind_for_key(key: str) -> AtomKind:
    return KIND_BY_KEY.get(key, AtomKind.SOCIAL)


@dataclass(frozen=True)
class SocialAssertion:
    service: str
    user: str

    def __str__(self) -> str:
        return f"{self.service}:{self.user}"


@dataclass(frozen=True)
class AssertionAtom:
    kind: AtomKind
    key: str
    value: str

    @classmethod
    def make(cls, key: str, value: str) -> "AssertionAtom":
        """Build an un-normalized atom; the key decides the kind."""
        return cls(kind_for_key(key), key, value)

    # --------- normalization ----------
    def check_and_normalize(self, ctx: "AssertionContext") -> "AssertionAtom":
        return _NORMALIZERS[self.kind](self, ctx)

    # --------- predicates ----------
    def is_keybase(self) -> bool:
        return self.kind is AtomKind.KEYBASE

    def is_uid(self) -> bool:
        return self.kind is AtomKind.UID

    def is_team_id(self) -> bool:
        return self.kind is AtomKind.TEAM_ID

    def is_team_name(self) -> bool:
        return self.kind is AtomKind.TEAM_NAME

    def is_social(self) -> bool:
        return self.kind is AtomKind.SOCIAL

    def is_remote(self) -> bool:
        return self.kind in REMOTE_KINDS

    def is_fingerprint(self) -> bool:
        return self.kind is AtomKind.FINGERPRINT

    # --------- cached identifiers ----------
    # Pure functions of value; None when the atom is another kind or the
    # value does not decode.
    @cached_property
    def _uid(self) -> Optional[UID]:
        return _try_decode(uid_from_hex, self.value) if self.is_uid() else None

    @cached_property
    def _team_id(self) -> Optional[TeamID]:
        return _try_decode(team_id_from_string, self.value) if self.is_team_id() else None

    @cached_property
    def _team_name(self) -> Optional[TeamName]:
        return _try_decode(team_name_from_string, self.value) if self.is_team_name() else None

    def to_uid(self) -> Optional[UID]:
        return self._uid

    def to_team_id(self) -> Optional[TeamID]:
        return self._team_id

    def to_team_name(self) -> Optional[TeamName]:
        return self._team_name

    # --------- accessors ----------
    def to_key_value_pair(self) -> Tuple[str, str]:
        return self.key, self.value

    def cache_key(self) -> str:
        return f"{self.key}:{self.value}"

    def proof_keys(self) -> Tuple[str, ...]:
        return PROOF_KEYS.get(self.kind, (self.key,))

    def to_social_assertion(self) -> SocialAssertion:
        if self.kind not in SOCIAL_CONVERTIBLE_KINDS:
            raise NotConvertibleError(f"cannot convert {self.kind.name.lower()} assertion "
                                      f"'{self}' to social assertion")
        return SocialAssertion(service=self.key, user=self.value)

    def to_lookup_key(self) -> Tuple[str, str]:
        if self.is_fingerprint():
            return _fingerprint_lookup_key(self.value)
        return LOOKUP_KEYS.get(self.kind, self.key), self.value

    # --------- matching ----------
    def match_proof(self, proof: Proof) -> bool:
        pv = proof.value.lower()
        if self.is_fingerprint():
            # Partial fingerprints match on the suffix
            return len(self.value) <= len(pv) and pv.endswith(self.value)
        return pv == self.value

    def matches(self, ps: ProofSet) -> bool:
        return any(self.match_proof(p) for p in ps.lookup(self.proof_keys()))

    # --------- expression-tree surface ----------
    def has_or(self) -> bool:
        return False

    def needs_parens(self) -> bool:
        return False

    def collect_atoms(self, acc: Optional[List["AssertionAtom"]] = None) -> List["AssertionAtom"]:
        acc = [] if acc is None else acc
        acc.append(self)
        return acc

    def to_string(self) -> str:
        if self.is_keybase():
            return self.value
        return f"{self.value}@{self.key}"

    def __str__(self) -> str:
        return self.to_string()


def _try_decode(decode: Callable, value: str):
    try:
        return decode(value)
    except AssertionCoreError:
        return None


def _fingerprint_lookup_key(value: str) -> Tuple[str, str]:
    if len(value) < MIN_FINGERPRINT_QUERY_LEN:
        raise FingerprintTooShortError(value)
    if len(value) == PGP_FINGERPRINT_HEX_LEN:
        return "key_fingerprint", value
    if len(value) < PGP_FINGERPRINT_HEX_LEN:
        return "key_suffix", value
    raise FingerprintTooLongError(value)


# --------- per-kind normalizers ----------
def _normalize_keybase(a: AssertionAtom, _ctx) -> AssertionAtom:
    value = a.value.lower()
    if not check_username(value):
        raise InvalidUsernameError(value, USERNAME_HINT)
    return replace(a, value=value)


def _normalize_uid(a: AssertionAtom, _ctx) -> AssertionAtom:
    uid_from_hex(a.value)
    return replace(a, value=a.value.lower())


def _normalize_team_id(a: AssertionAtom, _ctx) -> AssertionAtom:
    team_id_from_string(a.value)
    return replace(a, value=a.value.lower())


def _normalize_team_name(a: AssertionAtom, _ctx) -> AssertionAtom:
    return replace(a, value=str(team_name_from_string(a.value)))


def _normalize_host(a: AssertionAtom, _ctx) -> AssertionAtom:
    if not a.value:
        raise InvalidHostnameError(a.value, f"no value given (key={a.key})")
    value = a.value.lower()
    if not is_valid_hostname(value):
        raise InvalidHostnameError(value)
    return replace(a, value=value)


def _normalize_fingerprint(a: AssertionAtom, _ctx) -> AssertionAtom:
    value = a.value.lower()
    if not is_hex(value):
        raise InvalidHexError(value)
    return replace(a, value=value)


def _normalize_social(a: AssertionAtom, ctx: "AssertionContext") -> AssertionAtom:
    return replace(a, value=ctx.normalize_social_name(a.key, a.value))


_NORMALIZERS: Dict[AtomKind, Callable[[AssertionAtom, "AssertionContext"], AssertionAtom]] = {
    AtomKind.KEYBASE: _normalize_keybase,
    AtomKind.UID: _normalize_uid,
    AtomKind.TEAM_ID: _normalize_team_id,
    AtomKind.TEAM_NAME: _normalize_team_name,
    AtomKind.WEB: _normalize_host,
    AtomKind.HTTP: _normalize_host,
    AtomKind.HTTPS: _normalize_host,
    AtomKind.DNS: _normalize_host,
    AtomKind.FINGERPRINT: _normalize_fingerprint,
    AtomKind.SOCIAL: _normalize_social,
}
