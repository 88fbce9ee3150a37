"""
Assertion Core Package
======================
Identity assertion expressions for the proof-checking layer.

Provides:
- Typed assertion atoms (keybase:alice, uid:..., twitter:bob, dns:example.com, ...)
- AND-of-OR expression trees matched against sets of verified proofs
- Best-representative selection and remote/local partitioning
- Implicit team display-name and TLF path parsing
"""

from .analysis import find_best_atom, find_best_string, partition_remote_local, is_team
from .atoms import AssertionAtom, AtomKind, SocialAssertion
from .context import AssertionContext, StaticAssertionContext, SocialService, load_assertion_context
from .errors import AssertionCoreError
from .expression import AssertionAnd, AssertionOr, AssertionExpression
from .implicit_team import (
    ImplicitTeamConflictInfo,
    ImplicitTeamDisplayName,
    ImplicitTeamUserSet,
    format_implicit_team_display_name,
    format_implicit_team_display_name_suffix,
    parse_implicit_team_display_name,
    parse_implicit_team_display_name_suffix,
)
from .parser import parse_atom, parse_atom_key_value, parse_key_value
from .paths import parse_implicit_team_tlf_path, parse_team_kbfs_path
from .proofs import Proof, ProofSet

__all__ = [
    "AssertionAtom",
    "AtomKind",
    "SocialAssertion",
    "AssertionOr",
    "AssertionAnd",
    "AssertionExpression",
    "AssertionContext",
    "StaticAssertionContext",
    "SocialService",
    "load_assertion_context",
    "AssertionCoreError",
    "Proof",
    "ProofSet",
    "parse_key_value",
    "parse_atom",
    "parse_atom_key_value",
    "find_best_atom",
    "find_best_string",
    "partition_remote_local",
    "is_team",
    "ImplicitTeamConflictInfo",
    "ImplicitTeamDisplayName",
    "ImplicitTeamUserSet",
    "parse_implicit_team_display_name",
    "parse_implicit_team_display_name_suffix",
    "format_implicit_team_display_name",
    "format_implicit_team_display_name_suffix",
    "parse_implicit_team_tlf_path",
    "parse_team_kbfs_path",
]
