# assertion_core/analysis.py
from __future__ import annotations
from typing import Optional, Tuple

from .atoms import AssertionAtom
from .constants import ROOTER_SERVICE
from .expression import AssertionAnd, AssertionExpression


def find_best_atom(expr: AssertionExpression) -> Optional[AssertionAtom]:
    """
    Pick the single atom that best represents an expression.

    A UID or team ID is conclusive: the first one seen ends the scan. Otherwise
    the first atom of each category is remembered and the winner is taken in
    the order keybase, team name, fingerprint, rooter, other social, and
    finally whatever atom came first.
    """
    atoms = expr.collect_atoms()
    if not atoms:
        return None

    kb = team = fp = rooter = soc = None
    for a in atoms:
        if a.is_uid() or a.is_team_id():
            return a
        if a.is_keybase():
            kb = kb or a
        elif a.is_team_name():
            team = team or a
        elif a.is_fingerprint():
            fp = fp or a
        elif a.is_social():
            if a.key == ROOTER_SERVICE:
                rooter = rooter or a
            else:
                soc = soc or a

    for candidate in (kb, team, fp, rooter, soc):
        if candidate is not None:
            return candidate
    return atoms[0]


def find_best_string(expr: AssertionExpression) -> str:
    a = find_best_atom(expr)
    return a.to_string() if a is not None else ""


def partition_remote_local(expr: AssertionExpression) -> Tuple[AssertionAnd, AssertionAnd]:
    """Split the atoms of expr into (remotes, locals); web/http/https/dns are remote."""
    remotes, locals_ = [], []
    for a in expr.collect_atoms():
        (remotes if a.is_remote() else locals_).append(a)
    return AssertionAnd(remotes), AssertionAnd(locals_)


def is_team(atom: Optional[AssertionAtom]) -> bool:
    return atom is not None and (atom.is_team_id() or atom.is_team_name())
