"""
assertion_core.expression
-------------------------
AND-of-OR trees over assertion atoms.

    alice@twitter+bob,carol@github  ==  And(alice@twitter, Or(bob, carol@github))

Trees are immutable and every operation here is a pure read. Leaves are
AssertionAtom instances, which share the node surface (matches, has_or,
needs_parens, collect_atoms, to_string).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .atoms import AssertionAtom, SocialAssertion
from .errors import NotConvertibleError
from .proofs import Proof, ProofSet

OR_SEPARATOR = ","
AND_SEPARATOR = "+"


@dataclass(frozen=True)
class AssertionOr:
    terms: Tuple["AssertionExpression", ...]

    def __post_init__(self):
        object.__setattr__(self, "terms", tuple(self.terms))

    def matches(self, ps: ProofSet) -> bool:
        return any(t.matches(ps) for t in self.terms)

    def has_or(self) -> bool:
        return True

    def needs_parens(self) -> bool:
        return any(t.needs_parens() for t in self.terms)

    def collect_atoms(self, acc: Optional[List[AssertionAtom]] = None) -> List[AssertionAtom]:
        acc = [] if acc is None else acc
        for t in self.terms:
            t.collect_atoms(acc)
        return acc

    def to_social_assertion(self) -> SocialAssertion:
        raise NotConvertibleError("cannot convert OR expression to single social assertion")

    def to_string(self) -> str:
        return OR_SEPARATOR.join(t.to_string() for t in self.terms)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class AssertionAnd:
    factors: Tuple["AssertionExpression", ...]

    def __post_init__(self):
        object.__setattr__(self, "factors", tuple(self.factors))

    def __len__(self) -> int:
        return len(self.factors)

    def matches(self, ps: ProofSet) -> bool:
        return all(f.matches(ps) for f in self.factors)

    def has_factor(self, proof: Proof) -> bool:
        """True if this one proof on its own satisfies any factor."""
        ps = ProofSet.build([proof])
        return any(f.matches(ps) for f in self.factors)

    def has_or(self) -> bool:
        return any(f.has_or() for f in self.factors)

    def needs_parens(self) -> bool:
        return self.has_or()

    def collect_atoms(self, acc: Optional[List[AssertionAtom]] = None) -> List[AssertionAtom]:
        acc = [] if acc is None else acc
        for f in self.factors:
            f.collect_atoms(acc)
        return acc

    def to_social_assertion(self) -> SocialAssertion:
        raise NotConvertibleError("cannot convert AND expression to single social assertion")

    def to_string(self) -> str:
        parts = []
        for f in self.factors:
            s = f.to_string()
            parts.append(f"({s})" if f.has_or() else s)
        return AND_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.to_string()


AssertionExpression = Union[AssertionOr, AssertionAnd, AssertionAtom]
