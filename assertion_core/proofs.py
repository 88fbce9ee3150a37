# assertion_core/proofs.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class Proof:
    """
    A single verified claim handed over by the proof-verification pipeline.

    key is the proof kind ("twitter", "dns", "fingerprint", ...); value is
    already normalized by whoever verified it.
    """
    key: str
    value: str


class ProofSet:
    """Proofs grouped by kind, queried by assertion atoms during matching."""

    def __init__(self, proofs: Optional[Iterable[Proof]] = None):
        self._proofs: Dict[str, List[Proof]] = {}
        for p in proofs or ():
            self.add(p)

    @classmethod
    def build(cls, proofs: Iterable[Proof]) -> "ProofSet":
        return cls(proofs)

    def add(self, proof: Proof) -> None:
        # Only meant to be called while the set is being built
        self._proofs.setdefault(proof.key, []).append(proof)

    def lookup(self, keys: Iterable[str]) -> List[Proof]:
        ret: List[Proof] = []
        for key in keys:
            ret.extend(self._proofs.get(key, ()))
        return ret

    def keys(self) -> List[str]:
        return list(self._proofs)

    def __len__(self) -> int:
        return sum(len(v) for v in self._proofs.values())

    def __repr__(self) -> str:
        return f"ProofSet({self._proofs!r})"
