from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Sequence

from .geometry import Point, distance

PartyKind = Literal["party", "independent"]

AFFILIATION_THRESHOLD = 5.0
INDEPENDENT_NAME = "Independent"


@dataclass(frozen=True)
class Party:
    name: str
    position: Point
    kind: PartyKind = "party"

    @classmethod
    def independent(cls, position: Point) -> "Party":
        # An independent's "party" sits exactly on the legislator.
        return cls(name=INDEPENDENT_NAME, position=position, kind="independent")

    @property
    def is_independent(self) -> bool:
        return self.kind == "independent"

    def __str__(self) -> str:
        return self.name


def choose_party(position: Point, parties: Sequence[Party],
                 threshold: float = AFFILIATION_THRESHOLD) -> Party:
    """Return the nearest party strictly closer than `threshold`.

    Ties go to the party listed first. With no qualifying party the result is
    a new Independent positioned at `position`.
    """
    best = None
    best_distance = float("inf")
    for party in parties:
        d = distance(position, party.position)
        if d < best_distance and d < threshold:
            best = party
            best_distance = d
    return best if best is not None else Party.independent(position)


@dataclass(frozen=True)
class Legislator:
    name: str
    position: Point
    party: Party = field(compare=False)

    @classmethod
    def create(cls, name: str, position: Point, party_choices: Sequence[Party]) -> "Legislator":
        return cls(name=name, position=position, party=choose_party(position, party_choices))

    def __str__(self) -> str:
        return f"{self.name} ({self.party})"
