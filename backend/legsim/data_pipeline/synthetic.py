from __future__ import annotations

from typing import List, Sequence
import random

from ..sim.agent import Legislator, Party
from ..sim.geometry import Point
from ..sim.naming import legislator_name, party_name

COMPASS_MIN = -10.0
COMPASS_MAX = 10.0


def random_compass(rng: random.Random) -> Point:
    span = COMPASS_MAX - COMPASS_MIN
    return Point(COMPASS_MIN + rng.random() * span, COMPASS_MIN + rng.random() * span)


def make_parties(n: int, rng: random.Random) -> List[Party]:
    """Create `n` named parties with random centers.

    Each party draws its name before its position, so the order of random
    draws is name, x, y per party.
    """
    out: List[Party] = []
    for _ in range(n):
        name = party_name(rng)
        out.append(Party(name=name, position=random_compass(rng)))
    return out


def make_legislators(n: int, parties: Sequence[Party], rng: random.Random) -> List[Legislator]:
    out: List[Legislator] = []
    for _ in range(n):
        name = legislator_name(rng)
        out.append(Legislator.create(name, random_compass(rng), parties))
    return out
