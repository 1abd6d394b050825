from __future__ import annotations
import math
import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float   # -10..+10
    y: float   # -10..+10

    def shifted(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def jitter(rng: random.Random, bound: float) -> float:
    # Magnitude first, then an independent coin flip for the sign.
    magnitude = rng.random() * bound
    return -magnitude if rng.random() < 0.5 else magnitude
