"""
Shared fixtures for the simulation tests.

`scripted_rng` hands out a random source whose `random()` values are fixed in
advance, so a session can be walked through draw by draw. `choice` always
returns the first element and `randrange` the lower bound.
"""
from __future__ import annotations

from typing import Iterable, List

import pytest

from legsim.data_pipeline.wordlists import WordLists


class ScriptedRandom:
    def __init__(self, values: Iterable[float]):
        self.values: List[float] = list(values)

    def random(self) -> float:
        if not self.values:
            raise AssertionError("scripted random source exhausted")
        return self.values.pop(0)

    def choice(self, seq):
        return seq[0]

    def randrange(self, start, stop=None):
        return start


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def words() -> WordLists:
    return WordLists(adjectives=("clean", "rural"), nouns=("water", "housing"))
