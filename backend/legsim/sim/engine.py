from __future__ import annotations
import logging
import random
from typing import List, Sequence, Tuple

from ..data_pipeline.wordlists import WordLists
from ..errors import SetupError
from ..models import LegislatureStats, SessionResult, Vote, VoteTally
from .agent import Legislator
from .geometry import Point, distance, jitter
from .naming import bill_name

logger = logging.getLogger(__name__)

BILL_JITTER = 5.0
OPPOSITION_DISTANCE = 8.0
OPPOSITION_JITTER = 5.0


def cast_vote(legislator: Legislator, bill_position: Point, rng: random.Random) -> Vote:
    # Noisy cutoff around 8.0; beyond it a coin decides between nay and abstain.
    d = distance(legislator.position, bill_position)
    if d > OPPOSITION_DISTANCE + jitter(rng, OPPOSITION_JITTER):
        return "nay" if rng.random() < 0.5 else "abstain"
    return "aye"


def decide_outcome(aye: int, nay: int) -> bool:
    # Abstentions don't count and a tie fails.
    return aye > nay


def propose_bill(advocate: Legislator, rng: random.Random, words: WordLists) -> Tuple[str, Point]:
    dx = jitter(rng, BILL_JITTER)
    dy = jitter(rng, BILL_JITTER)
    position = advocate.position.shifted(dx, dy)
    return bill_name(rng, words), position


class Legislature:
    """Fixed chamber of legislators that holds one bill vote per session.

    The advocate starts the tally with an automatic aye and, unless
    `exclude_advocate` is set, is then polled again with everyone else.
    """

    def __init__(self, legislators: Sequence[Legislator], rng: random.Random, words: WordLists,
                 exclude_advocate: bool = False):
        if not legislators:
            raise SetupError("A legislature needs at least one legislator.")
        self.legislators: Tuple[Legislator, ...] = tuple(legislators)
        self.rng = rng
        self.words = words
        self.exclude_advocate = exclude_advocate
        self.proposed = 0
        self.passed = 0
        self.failed = 0

    def hold_session(self) -> SessionResult:
        self.proposed += 1
        advocate = self.rng.choice(self.legislators)
        name, position = propose_bill(advocate, self.rng, self.words)
        logger.debug("Session %d: %s at (%.2f, %.2f) advocated by %s",
                     self.proposed, name, position.x, position.y, advocate.name)

        # The advocate starts with an automatic aye.
        tally = VoteTally(aye=1)
        votes: List[Vote] = []
        for legislator in self.legislators:
            if self.exclude_advocate and legislator is advocate:
                votes.append("aye")
                continue
            v = cast_vote(legislator, position, self.rng)
            tally.record(v)
            votes.append(v)

        passed = decide_outcome(tally.aye, tally.nay)
        if passed:
            self.passed += 1
        else:
            self.failed += 1
        logger.debug("Session %d: aye=%d nay=%d abstain=%d passed=%s",
                     self.proposed, tally.aye, tally.nay, tally.abstain, passed)

        return SessionResult(
            session_index=self.proposed,
            bill_name=name,
            bill_position=(position.x, position.y),
            advocate=advocate.name,
            votes=votes,
            tally=tally,
            passed=passed,
            stats=self.stats(),
        )

    def stats(self) -> LegislatureStats:
        pct = round(self.passed / self.proposed * 100, 2) if self.proposed else None
        return LegislatureStats(proposed=self.proposed, passed=self.passed, failed=self.failed,
                                pass_percentage=pct)
