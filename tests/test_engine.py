from __future__ import annotations

import random

import pytest

from legsim.errors import SetupError
from legsim.models import VoteTally
from legsim.sim.agent import Legislator, Party
from legsim.sim.engine import Legislature, cast_vote, decide_outcome
from legsim.sim.geometry import Point

# Draw order for a one-member chamber: bill x (magnitude, sign), bill y
# (magnitude, sign), then per vote the threshold jitter (magnitude, sign) and,
# when opposed, the nay/abstain coin.
NEAR_BILL = [0.0, 0.0, 0.0, 0.0, 0.0, 0.0]
FAR_BILL_NAY = [0.99, 0.9, 0.99, 0.9, 0.99, 0.1, 0.1]


def _member(name: str, x: float, y: float) -> Legislator:
    return Legislator.create(name, Point(x, y), [])


def _chamber(n: int, seed: int, words, **kwargs) -> Legislature:
    rng = random.Random(seed)
    parties = [Party("Red Party", Point(-5, 0)), Party("Blue Party", Point(5, 0))]
    members = [
        Legislator.create(f"M{i}", Point(rng.uniform(-10, 10), rng.uniform(-10, 10)), parties)
        for i in range(n)
    ]
    return Legislature(members, rng=rng, words=words, **kwargs)


@pytest.mark.parametrize(
    ("aye", "nay", "expected"),
    [(3, 2, True), (2, 2, False), (1, 4, False), (1, 0, True), (0, 0, False)],
)
def test_outcome_requires_strict_majority_of_cast_votes(aye, nay, expected):
    assert decide_outcome(aye, nay) is expected


def test_fresh_tally_is_empty():
    tally = VoteTally()
    assert (tally.aye, tally.nay, tally.abstain) == (0, 0, 0)
    tally.record("abstain")
    assert tally.abstain == 1


def test_single_member_counted_twice_when_near(scripted_rng, words):
    legislature = Legislature([_member("Solo", 0, 0)], rng=scripted_rng(NEAR_BILL), words=words)
    result = legislature.hold_session()
    assert result.tally.aye == 2
    assert result.votes == ["aye"]
    assert result.passed


def test_single_member_can_oppose_own_bill(scripted_rng, words):
    legislature = Legislature([_member("Solo", 0, 0)], rng=scripted_rng(FAR_BILL_NAY), words=words)
    result = legislature.hold_session()
    assert result.bill_position == pytest.approx((4.95, 4.95))
    assert (result.tally.aye, result.tally.nay, result.tally.abstain) == (1, 1, 0)
    assert not result.passed
    assert legislature.failed == 1


def test_exclude_advocate_skips_second_poll(scripted_rng, words):
    rng = scripted_rng(FAR_BILL_NAY[:4])
    legislature = Legislature([_member("Solo", 0, 0)], rng=rng, words=words, exclude_advocate=True)
    result = legislature.hold_session()
    assert result.tally.aye == 1
    assert result.tally.nay == 0
    assert result.passed
    assert rng.values == []


def test_bill_is_named_from_word_lists(scripted_rng, words):
    legislature = Legislature([_member("Solo", 0, 0)], rng=scripted_rng(NEAR_BILL), words=words)
    result = legislature.hold_session()
    assert result.bill_name == "Clean Water Bill"
    assert result.advocate == "Solo"


def test_distant_member_never_votes_aye():
    rng = random.Random(3)
    member = _member("Far", 10, 10)
    votes = {cast_vote(member, Point(-10, -10), rng) for _ in range(200)}
    assert votes == {"nay", "abstain"}


def test_close_member_always_votes_aye():
    rng = random.Random(3)
    member = _member("Close", 1, 1)
    assert all(cast_vote(member, Point(1, 1), rng) == "aye" for _ in range(200))


def test_counters_stay_consistent_across_sessions(words):
    legislature = _chamber(15, seed=11, words=words)
    for i in range(1, 51):
        result = legislature.hold_session()
        assert legislature.proposed == i
        assert legislature.passed + legislature.failed == legislature.proposed
        assert result.session_index == i
        assert sum([result.tally.nay, result.tally.abstain]) + result.tally.aye == 16
        assert len(result.votes) == 15


def test_same_seed_gives_same_sessions(words):
    a = _chamber(10, seed=5, words=words)
    b = _chamber(10, seed=5, words=words)
    for _ in range(10):
        assert a.hold_session() == b.hold_session()


def test_stats_before_any_session_have_no_percentage(words):
    stats = _chamber(3, seed=1, words=words).stats()
    assert stats.proposed == 0
    assert stats.pass_percentage is None


def test_stats_after_two_passes_and_one_failure(scripted_rng, words):
    draws = NEAR_BILL + FAR_BILL_NAY + NEAR_BILL
    legislature = Legislature([_member("Solo", 0, 0)], rng=scripted_rng(draws), words=words)
    outcomes = [legislature.hold_session().passed for _ in range(3)]
    assert outcomes == [True, False, True]
    stats = legislature.stats()
    assert stats.pass_percentage == pytest.approx(66.67)
    assert stats.proposed == 3
    assert stats.failed == 1


def test_empty_legislature_is_a_setup_error(words):
    with pytest.raises(SetupError):
        Legislature([], rng=random.Random(0), words=words)
