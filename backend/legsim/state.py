from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .data_pipeline.synthetic import make_legislators, make_parties
from .data_pipeline.wordlists import WordLists, load_word_lists
from .errors import SetupError
from .models import PartySummary, SimConfig
from .sim.agent import INDEPENDENT_NAME, Legislator, Party
from .sim.engine import Legislature

logger = logging.getLogger(__name__)


def build_legislature(config: SimConfig, rng: random.Random,
                      words: Optional[WordLists] = None) -> Tuple[Legislature, List[Party]]:
    """Assemble parties, legislators and word lists into a ready legislature.

    Returns the legislature together with the parties, which the legislature
    itself does not keep. Everything is validated here so that a session
    never sees a partial setup.
    """
    if config.num_seats < 1:
        raise SetupError("At least one seat is required.")
    if config.num_parties < 1:
        raise SetupError("At least one party is required.")
    if words is None:
        words = load_word_lists(config.adjectives_path, config.nouns_path)

    parties = make_parties(config.num_parties, rng)
    legislators = make_legislators(config.num_seats, parties, rng)
    independents = sum(1 for m in legislators if m.party.is_independent)
    logger.info("Seated %d legislators across %d parties (%d independent)",
                len(legislators), len(parties), independents)
    legislature = Legislature(legislators, rng=rng, words=words, exclude_advocate=config.exclude_advocate)
    return legislature, parties


def party_summary(legislators: Sequence[Legislator], parties: Sequence[Party]) -> List[PartySummary]:
    # Parties don't keep member lists, so count on demand.
    counts = Counter(m.party for m in legislators)
    out = [
        PartySummary(name=p.name, position=(p.position.x, p.position.y), members=counts.get(p, 0))
        for p in parties
    ]
    independents = sum(1 for m in legislators if m.party.is_independent)
    if independents:
        out.append(PartySummary(name=INDEPENDENT_NAME, members=independents))
    return out


def serialize_legislators(legislators: Sequence[Legislator]) -> List[Dict[str, Any]]:
    # For debugging / roster display.
    return [
        {
            "name": m.name,
            "position": (m.position.x, m.position.y),
            "party": m.party.name,
            "independent": m.party.is_independent,
        }
        for m in legislators
    ]
