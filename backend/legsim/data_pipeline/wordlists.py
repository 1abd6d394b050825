from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import SetupError

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
DEFAULT_ADJECTIVES = os.path.join(DATA_DIR, "adjectives.txt")
DEFAULT_NOUNS = os.path.join(DATA_DIR, "nouns.txt")


def load_word_list(path: str) -> List[str]:
    """Read a resource file as a flat list of whitespace-delimited tokens."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            words = f.read().split()
    except OSError as e:
        raise SetupError(f"Cannot read word list {path}: {e}") from e
    if not words:
        raise SetupError(f"Word list {path} is empty.")
    logger.info("Loaded %d words from %s", len(words), path)
    return words


@dataclass(frozen=True)
class WordLists:
    adjectives: Tuple[str, ...]
    nouns: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.adjectives or not self.nouns:
            raise SetupError("Both adjective and noun word lists must be non-empty.")

    def random_pair(self, rng: random.Random) -> Tuple[str, str]:
        return rng.choice(self.adjectives), rng.choice(self.nouns)


def load_word_lists(adjectives_path: Optional[str] = None, nouns_path: Optional[str] = None) -> WordLists:
    return WordLists(
        adjectives=tuple(load_word_list(adjectives_path or DEFAULT_ADJECTIVES)),
        nouns=tuple(load_word_list(nouns_path or DEFAULT_NOUNS)),
    )
