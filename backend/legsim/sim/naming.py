from __future__ import annotations
import random

from ..data_pipeline.wordlists import WordLists

VOWELS = "aeiou"
CONSONANTS = "bcdfghjklmnpqrstvwxyz"


def generate_name(rng: random.Random, max_length: int = 20, prefix: str = "", suffix: str = "") -> str:
    """Alternating vowel/consonant name, 3 to max_length-1 letters, capitalized."""
    length = rng.randrange(3, max_length)
    letters = []
    for i in range(length):
        pool = CONSONANTS if i % 2 else VOWELS
        letters.append(rng.choice(pool))
    letters[0] = letters[0].upper()
    return prefix + "".join(letters) + suffix


def party_name(rng: random.Random) -> str:
    return generate_name(rng, suffix=" Party")


def legislator_name(rng: random.Random) -> str:
    return generate_name(rng, prefix="Legislator ") + generate_name(rng, prefix=" ")


def bill_name(rng: random.Random, words: WordLists) -> str:
    adjective, noun = words.random_pair(rng)
    return f"{adjective} {noun} bill".title()
