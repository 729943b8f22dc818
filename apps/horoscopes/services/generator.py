"""
Horoscope text generation.

Combines the canned content tables into a personalized daily reading.
"""
import random
from datetime import date
from typing import Dict, List

from ..content import (
    AFFIRMATIONS,
    DEFAULT_AFFIRMATION,
    DEFAULT_LUCKY_NUMBER_BASE,
    HOROSCOPE_PASSAGES,
    LUCKY_NUMBER_BASES,
    PERSONALIZATION_TEMPLATES,
)


def random_passage(sign: str) -> str:
    """Pick one of the canned passages for a sign."""
    passages = HOROSCOPE_PASSAGES.get(sign)
    if not passages:
        raise ValueError(f"Invalid zodiac sign: {sign!r}")
    return random.choice(passages)


def personalized_text(sign: str, name: str) -> str:
    """
    Build a personalized horoscope for a user.

    Picks a random passage for the sign and wraps it in a random
    personalization template. Two calls with the same arguments may
    return different text.

    Raises:
        ValueError: for an unknown sign
    """
    passage = random_passage(sign)
    template = random.choice(PERSONALIZATION_TEMPLATES)
    return template.format(
        name=name,
        sign=sign,
        passage=passage,
        lowered=passage.lower(),
    )


def affirmation(sign: str) -> str:
    """Daily affirmation for a sign, generic for anything unrecognized."""
    return AFFIRMATIONS.get(sign, DEFAULT_AFFIRMATION)


def lucky_numbers(sign: str, day: date) -> List[int]:
    """Lucky numbers for a sign on a given day. Always in 1..50."""
    bases = LUCKY_NUMBER_BASES.get(sign, DEFAULT_LUCKY_NUMBER_BASE)
    return [(base + day.day) % 50 + 1 for base in bases]


def build_entry(sign: str, content: str, day: date,
                created_at=None, saved: bool = False) -> Dict:
    """Assemble the horoscope entry returned by the API."""
    entry = {
        'zodiac_sign': sign,
        'content': content,
        'date': day,
        'affirmation': affirmation(sign),
        'lucky_numbers': lucky_numbers(sign, day),
        'saved': saved,
    }
    if created_at is not None:
        entry['created_at'] = created_at
    return entry


def generate_entry(sign: str, name: str, day: date) -> Dict:
    """Fresh, unsaved entry for a day without a stored horoscope."""
    return build_entry(sign, personalized_text(sign, name), day, saved=False)
