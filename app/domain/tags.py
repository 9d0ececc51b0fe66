"""Short tag generation for stored itineraries."""

from __future__ import annotations

import random
import secrets
from typing import Optional

# 15 distinct characters, roughly 2.56e9 tags at the default length.
TAG_ALPHABET = "abdfhjklmnprsvz"
TAG_LENGTH = 8


def generate_tag(length: int = TAG_LENGTH, alphabet: str = TAG_ALPHABET, rng: Optional[random.Random] = None) -> str:
    """
    Build a tag by drawing each character uniformly from ``alphabet``.
    Pass a seeded ``random.Random`` as ``rng`` for reproducible tags; no check is
    made against tags that are already stored.
    """
    source = rng or secrets.SystemRandom()
    return "".join(source.choice(alphabet) for _ in range(length))
