"""
Round finalization: the only point where a concrete secret word is fixed.

Until now the manager has only committed to patterns. At round end any word
still in the pool is consistent with everything the guesser saw, so one is
drawn uniformly at random. The random source is passed in so callers (and
tests) decide how reproducible the draw is.
"""

from __future__ import annotations

import random
from typing import Sequence

from .errors import EmptyPoolError


def resolve_secret(pool: Sequence[str], rng: random.Random) -> str:
    """
    Draw the secret word from the final candidate pool.

    Raises:
      EmptyPoolError if the pool is empty.
    """
    if not pool:
        raise EmptyPoolError("There must be at least one word in the candidate pool")
    return pool[rng.randrange(len(pool))]
