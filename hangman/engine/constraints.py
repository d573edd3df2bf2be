"""
Candidate filtering from public information.

Given:
  - a pool of words (usually the whole dictionary)
  - the displayed pattern
  - the letters guessed so far

Return:
  - words that could still be the secret as far as the GUESSER can tell.

A revealed letter occupies every position where it occurs, so a word is
consistent iff it matches every revealed position and holds no guessed
letter at a blank position. This is what a guesser can compute on its own;
the manager's real pool is never exposed to it.
"""

from __future__ import annotations

from typing import Iterable, List, Set

from .partition import BLANK


def is_consistent(word: str, pattern: str, guessed: Set[str]) -> bool:
    if len(word) != len(pattern):
        return False
    for ch, shown in zip(word, pattern):
        if shown == BLANK:
            # a guessed letter here would have been revealed
            if ch in guessed:
                return False
        elif ch != shown:
            return False
    return True


def filter_candidates(words: Iterable[str], pattern: str, guessed: Iterable[str]) -> List[str]:
    """
    Keep only words consistent with `pattern` and `guessed`.

    Returns:
      List[str] in input order.
    """
    g = set(guessed)
    return [w for w in words if is_consistent(w, pattern, g)]
