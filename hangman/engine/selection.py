"""
Family selection: which response pattern the manager commits to.

Hardest-family order (a strict total order over distinct patterns):
  1) larger family first
  2) on a size tie, more blanks first (reveals the least)
  3) on a blank tie, the lexicographically smaller pattern first

Mercy schedule, driven by a per-round counter that starts at 1 and advances
on every guess:
  - HARD   : never; always the hardest family
  - MEDIUM : when counter % 4 == 0, take the second-hardest family
  - EASY   : when counter % 2 == 0, take the second-hardest family
Mercy needs something to skip, so it does nothing when only one family exists.

"Second-hardest" means the hardest family once the single top-ranked one is
set aside. Both are found in one pass (heapq.nsmallest over the sort key);
the family map itself is never modified, so callers can still report the
full partition.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import List, Tuple

from .partition import BLANK, Families
from .config import Difficulty

MEDIUM_MERCY_EVERY = 4
EASY_MERCY_EVERY = 2


@dataclass(frozen=True)
class Selection:
    """Outcome of one selection: the committed pattern and its bound words."""
    pattern: str
    words: List[str] = field(default_factory=list)
    mercy: bool = False


def hardness_key(pattern: str, size: int) -> Tuple[int, int, str]:
    """
    Sort key for the hardest-family order; the smallest key is the hardest.

    Examples (pattern, size):
      ("c--", 3) ranks before ("---", 1)      size wins
      ("ca-", 1) ranks before ("cat", 1)      more blanks wins
      ("--a", 2) ranks before ("-a-", 2)      lexicographic
    """
    return -size, -pattern.count(BLANK), pattern


def ranked(families: Families, n: int | None = None) -> List[str]:
    """Patterns from hardest to easiest; only the first `n` when given."""
    def key(p):
        return hardness_key(p, len(families[p]))

    if n is None:
        return sorted(families, key=key)
    return heapq.nsmallest(n, families, key=key)


def hardest(families: Families) -> str:
    """Pattern of the hardest family. Requires a non-empty map."""
    return ranked(families, 1)[0]


def mercy_due(difficulty: Difficulty, counter: int) -> bool:
    if difficulty is Difficulty.MEDIUM:
        return counter % MEDIUM_MERCY_EVERY == 0
    if difficulty is Difficulty.EASY:
        return counter % EASY_MERCY_EVERY == 0
    return False


def select_family(
        families: Families,
        difficulty: Difficulty,
        counter: int,
        *,
        current_pattern: str,
) -> Tuple[Selection, int]:
    """
    Pick the family to commit to.

    Args:
      families        : output of partition()
      difficulty      : round difficulty
      counter         : difficulty counter before this guess
      current_pattern : pattern shown before this guess; used only when the
                        pool (and so the family map) is empty

    Returns:
      (Selection, next counter). The counter advances by one on every call.
    """
    next_counter = counter + 1

    # Nothing to choose from: the pattern cannot change.
    if not families:
        return Selection(current_pattern, []), next_counter

    top = ranked(families, 2)
    if mercy_due(difficulty, counter) and len(top) > 1:
        chosen, mercy = top[1], True
    else:
        chosen, mercy = top[0], False

    return Selection(chosen, list(families[chosen]), mercy), next_counter
