"""
Word-family partitioning for a single letter guess.

Conventions:
  - '-'    : blank, letter at this position not revealed yet
  - letter : revealed letter, present at this position in EVERY candidate

Given the current candidate pool, the displayed pattern and a new letter,
every candidate maps to exactly one response pattern:
  - positions where the word holds the letter show the letter
  - every other position carries the current pattern character forward

Words that do not contain the letter map to the unchanged pattern (the
"miss" family). The result is a partition of the pool: no word is dropped
or duplicated, and family sizes sum to the pool size.

Cost: O(len(pool) * word_length).
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

BLANK = "-"

# pattern -> words sharing it (pool order preserved inside each family)
Families = Dict[str, List[str]]


def blank_pattern(length: int) -> str:
    """The pattern shown before any letter is revealed."""
    return BLANK * length


def response_pattern(word: str, pattern: str, letter: str) -> str:
    """
    Pattern `word` would produce if `letter` were guessed now.

    Examples:
      response_pattern("cat", "---", "c") -> "c--"
      response_pattern("cop", "c--", "a") -> "c--"
    """
    return "".join(letter if ch == letter else shown for ch, shown in zip(word, pattern))


def partition(pool: Iterable[str], pattern: str, letter: str) -> Families:
    """
    Split `pool` into families keyed by response pattern.

    Args:
      pool    : current candidates, all of len(pattern)
      pattern : currently displayed pattern
      letter  : newly guessed letter

    Returns:
      Dict[str, List[str]]; empty when the pool is empty.
    """
    families: Dict[str, List[str]] = defaultdict(list)
    for w in pool:
        families[response_pattern(w, pattern, letter)].append(w)
    return dict(families)


def family_counts(families: Families) -> Dict[str, int]:
    """pattern -> family size, ordered by pattern string."""
    return {patt: len(families[patt]) for patt in sorted(families)}
