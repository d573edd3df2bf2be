"""
Minimize Worst Family (MWF).

Idea:
  The manager commits to (roughly) the largest family a guess produces.
  For each candidate letter, partition the CURRENT consistent candidates
  exactly as the manager would and look at the largest family. Pick the
  letter whose largest family is smallest.
  Tie-break: largest family is NOT the miss family (the guess would reveal
  something), then more distinct families, then RNG.

Cost: O(|letters| * |candidates| * N) per guess.
"""

from __future__ import annotations
from typing import List, Tuple
from .base import BaseGuesser, register
from hangman.engine.partition import partition
from hangman.engine.selection import hardest


def _worst_family(letter: str, candidates: List[str], pattern: str) -> Tuple[int, bool, int]:
    """
    Return (worst_family_size, worst_is_miss, num_families) for `letter`.
    """
    families = partition(candidates, pattern, letter)
    if not families:
        return 0, True, 0
    top = hardest(families)
    return len(families[top]), top == pattern, len(families)


@register
class MinWorstFamilyGuesser(BaseGuesser):
    id = "min_worst_family"
    name = "Minimize Worst Family"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pattern: str = state["pattern"]

        pool = self.open_letters(state)
        if not pool:
            raise ValueError("no unguessed letters left")

        best_key = None
        best: List[str] = []
        for ch in pool:
            worst, is_miss, m = _worst_family(ch, candidates, pattern)
            key = (worst, is_miss, -m)
            if best_key is None or key < best_key:
                best_key, best = key, [ch]
            elif key == best_key:
                best.append(ch)

        return best[self.rng.randrange(len(best))]
