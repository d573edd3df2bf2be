"""
Letter-Frequency guesser (document frequency).

Idea:
  - Over the CURRENT consistent candidates, count in how many words each
    unguessed letter appears (each word counts a letter at most once).
  - Guess the letter present in the most words; break ties with seeded RNG.

Why it works:
  - Against a fixed secret this maximizes the chance of a hit. Against an
    adversarial manager it still tends to force the pool to split, since a
    letter in most words leaves only a small "miss" family behind.
"""

from __future__ import annotations
from collections import Counter
from typing import List
from .base import BaseGuesser, register


@register
class LetterFreqGuesser(BaseGuesser):
    id = "letter_freq"
    name = "Letter Frequency (per word)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool = self.open_letters(state)
        if not pool:
            raise ValueError("no unguessed letters left")

        counts: Counter[str] = Counter()
        for w in candidates:
            counts.update(set(w))

        best_score = None
        best: List[str] = []
        for ch in pool:
            s = counts[ch]
            if best_score is None or s > best_score:
                best_score = s
                best = [ch]
            elif s == best_score:
                best.append(ch)

        return best[self.rng.randrange(len(best))]
