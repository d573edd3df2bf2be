"""
Random Letter guesser.

Strategy:
  - Choose uniformly at random among unguessed letters that still occur in
    some consistent candidate word.
  - If no such letter exists, fall back to any unguessed alphabet letter.

Notes:
  - Deterministic across runs with the same seed (via BaseGuesser.rng).
  - Baseline to verify the pipeline; it makes no attempt to play well.
"""

from __future__ import annotations

from typing import List
from .base import BaseGuesser, register


@register
class RandomLetterGuesser(BaseGuesser):
    id = "random_letter"
    name = "Random Letter"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Args:
            state: dict with keys:
                - "candidates": words consistent with the board (List[str])
                - "guessed":    letters guessed so far (Set[str])
                - "alphabet":   every letter seen in the dictionary (List[str])

        Returns:
            One unguessed letter.

        Raises:
            ValueError if every letter has been guessed.
        """
        pool: List[str] = self.open_letters(state)
        if not pool:
            raise ValueError("no unguessed letters left")
        return pool[self.rng.randrange(len(pool))]
