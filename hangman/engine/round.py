"""
State of one round and the guess transition.

A round owns:
  - its RoundConfig (word length, wrong-guess budget, difficulty)
  - the candidate pool: words consistent with everything shown so far
  - the displayed pattern
  - the set of guessed letters
  - the remaining wrong-guess budget
  - the difficulty counter (starts at 1, +1 per accepted guess)

Per guess:  pool --partition--> families --select_family--> commit.

All validation and all partition/selection work happen on local values; the
instance is only updated once every step has succeeded, so a rejected guess
leaves the round exactly as it was.

Win (no blanks left) and loss (budget at 0) are reported, not enforced.
"""

from __future__ import annotations

from typing import Dict, List, Set

from .config import RoundConfig
from .errors import AlreadyGuessedError, RoundNotStartedError
from .partition import BLANK, blank_pattern, family_counts, partition
from .selection import Selection, select_family
from .validation import validate_letter


class RoundState:
    def __init__(self, config: RoundConfig, pool: List[str]):
        self.config = config
        self.pool: List[str] = list(pool)
        self.pattern: str = blank_pattern(config.word_length)
        self.guessed: Set[str] = set()
        self.guesses_left: int = config.max_wrong_guesses
        self.counter: int = 1
        self.last_selection: Selection | None = None
        self.closed: bool = False
        self.secret: str | None = None

    @property
    def is_won(self) -> bool:
        return BLANK not in self.pattern

    @property
    def is_lost(self) -> bool:
        return self.guesses_left <= 0

    def already_guessed(self, letter: str) -> bool:
        return letter in self.guessed

    def guess(self, letter: str) -> Dict[str, int]:
        """
        Apply one letter guess.

        Returns:
          pattern -> family size for the whole partition (sorted by pattern),
          regardless of which family was committed.

        Raises:
          ValueError           malformed letter
          AlreadyGuessedError  letter guessed earlier this round
          RoundNotStartedError round already finalized
        """
        validate_letter(letter)
        if self.closed:
            raise RoundNotStartedError("round is over; prepare a new round before guessing")
        if letter in self.guessed:
            raise AlreadyGuessedError(letter)

        families = partition(self.pool, self.pattern, letter)
        selection, next_counter = select_family(
            families, self.config.difficulty, self.counter, current_pattern=self.pattern
        )

        # commit
        self.guessed.add(letter)
        self.counter = next_counter
        if selection.pattern == self.pattern:
            self.guesses_left -= 1
        else:
            self.pattern = selection.pattern
        self.pool = selection.words
        self.last_selection = selection

        return family_counts(families)

    def close(self, secret: str, reset_pool: List[str]) -> None:
        """Record the finalized secret and hand the pool back to the full length-filtered list."""
        self.secret = secret
        self.pool = list(reset_pool)
        self.closed = True
