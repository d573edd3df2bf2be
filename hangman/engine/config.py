"""
Round configuration.

A RoundConfig is fixed when a round is prepared and stays immutable until
the next round replaces it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_MAX_WRONG = 8


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        """Accept a Difficulty or its name/value in any case ("hard", "HARD")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise ValueError(
                f"Unknown difficulty: {value!r}. Available: {[d.value for d in cls]}") from e


@dataclass(frozen=True)
class RoundConfig:
    word_length: int
    max_wrong_guesses: int
    difficulty: Difficulty = Difficulty.HARD

    def __post_init__(self) -> None:
        if self.word_length <= 0:
            raise ValueError(f"word_length must be > 0; got {self.word_length}")
        if self.max_wrong_guesses < 1:
            raise ValueError(f"max_wrong_guesses must be >= 1; got {self.max_wrong_guesses}")
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "difficulty", Difficulty.parse(self.difficulty))
