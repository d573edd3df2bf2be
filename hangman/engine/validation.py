"""
Guess-letter validation.

This module answers one question: "is this value shaped like a letter
guess?" A guess is well-formed iff:
  - it is a string
  - it is exactly one character
  - it is not the blank marker '-' and not whitespace

Whether the letter was already guessed, or whether a round exists at all,
is a question about round state and is answered by RoundState itself.
Dictionary membership is not checked: any character may be guessed.
"""

from __future__ import annotations

from .partition import BLANK


def is_valid_letter(letter: object) -> bool:
    """Return True if `letter` is a well-formed guess per the rules above."""
    if not isinstance(letter, str) or len(letter) != 1:
        return False
    return letter != BLANK and not letter.isspace()


def validate_letter(letter: object) -> str:
    """
    Return `letter` unchanged if well-formed.

    Raises:
      ValueError otherwise.
    """
    if not is_valid_letter(letter):
        raise ValueError(f"guess must be a single non-blank character other than {BLANK!r}; "
                         f"got {letter!r}")
    return letter  # type: ignore[return-value]
