"""
Text rendering for round state.

Kept apart from the engine so the state machine never builds display
strings itself.
"""

from __future__ import annotations

from typing import Iterable, Mapping


def format_guesses(letters: Iterable[str]) -> str:
    """
    Guessed letters in ascending order, bracketed, comma-space separated.

    Examples:
      format_guesses({"e", "a", "c"}) -> "[a, c, e]"
      format_guesses([])              -> "[]"
    """
    return "[" + ", ".join(sorted(letters)) + "]"


def format_family_counts(counts: Mapping[str, int]) -> str:
    """One-line view of a partition, e.g. "c--:3 ---:1" (largest first)."""
    items = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return " ".join(f"{patt}:{n}" for patt, n in items)
