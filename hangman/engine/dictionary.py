"""
Immutable word dictionary for one manager's lifetime.

The dictionary never shrinks: rounds copy their starting pool out of it
(`words_of_length`) and narrow the copy. Length queries always answer from
the full dictionary, even after a round has narrowed its own pool.
"""

from __future__ import annotations

from collections import Counter
from typing import FrozenSet, Iterable, List


class Dictionary:
    def __init__(self, words: Iterable[str] | None):
        """
        Args:
          words : collection of distinct words (duplicates collapse).

        Raises:
          ValueError if `words` is None or empty.
        """
        if words is None:
            raise ValueError("words must not be None")
        self._words: FrozenSet[str] = frozenset(words)
        if not self._words:
            raise ValueError("words must contain at least one word")
        self._by_length: Counter[int] = Counter(len(w) for w in self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def count(self, length: int) -> int:
        """Number of dictionary words with exactly `length` characters."""
        return self._by_length.get(length, 0)

    def words_of_length(self, length: int) -> List[str]:
        """Fresh, sorted list of words of `length` (a new round's pool)."""
        return sorted(w for w in self._words if len(w) == length)
