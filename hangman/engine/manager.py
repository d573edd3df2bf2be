"""
HangmanManager: the public face of the engine.

Keeps a dictionary for its whole lifetime and one RoundState at a time.
Instead of choosing a secret word when a round starts, it keeps every word
that is still consistent with the board and, after each guess, commits to
the response pattern that leaves the guesser the hardest pool (softened on
EASY/MEDIUM by the mercy schedule). A single word is only drawn when
`secret_word()` is called at the end of the round.

One instance is not safe for concurrent use; serialize calls or use one
manager per active round.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable

from hangman.presentation import format_family_counts, format_guesses

from .config import Difficulty, RoundConfig
from .dictionary import Dictionary
from .errors import RoundNotStartedError
from .finalize import resolve_secret
from .round import RoundState

log = logging.getLogger(__name__)


class HangmanManager:
    def __init__(self, words: Iterable[str] | None, debug: bool = False,
                 rng: random.Random | None = None):
        """
        Args:
          words : non-empty collection of distinct words
          debug : emit DEBUG log records for every partition and selection
          rng   : random source for the final draw (seed it for reproducible runs)

        Raises:
          ValueError if `words` is None or empty.
        """
        self.dictionary = Dictionary(words)
        self.debug = bool(debug)
        self.rng = rng if rng is not None else random.Random()
        self._round: RoundState | None = None

    # ---- round setup ----

    def prep_for_round(self, word_length: int, max_wrong_guesses: int,
                       difficulty: Difficulty | str = Difficulty.HARD) -> None:
        """
        Start a new round, discarding any previous round state.

        Raises:
          ValueError if word_length <= 0 or max_wrong_guesses < 1.
        """
        config = RoundConfig(word_length, max_wrong_guesses, difficulty)
        self._round = RoundState(config, self.dictionary.words_of_length(word_length))
        if self.debug:
            log.debug("new round: length=%d budget=%d difficulty=%s pool=%d",
                      word_length, max_wrong_guesses, config.difficulty.value,
                      len(self._round.pool))

    def _require_round(self) -> RoundState:
        if self._round is None:
            raise RoundNotStartedError("no round in progress; call prep_for_round() first")
        return self._round

    # ---- queries ----

    def num_words(self, length: int) -> int:
        """Words of `length` in the full dictionary (ignores round state)."""
        return self.dictionary.count(length)

    def num_words_current(self) -> int:
        return len(self._require_round().pool)

    def guesses_left(self) -> int:
        return self._require_round().guesses_left

    def guesses_made(self) -> str:
        """Guessed letters as "[a, c, e]" (ascending), "[]" when none."""
        return format_guesses(self._require_round().guessed)

    def already_guessed(self, letter: str) -> bool:
        return self._require_round().already_guessed(letter)

    def pattern(self) -> str:
        return self._require_round().pattern

    @property
    def round(self) -> RoundState | None:
        """Current round state, for inspection (None before the first round)."""
        return self._round

    # ---- mutations ----

    def make_guess(self, letter: str) -> Dict[str, int]:
        """
        Guess `letter` and commit to a word family.

        Returns:
          pattern -> family size for every family of this guess, ordered by
          pattern. Useful for testing and debugging; it does not depend on
          which family was chosen.

        Raises:
          ValueError           malformed letter
          RoundNotStartedError no round prepared (or the round was finalized)
          AlreadyGuessedError  letter already guessed this round
        """
        state = self._require_round()
        before = state.pattern
        counts = state.guess(letter)

        if self.debug:
            sel = state.last_selection
            log.debug("guess %r on %s: %s", letter, before, format_family_counts(counts))
            log.debug("committed %s (%d words%s); guesses left %d",
                      sel.pattern, len(sel.words), ", mercy" if sel.mercy else "",
                      state.guesses_left)
        return counts

    def secret_word(self) -> str:
        """
        Resolve the round to one concrete word.

        Draws uniformly from the pool bound to the last committed pattern,
        then resets the pool to every dictionary word of the round's length
        and closes the round. Later calls return the same word.

        Raises:
          RoundNotStartedError no round prepared
          EmptyPoolError       the pool is empty
        """
        state = self._require_round()
        if state.closed:
            return state.secret  # type: ignore[return-value]

        secret = resolve_secret(state.pool, self.rng)
        state.close(secret, self.dictionary.words_of_length(state.config.word_length))
        if self.debug:
            log.debug("round over: secret=%r pattern=%s", secret, state.pattern)
        return secret
