"""
Simulation harness primitives.

- run_round: play one round of adversarial hangman with a given guesser.
- run_batch: play many rounds in sequence with derived per-round seeds.

The guesser only sees public information (pattern, guessed letters and the
dictionary words consistent with them); the manager's pool stays hidden
until the round is finalized.

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, List, Tuple

from hangman.engine import BLANK, Difficulty, HangmanManager, filter_candidates


def round_seed(seed: int | None, idx: int) -> int | None:
    """Per-round seed derived from a batch seed (shared by run_batch and the CLI)."""
    return None if seed is None else seed + idx


def _assert_playable(manager: HangmanManager, word_length: int) -> None:
    """
    Guardrail: a round over an empty pool can never be finalized, and a word
    holding the blank marker or whitespace can never be fully revealed.
    """
    if manager.num_words(word_length) <= 0:
        raise ValueError(f"dictionary has no words of length {word_length}")
    unguessable = [w for w in manager.dictionary.words_of_length(word_length)
                   if BLANK in w or any(ch.isspace() for ch in w)]
    if unguessable:
        raise ValueError(f"words containing {BLANK!r} or whitespace cannot be played: "
                         f"{unguessable[:5]}")


def run_round(
        guesser,
        manager: HangmanManager,
        *,
        word_length: int,
        max_wrong: int,
        difficulty: Difficulty | str = Difficulty.HARD,
        seed: int | None = None,
) -> Dict:
    """
    Play one round until the guesser wins, loses, or runs out of letters.

    Args:
        guesser:     an object implementing BaseGuesser with next_guess(state)
        manager:     HangmanManager holding the dictionary
        word_length: length of the word for this round
        max_wrong:   wrong-guess budget
        difficulty:  manager difficulty (Difficulty or its name)
        seed:        seeds both the guesser RNG and the manager's final draw

    Returns:
        dict with keys:
            success (bool), guesses (int), wrong_guesses (int), time_ms (float),
            history (list[(letter, pattern)]), pool_sizes (list[int]),
            secret (str), final_pattern (str), N (int), difficulty (str)
    """
    _assert_playable(manager, word_length)

    manager.prep_for_round(word_length, max_wrong, difficulty)
    state = manager.round
    if seed is not None:
        manager.rng.seed(seed)

    words = manager.dictionary.words_of_length(word_length)
    guesser.reset(words=words, N=word_length, seed=seed)
    alphabet = sorted({ch for w in words for ch in w})

    history: List[Tuple[str, str]] = []
    pool_sizes: List[int] = [manager.num_words_current()]

    t0 = time.perf_counter_ns()
    turn = 0
    while not state.is_won and not state.is_lost:
        turn += 1
        view = {
            "turn": turn,
            "N": word_length,
            "pattern": state.pattern,
            "guessed": set(state.guessed),
            "guesses_left": state.guesses_left,
            "candidates": filter_candidates(words, state.pattern, state.guessed),
            "alphabet": alphabet,
        }
        if not guesser.open_letters(view):
            break  # alphabet exhausted

        letter = guesser.next_guess(view)
        manager.make_guess(letter)
        history.append((letter, manager.pattern()))
        pool_sizes.append(manager.num_words_current())

    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    success = state.is_won
    final_pattern = state.pattern
    secret = manager.secret_word()

    return {
        "success": success,
        "guesses": len(history),
        "wrong_guesses": max_wrong - state.guesses_left,
        "time_ms": dt,
        "history": history,
        "pool_sizes": pool_sizes,
        "secret": secret,
        "final_pattern": final_pattern,
        "N": word_length,
        "difficulty": state.config.difficulty.value,
    }


def run_batch(
        guesser,
        manager: HangmanManager,
        *,
        word_length: int,
        max_wrong: int,
        difficulty: Difficulty | str = Difficulty.HARD,
        games: int = 1,
        seed: int | None = None,
) -> List[Dict]:
    """
    Play `games` rounds back-to-back on the same manager.

    Each round's seed is derived from the base seed (seed + index) so runs
    are reproducible but rounds differ.
    """
    if games < 1:
        raise ValueError(f"games must be >= 1; got {games}")

    out: List[Dict] = []
    for idx in range(1, games + 1):
        case_seed = round_seed(seed, idx)
        r = run_round(
            guesser, manager, word_length=word_length, max_wrong=max_wrong,
            difficulty=difficulty, seed=case_seed,
        )
        out.append(r)
    return out
