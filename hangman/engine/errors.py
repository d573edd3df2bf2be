"""
Protocol errors raised by the round state machine.

Bad arguments (empty dictionary, non-positive word length, malformed guess)
raise the builtin ValueError. The classes here cover calls made at the wrong
time: guessing before a round exists, repeating a letter, or finalizing a
round whose candidate pool is empty. Every one of them is raised before any
state is touched.
"""


class HangmanStateError(RuntimeError):
    """Base class: the call is not valid in the current round state."""


class RoundNotStartedError(HangmanStateError):
    pass


class AlreadyGuessedError(HangmanStateError):
    def __init__(self, letter: str):
        super().__init__(f"{letter!r} has already been guessed")
        self.letter = letter


class EmptyPoolError(HangmanStateError):
    pass
