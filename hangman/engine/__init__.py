from .config import Difficulty, RoundConfig, DEFAULT_MAX_WRONG
from .constraints import filter_candidates
from .dictionary import Dictionary
from .errors import (
    HangmanStateError,
    RoundNotStartedError,
    AlreadyGuessedError,
    EmptyPoolError,
)
from .finalize import resolve_secret
from .manager import HangmanManager
from .partition import BLANK, partition, family_counts
from .round import RoundState
from .selection import Selection, hardness_key, select_family
from .validation import validate_letter

__all__ = [
    "Difficulty", "RoundConfig", "DEFAULT_MAX_WRONG",
    "filter_candidates",
    "Dictionary",
    "HangmanStateError", "RoundNotStartedError", "AlreadyGuessedError", "EmptyPoolError",
    "resolve_secret",
    "HangmanManager",
    "BLANK", "partition", "family_counts",
    "RoundState",
    "Selection", "hardness_key", "select_family",
    "validate_letter",
]
