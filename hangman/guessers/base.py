from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global guesser registry ----
REGISTRY: Dict[str, Type["BaseGuesser"]] = {}


def register(cls: Type["BaseGuesser"]) -> Type["BaseGuesser"]:
    """
    Decorator: @register on a guesser class adds it to REGISTRY by its `id`.
    """
    gid = getattr(cls, "id", None)
    if not gid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if gid in REGISTRY:
        raise ValueError(f"Duplicate guesser id: {gid}")
    REGISTRY[gid] = cls
    return cls


# ---- Base class that guessers inherit ----
class BaseGuesser:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 0
        self.words: List[str] = []
        self.rng = random.Random()

    def reset(self, *, words: List[str], N: int, seed: int | None = None) -> None:
        self.words = [w for w in words if len(w) == N]
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")

    @staticmethod
    def open_letters(state: dict) -> List[str]:
        """
        Unguessed letters worth trying: those in the consistent candidates,
        or else anything left in the alphabet. Sorted for stable tie-breaks.
        """
        guessed = state["guessed"]
        letters = {ch for w in state["candidates"] for ch in w} - guessed
        if not letters:
            letters = set(state["alphabet"]) - guessed
        return sorted(letters)
