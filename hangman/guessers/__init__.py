from __future__ import annotations
from typing import List
from .base import BaseGuesser, REGISTRY, register

from . import random_letter  # noqa: F401
from . import letter_freq  # noqa: F401
from . import min_worst_family  # noqa: F401


def create_guesser(guesser_id: str) -> BaseGuesser:
    """
    Factory: instantiate a registered guesser by id.
    """
    try:
        cls = REGISTRY[guesser_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown guesser id: {guesser_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_guesser_ids() -> List[str]:
    """
    Return all registered guesser ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
