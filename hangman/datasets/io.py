from __future__ import annotations
from pathlib import Path
from typing import List

from hangman.engine.partition import BLANK


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list: strip, lowercase, drop blanks and
    duplicates (first occurrence wins, order preserved).

    Words holding the blank marker '-' or inner whitespace are dropped: that
    character can never be guessed, so such a word could never be revealed.
    """
    seen, out = set(), []
    for ln in read_lines(p):
        w = ln.strip().lower()
        if not w or BLANK in w or any(ch.isspace() for ch in w):
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
