"""
Word-list report for run manifests.

What this module does:
- Describe one dictionary file: line counts, distinct words, lines that are
  not a single lowercase a–z token, SHA-256 of the raw bytes, and how many
  distinct words exist per length.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

This describes the file; it does not reject anything. The engine accepts any
non-empty set of words.

Typical use:
    from hangman.datasets import describe_wordlist, pretty_summary
    rep = describe_wordlist("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib


@dataclass
class WordlistReport:
    path: str                 # file path (as given)
    exists: bool              # did the file exist on disk?
    lines: int                # non-blank lines
    unique_count: int         # distinct words after strip/lowercase
    nonstandard_lines: int    # lines that are not a lowercase a–z token
    sha256: str               # SHA-256 of raw file bytes (empty string if missing)
    by_length: Dict[int, int] = field(default_factory=dict)
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def describe_wordlist(path: str) -> Dict:
    """
    Build a WordlistReport for `path` and return it as a plain dict.

    A missing file is reported (exists=False, issue recorded), not raised.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(str(p), False, 0, 0, 0, "", issues=[f"file not found: {path}"])
        return asdict(rep)

    lines = 0
    nonstandard = 0
    words = set()
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            lines += 1
            if not (w.isalpha() and w.isascii() and w == w.lower()):
                nonstandard += 1
            words.add(w.lower())

    issues: List[str] = []
    if not words:
        issues.append("file contains 0 words")
    if lines != len(words):
        issues.append(f"{lines - len(words)} duplicate line(s)")
    if nonstandard:
        issues.append(f"{nonstandard} line(s) outside lowercase a–z")

    by_length = dict(sorted(Counter(len(w) for w in words).items()))
    rep = WordlistReport(
        path=str(p),
        exists=True,
        lines=lines,
        unique_count=len(words),
        nonstandard_lines=nonstandard,
        sha256=_sha256_file(p),
        by_length=by_length,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        words.txt | words=3000 (lines=3002, sha=abc123...) | lengths 2..15 | 2 duplicate line(s)
    """
    if not report["exists"]:
        return f"{report['path']} | MISSING"
    lengths = list(report["by_length"])
    span = f"{min(lengths)}..{max(lengths)}" if lengths else "-"
    status = "; ".join(report["issues"]) or "OK"
    return (
        f"{report['path']} | words={report['unique_count']} "
        f"(lines={report['lines']}, sha={report['sha256'][:12]}) "
        f"| lengths {span} | {status}"
    )
