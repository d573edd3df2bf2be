"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-round results into a tidy CSV (one row per round).
- write_manifest: dump a JSON manifest with config, word-list report and stats.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-a--" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = [
    "guesser", "N", "difficulty", "secret", "success", "guesses",
    "wrong_guesses", "time_ms", "letters", "patterns", "final_pattern",
]


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-a--" -> "'-a--"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      guesser, N, difficulty, secret, success, guesses, wrong_guesses,
      time_ms, letters, patterns, final_pattern

    `letters` is the guess order ("eaotr"); `patterns` is the pattern after
    each guess joined with spaces.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            hist = r.get("history", [])
            w.writerow({
                "guesser": r.get("guesser_id", "?"),
                "N": r["N"],
                "difficulty": r["difficulty"],
                "secret": r["secret"],
                "success": r["success"],
                "guesses": r["guesses"],
                "wrong_guesses": r["wrong_guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "letters": "".join(letter for letter, _ in hist),
                "patterns": _excel_safe_pattern(" ".join(patt for _, patt in hist)),
                "final_pattern": _excel_safe_pattern(r["final_pattern"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and summary data.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (guesser, length, difficulty, seed, games, outdir)
      - wordlist: output of datasets.describe_wordlist(...)
      - stats: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
