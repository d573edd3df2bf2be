# apps/cli/run.py
"""
CLI entry point for running adversarial hangman simulations.

This script:
  1) Describes the word list (prints counts per length + SHA).
  2) Loads the list into a HangmanManager and instantiates the requested guesser.
  3) Plays a batch of rounds with a live progress indicator and writes:
       - CSV:  per-round results + guess/pattern history columns
       - JSON: manifest with config, word-list report, stats, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from hangman.datasets import describe_wordlist, pretty_summary, load_words
from hangman.engine import DEFAULT_MAX_WRONG, Difficulty, HangmanManager
from hangman.guessers import create_guesser, get_guesser_ids
from hangman.harness import run_round, summarize, pretty_stats
from hangman.harness.core import round_seed
from hangman.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main(argv=None):
    """
    Parse CLI args, describe the word list, run the batch with progress, and write outputs.
    """
    guesser_choices = ", ".join(get_guesser_ids())

    ap = argparse.ArgumentParser(description="evil hangman — run guesser simulations")
    ap.add_argument("--words", required=True, help="path to the dictionary (one word per line)")
    ap.add_argument("--guesser", default="letter_freq",
                    help=f"guesser id (one of: {guesser_choices})")
    ap.add_argument("--length", type=int, default=5, help="word length for every round")
    ap.add_argument("--max-wrong", type=int, default=DEFAULT_MAX_WRONG,
                    help="wrong guesses allowed per round")
    ap.add_argument("--difficulty", choices=[d.value for d in Difficulty], default="hard")
    ap.add_argument("--games", type=int, default=100, help="number of rounds to play")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--debug", action="store_true", help="log every partition and selection")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Describe the word list (counts, SHA, per-length breakdown)
    rep = describe_wordlist(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 2

    # 2) Load words and build the manager (its RNG picks the final secret)
    words = load_words(args.words)
    manager = HangmanManager(words, debug=args.debug, rng=random.Random(args.seed))
    available = manager.num_words(args.length)
    if available == 0:
        print(f"No words of length {args.length} in {args.words}", file=sys.stderr)
        return 2
    print(f"{available} words of length {args.length}")

    # 3) Instantiate guesser by id
    guesser = create_guesser(args.guesser)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0
    total = args.games
    rounds = range(1, total + 1)
    iterator = tqdm(rounds, ncols=80, desc="Playing", unit="round") if mode == "bar" else rounds

    # 5) Run batch with live progress
    for idx in iterator:
        # Same per-round seeds as run_batch, so --seed reproduces library runs
        per_seed = round_seed(args.seed, idx)
        r = run_round(
            guesser, manager,
            word_length=args.length,
            max_wrong=args.max_wrong,
            difficulty=args.difficulty,
            seed=per_seed,
        )
        r["guesser_id"] = guesser.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    stats = summarize(results)
    print(pretty_stats(stats))

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_rounds": len(results),
        "guesser_id": guesser.id,
        "stats": stats,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
