"""
Batch statistics over run_round results.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch into plain floats (JSON-safe for manifests).

    Keys:
      rounds, wins, win_rate, mean_guesses, median_guesses, p90_guesses,
      mean_wrong, mean_final_pool
    """
    if not results:
        return {"rounds": 0, "wins": 0, "win_rate": 0.0}

    success = np.array([bool(r["success"]) for r in results])
    guesses = np.array([r["guesses"] for r in results], dtype=float)
    wrong = np.array([r["wrong_guesses"] for r in results], dtype=float)
    # size of the pool the secret was drawn from
    final_pool = np.array([r["pool_sizes"][-1] for r in results], dtype=float)

    return {
        "rounds": int(success.size),
        "wins": int(success.sum()),
        "win_rate": float(success.mean()),
        "mean_guesses": float(guesses.mean()),
        "median_guesses": float(np.median(guesses)),
        "p90_guesses": float(np.percentile(guesses, 90)),
        "mean_wrong": float(wrong.mean()),
        "mean_final_pool": float(final_pool.mean()),
    }


def pretty_stats(stats: Dict) -> str:
    """One-line console summary of summarize() output."""
    if not stats.get("rounds"):
        return "rounds=0"
    return (
        f"rounds={stats['rounds']} | wins={stats['wins']} ({stats['win_rate']:.1%}) "
        f"| guesses mean={stats['mean_guesses']:.2f} p50={stats['median_guesses']:.0f} "
        f"p90={stats['p90_guesses']:.0f} | wrong mean={stats['mean_wrong']:.2f}"
    )
