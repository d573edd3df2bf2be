import csv
import json
import random
from pathlib import Path

from apps.cli import run as cli
from hangman.datasets import load_words
from hangman.engine import HangmanManager
from hangman.guessers import create_guesser
from hangman.harness import run_batch


def test_cli_writes_csv_and_manifest(tmp_path: Path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("cat\ncar\ncop\ndog\ncab\ncrane\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = cli.main([
        "--words", str(words), "--length", "3", "--max-wrong", "26",
        "--difficulty", "medium", "--games", "3", "--seed", "1",
        "--outdir", str(outdir), "--progress", "off",
    ])
    assert rc == 0

    csvs = list(outdir.glob("run_*.csv"))
    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1

    with csvs[0].open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert all(r["guesser"] == "letter_freq" and r["difficulty"] == "medium" for r in rows)
    assert all(r["final_pattern"].startswith("'") for r in rows)

    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["num_rounds"] == 3
    assert manifest["stats"]["wins"] == 3
    assert "words=6" in capsys.readouterr().out


def test_cli_missing_length(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("cat\n", encoding="utf-8")
    rc = cli.main(["--words", str(words), "--length", "7", "--outdir", str(tmp_path),
                   "--progress", "off"])
    assert rc == 2


def test_cli_seed_matches_run_batch(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("cat\ncar\ncop\ndog\ncab\ncod\ndot\ntap\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = cli.main([
        "--words", str(words), "--length", "3", "--max-wrong", "4",
        "--difficulty", "easy", "--guesser", "random_letter", "--games", "4",
        "--seed", "9", "--outdir", str(outdir), "--progress", "off",
    ])
    assert rc == 0
    with next(outdir.glob("run_*.csv")).open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    manager = HangmanManager(load_words(words), rng=random.Random(0))
    results = run_batch(create_guesser("random_letter"), manager, word_length=3,
                        max_wrong=4, difficulty="easy", games=4, seed=9)

    expected = ["".join(letter for letter, _ in r["history"]) for r in results]
    assert [r["letters"] for r in rows] == expected
    assert [r["secret"] for r in rows] == [r["secret"] for r in results]
