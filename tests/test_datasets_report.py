from pathlib import Path
from hangman.datasets import describe_wordlist, pretty_summary, load_words


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_describe_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["cat", "car", "cop", "dog", "crane"])

    rep = describe_wordlist(str(words))
    assert rep["exists"] is True
    assert rep["unique_count"] == 5
    assert rep["by_length"] == {3: 4, 5: 1}
    assert rep["issues"] == []
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=5" in s and "lengths 3..5" in s and s.endswith("OK")


def test_describe_wordlist_flags_issues(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("cat\nCat\n\nice-cream\ncat\n", encoding="utf-8")

    rep = describe_wordlist(str(words))
    assert rep["lines"] == 4
    assert rep["unique_count"] == 2
    assert rep["nonstandard_lines"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_describe_wordlist_missing(tmp_path: Path):
    rep = describe_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False
    assert "MISSING" in pretty_summary(rep)


def test_load_words_normalizes(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("Cat\n  dog \n\ncat\nCOP\n", encoding="utf-8")
    assert load_words(words) == ["cat", "dog", "cop"]


def test_load_words_drops_unguessable(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("a-b\nabc\nice cream\nt-rex\ndog\n", encoding="utf-8")
    assert load_words(words) == ["abc", "dog"]
