import pytest
from hangman.engine import Difficulty, partition, family_counts, hardness_key, select_family
from hangman.engine.partition import response_pattern
from hangman.engine.selection import hardest, mercy_due, ranked
from hangman.engine.constraints import filter_candidates

WORDS = ["cat", "car", "cop", "dog"]


# --- partitioning ---
@pytest.mark.parametrize("word,pattern,letter,expected", [
    ("cat", "---", "c", "c--"),
    ("dog", "---", "c", "---"),
    ("cop", "c--", "a", "c--"),
    ("cat", "ca-", "t", "cat"),
    ("sees", "----", "e", "-ee-"),
    ("sees", "-ee-", "s", "sees"),
])
def test_response_pattern(word, pattern, letter, expected):
    assert response_pattern(word, pattern, letter) == expected


def test_partition_first_guess():
    fam = partition(WORDS, "---", "c")
    assert fam == {"c--": ["cat", "car", "cop"], "---": ["dog"]}
    assert family_counts(fam) == {"---": 1, "c--": 3}


@pytest.mark.parametrize("letter", list("abcdefghijklmnopqrstuvwxyz"))
def test_partition_is_exact(letter):
    pool = ["allot", "atoll", "alley", "otter", "tatty", "lotto", "aloft", "today"]
    fam = partition(pool, "-----", letter)
    flat = [w for ws in fam.values() for w in ws]
    assert sorted(flat) == sorted(pool)
    assert sum(family_counts(fam).values()) == len(pool)


def test_partition_empty_pool():
    assert partition([], "---", "a") == {}


def test_family_counts_sorted_by_pattern():
    fam = partition(["cat", "car"], "ca-", "t")
    assert list(family_counts(fam)) == ["ca-", "cat"]


# --- hardest-family order ---
@pytest.mark.parametrize("a,b", [
    (("c--", 3), ("---", 1)),   # size wins
    (("ca-", 1), ("cat", 1)),   # more blanks wins
    (("--a", 2), ("-a-", 2)),   # lexicographic on full tie
    (("---", 2), ("a--", 2)),
])
def test_hardness_key_orders(a, b):
    assert hardness_key(*a) < hardness_key(*b)


def test_ranked_is_total_and_transitive():
    fam = {
        "----": ["w1", "w2"],
        "a---": ["w3", "w4"],
        "-a--": ["w5", "w6"],
        "aa--": ["w7", "w8", "w9"],
        "a--a": ["w10"],
    }
    order = ranked(fam)
    assert order == ["aa--", "----", "-a--", "a---", "a--a"]
    assert ranked(fam, 2) == order[:2]
    assert hardest(fam) == "aa--"


# --- mercy schedule ---
@pytest.mark.parametrize("difficulty,counter,expected", [
    (Difficulty.HARD, 2, False),
    (Difficulty.HARD, 4, False),
    (Difficulty.MEDIUM, 1, False),
    (Difficulty.MEDIUM, 2, False),
    (Difficulty.MEDIUM, 3, False),
    (Difficulty.MEDIUM, 4, True),
    (Difficulty.MEDIUM, 8, True),
    (Difficulty.EASY, 1, False),
    (Difficulty.EASY, 2, True),
    (Difficulty.EASY, 3, False),
    (Difficulty.EASY, 6, True),
])
def test_mercy_due(difficulty, counter, expected):
    assert mercy_due(difficulty, counter) is expected


FAMILIES = {"a--": ["abc", "abd"], "---": ["xyz"]}


@pytest.mark.parametrize("difficulty,counter,pattern,mercy", [
    (Difficulty.HARD, 4, "a--", False),
    (Difficulty.MEDIUM, 3, "a--", False),
    (Difficulty.MEDIUM, 4, "---", True),
    (Difficulty.EASY, 1, "a--", False),
    (Difficulty.EASY, 2, "---", True),
])
def test_select_family(difficulty, counter, pattern, mercy):
    sel, nxt = select_family(FAMILIES, difficulty, counter, current_pattern="---")
    assert sel.pattern == pattern
    assert sel.words == FAMILIES[pattern]
    assert sel.mercy is mercy
    assert nxt == counter + 1


def test_select_family_does_not_mutate_map():
    fam = {k: list(v) for k, v in FAMILIES.items()}
    sel, _ = select_family(fam, Difficulty.EASY, 2, current_pattern="---")
    assert fam == FAMILIES
    sel.words.append("zzz")
    assert fam == FAMILIES


def test_mercy_skipped_with_single_family():
    fam = {"a--": ["abc", "abd"]}
    sel, nxt = select_family(fam, Difficulty.MEDIUM, 4, current_pattern="---")
    assert sel.pattern == "a--" and sel.mercy is False
    assert nxt == 5


def test_select_family_empty_map_keeps_pattern():
    sel, nxt = select_family({}, Difficulty.HARD, 1, current_pattern="-a-")
    assert sel.pattern == "-a-" and sel.words == []
    assert nxt == 2


# --- public-information filter ---
def test_filter_candidates():
    words = ["cat", "car", "cop", "dog", "cab"]
    assert filter_candidates(words, "ca-", {"c", "a", "t"}) == ["car", "cab"]
    assert filter_candidates(words, "---", {"c"}) == ["dog"]
    assert filter_candidates(words + ["cats"], "c--", {"c"}) == ["cat", "car", "cop", "cab"]
