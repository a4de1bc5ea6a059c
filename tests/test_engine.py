import itertools
import random
from collections import Counter

import pytest
from absurdle.engine import (
    compute_pattern, is_win, pattern_key, partition_by_pattern, select_pattern,
    prune_dictionary, filter_candidates, validate_guess, InvalidGuess, InvalidLength,
)

WORDS_5 = ["belle", "level", "lemon", "cools", "scoop", "crane", "raise", "stare",
           "trace", "cared", "allot", "total", "eerie", "geese"]


# --- golden patterns (candidate word, guess) ---
@pytest.mark.parametrize("word,guess,expected", [
    ("level", "belle", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
    ("total", "allot", "YY-YY"),
    ("bab", "abb", "YYG"),
    ("bba", "abb", "YGY"),
    ("letter", "settle", "-GGGYY"),
    ("palate", "planet", "GYY-YY"),
])
def test_compute_pattern_golden(word, guess, expected):
    assert compute_pattern(word, guess) == expected


def test_exact_claims_beat_present_claims():
    # the single 'e' of the candidate is exact at the end, so the early 'e' is absent
    assert compute_pattern("abcde", "eeeee") == "----G"


def test_compute_pattern_length_mismatch():
    with pytest.raises(InvalidGuess):
        compute_pattern("crane", "cran")


def test_self_pattern_is_all_exact():
    for w in WORDS_5:
        assert compute_pattern(w, w) == "GGGGG"
        assert is_win(compute_pattern(w, w))


def test_multiset_conservation():
    for word, guess in itertools.product(WORDS_5, repeat=2):
        patt = compute_pattern(word, guess)
        credited = Counter(g for g, m in zip(guess, patt) if m != "-")
        have = Counter(word)
        for ch, n in credited.items():
            assert n <= have[ch]


def test_pattern_key_orders_exact_present_absent():
    assert sorted(["-", "Y", "G"], key=pattern_key) == ["G", "Y", "-"]
    assert pattern_key("GY-") < pattern_key("G-G")


# --- pruning ---
def test_prune_dictionary_keeps_exact_length():
    assert prune_dictionary(["cat", "dog", "a", "tree"], 3) == ["cat", "dog"]


def test_prune_dictionary_dedupes_and_sorts():
    assert prune_dictionary(["dog", "cat", "dog"], 3) == ["cat", "dog"]


@pytest.mark.parametrize("n", [0, -1])
def test_prune_dictionary_invalid_length(n):
    with pytest.raises(InvalidLength):
        prune_dictionary(["cat"], n)


# --- partitioning ---
def test_larger_losing_group_beats_winning_group():
    patt, remaining = select_pattern("cat", ["cat", "dog", "fig"], 3)
    assert patt == "---"
    assert remaining == ["dog", "fig"]


def test_tie_goes_to_smallest_pattern():
    # abb -> GGG, bab -> YYG, bba -> YGY: all size 1, all-exact sorts first
    groups = partition_by_pattern("abb", ["abb", "bab", "bba"])
    assert groups == {"GGG": ["abb"], "YYG": ["bab"], "YGY": ["bba"]}
    assert select_pattern("abb", ["abb", "bab", "bba"], 3) == ("GGG", ["abb"])


def test_tie_break_uses_mark_order_not_string_order():
    # "YY" vs "--": present ranks before absent
    assert select_pattern("ba", ["ab", "cd"], 2) == ("YY", ["ab"])


def test_select_pattern_is_deterministic():
    shuffled = list(WORDS_5)
    random.Random(3).shuffle(shuffled)
    assert select_pattern("raise", WORDS_5, 5) == select_pattern("raise", shuffled, 5)


@pytest.mark.parametrize("guess", ["raise", "eerie", "scoop", "zzzzz"])
def test_narrowing_and_maximality(guess):
    patt, remaining = select_pattern(guess, WORDS_5, 5)
    groups = partition_by_pattern(guess, WORDS_5)
    assert set(remaining) <= set(WORDS_5)
    assert remaining == groups[patt]
    assert all(len(g) <= len(remaining) for g in groups.values())


def test_regrouping_the_chosen_set_is_stable():
    patt, remaining = select_pattern("stare", WORDS_5, 5)
    assert partition_by_pattern("stare", remaining) == {patt: remaining}


def test_select_pattern_returns_fresh_list():
    cands = ["cat", "dog", "fig"]
    _, remaining = select_pattern("zzz", cands, 3)
    remaining.append("xyz")
    assert cands == ["cat", "dog", "fig"]


def test_single_candidate():
    assert select_pattern("cat", ["cat"], 3) == ("GGG", ["cat"])
    assert select_pattern("cot", ["cat"], 3) == ("G-G", ["cat"])


def test_select_pattern_preconditions():
    with pytest.raises(InvalidGuess):
        select_pattern("cats", ["cat"], 3)
    with pytest.raises(InvalidGuess):
        select_pattern("cat", [], 3)


# --- player-side helpers ---
def test_filter_candidates_history():
    history = [("raise", "YY--G")]
    cand = filter_candidates(WORDS_5 + ["cat"], history, N=5)
    assert "crane" in cand and "stare" not in cand and "cat" not in cand


def test_validate_guess():
    assert validate_guess("CRANE", 5) is True
    assert validate_guess("cranes", 5) is False
    assert validate_guess("cr4ne", 5) is False
    assert validate_guess("crane", 5, allowed={"crane"}) is True
    assert validate_guess("stare", 5, allowed=["crane"]) is False
