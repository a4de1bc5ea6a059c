import pytest
from absurdle.engine import AbsurdleSession, InvalidGuess, InvalidLength, filter_candidates

WORDS = ["cat", "dog", "fig", "cot", "cog", "a", "tree", "dog"]


def test_from_words_prunes():
    s = AbsurdleSession.from_words(WORDS, 3)
    assert s.candidates == ["cat", "cog", "cot", "dog", "fig"]
    assert s.history == [] and not s.is_finished


def test_from_words_invalid_length():
    with pytest.raises(InvalidLength):
        AbsurdleSession.from_words(WORDS, 0)


def test_replay_to_win():
    s = AbsurdleSession.replay(["cat", "dog", "fig"], 3, ["cat", "dog"])
    assert s.patterns == ["---", "GGG"]
    assert s.guesses == 2
    assert s.is_finished
    assert s.candidates == ["dog"]


def test_record_is_atomic_on_error():
    s = AbsurdleSession.from_words(WORDS, 3)
    before = (list(s.candidates), list(s.history))
    with pytest.raises(InvalidGuess):
        s.record("dogs")
    assert (s.candidates, s.history) == before


def test_record_after_win_rejected():
    s = AbsurdleSession.replay(["cat"], 3, ["cat"])
    assert s.is_finished
    with pytest.raises(InvalidGuess):
        s.record("cat")


def test_empty_session_rejects_guess():
    s = AbsurdleSession.from_words(["tree"], 3)
    with pytest.raises(InvalidGuess):
        s.record("cat")


def test_candidates_match_player_deduction():
    words = ["cat", "cog", "cot", "dog", "fig", "hat", "hot", "tag"]
    s = AbsurdleSession.from_words(words, 3)
    sizes = [s.remaining]
    for g in ["hot", "cat", "tag"]:
        if s.is_finished:
            break
        s.record(g)
        sizes.append(s.remaining)
        assert s.candidates == filter_candidates(words, s.history, 3)
    assert sizes == sorted(sizes, reverse=True)


def test_sessions_are_isolated():
    a = AbsurdleSession.from_words(WORDS, 3)
    b = AbsurdleSession.from_words(WORDS, 3)
    a.record("zzz")
    assert b.history == []
    assert b.remaining == 5
