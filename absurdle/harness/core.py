"""
Scripted driving loop.

- run_case:  play one game of a solver against a fresh adversarial session.
- run_batch: play several seeded games with the same solver.

There is no built-in turn budget; `max_turns` is an optional safety cap for
experiments. The solver's view of the candidates is rebuilt from the
revealed history (what a human player could deduce), independently of the
session's own bookkeeping.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List
from absurdle.engine import AbsurdleSession, InvalidGuess, filter_candidates


def run_case(
        solver,
        *,
        words: Iterable[str],
        N: int,
        max_turns: int | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Play until the adversary is forced to reveal the all-exact pattern.

    Args:
        solver:    an object implementing BaseSolver with next_guess(state)
        words:     raw dictionary; pruned to length N for the session
        N:         word length
        max_turns: optional cap; the game is reported unsuccessful when hit
        seed:      RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), final_word (str | None)

    Raises:
        InvalidLength if N < 1; InvalidGuess if no word has length N.
    """
    session = AbsurdleSession.from_words(words, N)
    if not session.candidates:
        raise InvalidGuess(f"no candidate words of length {N}")
    solver.reset(words=session.candidates, N=N, seed=seed)

    # Player-side deduction starts from the same pruned dictionary
    candidates = list(session.candidates)

    t0 = time.time()
    while not session.is_finished:
        if max_turns is not None and session.guesses >= max_turns:
            break
        state = {
            "turn": session.guesses + 1,
            "history": list(session.history),
            "candidates": candidates,
            "N": N,
            "rng": solver.rng,
        }
        guess = solver.next_guess(state)
        patt = session.record(guess)
        candidates = filter_candidates(candidates, [(guess, patt)], N)

    dt = (time.time() - t0) * 1000.0
    return {
        "success": session.is_finished,
        "guesses": session.guesses,
        "time_ms": dt,
        "history": list(session.history),
        "final_word": session.history[-1][0] if session.is_finished else None,
    }


def run_batch(
        solver,
        *,
        words: List[str],
        N: int,
        games: int = 1,
        max_turns: int | None = None,
        seed: int | None = None,
) -> List[Dict]:
    """
    Run `games` cases back-to-back against identical sessions.

    The adversary is deterministic, so runs differ only through the solver's
    RNG. Each case's seed is derived from the base seed (seed + index).
    """
    out: List[Dict] = []
    for idx in range(1, games + 1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, words=words, N=N, max_turns=max_turns, seed=case_seed))
    return out
