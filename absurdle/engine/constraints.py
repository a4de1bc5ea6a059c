"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the pruned dictionary)
  - a history of (guess, pattern) pairs revealed by the adversary
  - target word length N

Return:
  - words that are consistent with ALL feedback seen so far.

This is the player's view of the game. Because the adversary only ever
keeps the bucket matching the revealed pattern, this list always equals
the session's own candidate set.
"""

from typing import Iterable, List, Tuple

from .scoring import compute_pattern

# History is a sequence of (guess, pattern) tuples produced by the engine.
History = Iterable[Tuple[str, str]]  # (guess, pattern)


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words (length == N) that would produce exactly the recorded
    patterns for every (guess, pattern) in `history`.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        if len(w) != N:
            continue

        # A candidate survives only if it reproduces every past pattern.
        if all(compute_pattern(w, g) == patt for g, patt in history):
            out.append(w)

    return out
