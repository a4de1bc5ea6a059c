"""
Minimise Largest Group.

Idea:
  The adversary always keeps the largest bucket, so the only number that
  matters for a guess is the size of its worst bucket against the CURRENT
  candidates. Pick the guess whose worst bucket is smallest.
  Tie-break: more distinct patterns, then a guess that could itself be the
  answer, then RNG.
"""

from __future__ import annotations
from typing import List, Tuple
from .base import BaseSolver, register
from absurdle.engine import partition_by_pattern


def _worst_and_spread(guess: str, candidates: List[str]) -> Tuple[int, int]:
    """
    Return (worst_bucket_size, num_distinct_patterns) for guess.
    """
    groups = partition_by_pattern(guess, candidates)
    return max(len(g) for g in groups.values()), len(groups)


@register
class MinLargestSolver(BaseSolver):
    id = "min_largest"
    name = "Minimise Largest Group"
    version = "1.0.0"

    CANDIDATE_ONLY_LIMIT = 200
    POOL_CAP = 400  # cap pool when using the full dictionary (pre-filtered by a quick heuristic)

    def _distinct_letter_score(self, w: str, alphabet_counts: dict) -> int:
        return sum(alphabet_counts.get(ch, 0) for ch in set(w))

    def _select_pool(self, candidates: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return candidates
        # quick prefilter by distinct-letter coverage vs candidates
        alphabet_counts: dict = {}
        for w in candidates:
            for ch in set(w):
                alphabet_counts[ch] = alphabet_counts.get(ch, 0) + 1
        ranked = sorted(self.words, key=lambda w: self._distinct_letter_score(w, alphabet_counts), reverse=True)
        pool = ranked[: self.POOL_CAP]
        # one live candidate keeps the worst bucket below len(candidates)
        if candidates[0] not in pool:
            pool.append(candidates[0])
        return pool

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if len(candidates) <= 2:
            return candidates[0]

        live = set(candidates)
        best_key = None
        best: List[str] = []

        for g in self._select_pool(candidates):
            worst, spread = _worst_and_spread(g, candidates)
            key = (worst, -spread, g not in live)
            if best_key is None or key < best_key:
                best_key, best = key, [g]
            elif key == best_key:
                best.append(g)

        return best[self.rng.randrange(len(best))]
