"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the words still consistent with every
    pattern revealed so far.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - Always terminates against the adversary: a guessed candidate sits
    alone in the all-exact bucket, so each miss removes at least that word.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        return candidates[self.rng.randrange(len(candidates))]
