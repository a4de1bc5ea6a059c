"""
Adversarial partitioning of the candidate set.

For a guess, every candidate is bucketed by the pattern it would produce.
The adversary then reveals the pattern whose bucket is largest, so the
player learns as little as possible. Equal-sized buckets are resolved by
the canonical pattern order (`pattern_key`): the smallest pattern wins.

Candidates are walked in sorted order, so buckets come out sorted and the
whole computation is reproducible for identical inputs.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .errors import InvalidGuess
from .scoring import compute_pattern, pattern_key

PartitionMap = Dict[str, List[str]]


def partition_by_pattern(guess: str, candidates: Iterable[str]) -> PartitionMap:
    """
    Group candidates by the pattern they yield for `guess`.

    Returns:
      dict pattern -> sorted list of candidates producing that pattern.
    """
    groups: PartitionMap = {}
    for w in sorted(set(candidates)):
        groups.setdefault(compute_pattern(w, guess), []).append(w)
    return groups


def select_pattern(guess: str, candidates: Iterable[str], N: int) -> Tuple[str, List[str]]:
    """
    Pick the pattern that keeps the most candidates alive.

    Args:
      guess      : the player's guess
      candidates : current candidate set (all of length N)
      N          : session word length

    Returns:
      (chosen_pattern, new_candidates) where new_candidates is a fresh sorted
      list holding exactly the candidates that produce chosen_pattern.

    Raises:
      InvalidGuess if len(guess) != N or the candidate set is empty.
    """
    candidates = list(candidates)
    if len(guess) != N:
        raise InvalidGuess(f"guess {guess!r} has length {len(guess)}, expected {N}")
    if not candidates:
        raise InvalidGuess("no candidate words remain")

    groups = partition_by_pattern(guess, candidates)

    # Largest group first; among equals the canonically smallest pattern.
    chosen = min(groups, key=lambda p: (-len(groups[p]), pattern_key(p)))
    return chosen, list(groups[chosen])
