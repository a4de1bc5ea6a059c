"""
Feedback pattern for a single (candidate word, guess) pair.

Conventions:
  - 'G'  : exact   = correct letter in the correct position
  - 'Y'  : present = correct letter in the wrong position
  - '-'  : absent  = letter not present (or present fewer times than guessed)

Algorithm (three passes, required for duplicate letters):
  1) Count every letter of the candidate word.
  2) Exact pass: mark matching positions 'G' and consume one count each.
  3) Present pass, left to right: mark 'Y' while the letter still has a
     remaining count, consuming it.
  4) Absent pass: everything still unresolved becomes '-'.

Exact claims are made before any present claim, so a letter is never
credited more times than it occurs in the candidate.
"""

from collections import Counter
from typing import Optional, Tuple

from .errors import InvalidGuess

EXACT = "G"
PRESENT = "Y"
ABSENT = "-"

# Canonical mark order used for tie-breaking: Exact < Present < Absent.
MARK_RANK = {EXACT: 0, PRESENT: 1, ABSENT: 2}


def compute_pattern(word: str, guess: str) -> str:
    """
    Compute the feedback pattern for `guess` against candidate `word`.

    Raises:
      InvalidGuess if the two words differ in length.

    Examples:
      compute_pattern("level", "belle") -> "-GYYY"
      compute_pattern("bab", "abb")     -> "YYG"
    """
    if len(word) != len(guess):
        raise InvalidGuess(
            f"guess {guess!r} has length {len(guess)}, expected {len(word)}"
        )

    n = len(guess)
    marks: list[Optional[str]] = [None] * n
    remaining = Counter(word)

    # Exact pass
    for i, (g, w) in enumerate(zip(guess, word)):
        if g == w:
            marks[i] = EXACT
            remaining[g] -= 1

    # Present pass
    for i, g in enumerate(guess):
        if marks[i] is None and remaining[g] > 0:
            marks[i] = PRESENT
            remaining[g] -= 1

    # Absent pass
    return "".join(m if m is not None else ABSENT for m in marks)


def is_win(pattern: str) -> bool:
    """True if the pattern carries no present or absent marks."""
    return PRESENT not in pattern and ABSENT not in pattern


def pattern_key(pattern: str) -> Tuple[int, ...]:
    """Sort key giving the canonical pattern order (Exact < Present < Absent)."""
    return tuple(MARK_RANK[ch] for ch in pattern)
