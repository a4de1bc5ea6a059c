"""
Lightweight guess validation for interactive drivers.

This answers "should the prompt accept this input?" without raising, so
the driving loop can re-prompt. A guess is acceptable iff:
  - it is a string
  - it is alphabetic only
  - it has exact length N
  - it exists in `allowed`, when an allowed list is given (strict mode)

The engine itself only enforces the length; anything that passes here is
safe to hand to AbsurdleSession.record.
"""

from typing import Iterable, Optional


def validate_guess(word: str, N: int, allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - `allowed` may be any iterable; a set is built on each call, so
        pass a set when calling in a loop.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    # Shape/characters check
    if len(w) != N or not w.isalpha():
        return False

    if allowed is None:
        return True
    allowed_set = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
    return w in allowed_set
