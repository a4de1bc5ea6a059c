"""
Dictionary pruning: reduce a raw word list to the initial candidate set.
"""

from typing import Iterable, List

from .errors import InvalidLength


def prune_dictionary(words: Iterable[str], N: int) -> List[str]:
    """
    Keep words of exactly length N, de-duplicated and sorted.

    Raises:
      InvalidLength if N < 1.

    Example:
      prune_dictionary(["cat", "dog", "a", "tree"], 3) -> ["cat", "dog"]
    """
    if N < 1:
        raise InvalidLength(f"word length must be at least 1; got {N}")
    return sorted({w for w in words if len(w) == N})
