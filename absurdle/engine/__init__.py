from .errors import AbsurdleError, InvalidGuess, InvalidLength
from .scoring import compute_pattern, is_win, pattern_key
from .partition import partition_by_pattern, select_pattern
from .pruning import prune_dictionary
from .constraints import filter_candidates
from .validation import validate_guess
from .session import AbsurdleSession

__all__ = [
    "AbsurdleError", "InvalidGuess", "InvalidLength",
    "compute_pattern", "is_win", "pattern_key",
    "partition_by_pattern", "select_pattern", "prune_dictionary",
    "filter_candidates", "validate_guess", "AbsurdleSession",
]
