"""
Contract violations raised by the engine.

Both are caller errors: the driving loop decides whether to abort the
session or re-prompt. They subclass ValueError so generic callers that
already guard against bad arguments keep working.
"""


class AbsurdleError(ValueError):
    """Base class for engine precondition failures."""


class InvalidLength(AbsurdleError):
    """Requested word length is less than 1."""


class InvalidGuess(AbsurdleError):
    """Guess length differs from the session length, or no candidates remain."""
