"""
Per-game state for one adversarial session.

A session owns its candidate set and its history; nothing is shared
between sessions. The only mutation is `record`, which replaces the
candidate set with the selected bucket and appends one history entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .errors import InvalidGuess
from .partition import select_pattern
from .pruning import prune_dictionary
from .scoring import is_win


@dataclass
class AbsurdleSession:
    N: int
    candidates: List[str]
    history: List[Tuple[str, str]] = field(default_factory=list)

    @classmethod
    def from_words(cls, words: Iterable[str], N: int) -> "AbsurdleSession":
        """Prune a raw word list to length N and start a fresh session."""
        return cls(N=N, candidates=prune_dictionary(words, N))

    @classmethod
    def replay(cls, words: Iterable[str], N: int, guesses: Iterable[str]) -> "AbsurdleSession":
        """Start a session and record each guess in order."""
        session = cls.from_words(words, N)
        for g in guesses:
            session.record(g)
        return session

    @property
    def patterns(self) -> List[str]:
        return [p for _, p in self.history]

    @property
    def guesses(self) -> int:
        return len(self.history)

    @property
    def remaining(self) -> int:
        return len(self.candidates)

    @property
    def is_finished(self) -> bool:
        return bool(self.history) and is_win(self.history[-1][1])

    def record(self, guess: str) -> str:
        """
        Submit a guess and return the pattern the adversary reveals.

        Raises:
          InvalidGuess on a length mismatch, an empty candidate set, or a
          guess made after the game was already won. The session is left
          untouched in every case.
        """
        if self.is_finished:
            raise InvalidGuess("game is already finished")
        pattern, remaining = select_pattern(guess, self.candidates, self.N)
        self.candidates = remaining
        self.history.append((guess, pattern))
        return pattern
