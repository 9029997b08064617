"""
Session configuration.

One SessionConfig is built per puzzle (from CLI flags or directly in code)
and never changes while the session runs. The guess-pool policy is resolved
once from `hard_mode` instead of being re-checked at each guess.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from packages.engine import validate_word

# Defaults for a classic puzzle.
DEFAULT_MAX_GUESSES = 6
DEFAULT_WORD_LENGTH = 5


class GuessPoolPolicy(Enum):
    RESTRICTIVE = "hard"     # guess only among current candidates
    PERMISSIVE = "easy"      # guess from the full guess dictionary


@dataclass(frozen=True)
class SessionConfig:
    hard_mode: bool = False
    max_guesses: int = DEFAULT_MAX_GUESSES
    word_length: int = DEFAULT_WORD_LENGTH
    opening_guess: Optional[str] = None
    workers: int = 1

    def __post_init__(self):
        # Guardrails: fail early on nonsense values.
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be >= 1; got {self.max_guesses}")
        if self.word_length < 1:
            raise ValueError(f"word_length must be >= 1; got {self.word_length}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1; got {self.workers}")
        if self.opening_guess is not None:
            if not validate_word(self.opening_guess, self.word_length):
                raise ValueError(
                    f"opening_guess {self.opening_guess!r} is not a "
                    f"{self.word_length}-letter word")
            # frozen dataclass: normalize through object.__setattr__
            object.__setattr__(self, "opening_guess", self.opening_guess.strip().lower())

    @property
    def pool_policy(self) -> GuessPoolPolicy:
        return GuessPoolPolicy.RESTRICTIVE if self.hard_mode else GuessPoolPolicy.PERMISSIVE
