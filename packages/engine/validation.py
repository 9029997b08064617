"""
Lightweight word validation.

This module answers two questions:
  - validate_word:  "Is this a well-formed N-letter word?"
  - validate_guess: "Is it well-formed AND in the allowed collection?"

A well-formed word is a string of exactly N ASCII letters a–z (case is
normalized before checking). The simulated oracle uses validate_guess to
answer "is this an acceptable word?"; the configuration and dictionary
loader use validate_word for shape checks.
"""

from typing import AbstractSet, Iterable
from string import ascii_lowercase

_ALPHABET = frozenset(ascii_lowercase)


def validate_word(word: str, N: int) -> bool:
    """Return True if `word` is N letters from a–z (after strip + lower)."""
    if not isinstance(word, str):
        return False
    w = word.strip().lower()
    return len(w) == N and all(ch in _ALPHABET for ch in w)


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is a valid guess.

    Args:
      word    : proposed guess
      allowed : allowed words (lowercase); a set/frozenset is used as-is,
                anything else is materialized into a set first
      N       : required word length
    """
    if not validate_word(word, N):
        return False

    allowed_set: AbstractSet[str] = (
        allowed if isinstance(allowed, (set, frozenset)) else {a.strip().lower() for a in allowed}
    )
    return word.strip().lower() in allowed_set
