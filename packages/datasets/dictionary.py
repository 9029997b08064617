"""
Dictionary loading for a session.

A WordDictionary reads two logical word lists once, before the session
starts:
  - answers: every word that may be the secret (the initial candidate set)
  - guesses: optional larger list of words the solver may guess in
             permissive mode; the answers are always part of the pool

Failures (missing file, no usable words) raise DictionaryError right away
so a session never starts on a broken dictionary.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .io import read_lines, clean_words

log = logging.getLogger(__name__)


class DictionaryError(ValueError):
    """The word lists could not be loaded."""


def load_wordlist(path: Path | str, N: int) -> frozenset:
    """Load one word list; skip malformed lines with a warning."""
    try:
        lines = read_lines(path)
    except FileNotFoundError as e:
        raise DictionaryError(f"word list not found: {path}") from e

    words, invalid = clean_words(lines, N)
    if invalid:
        log.warning("%s: skipped %d line(s) that are not %d-letter words", path, invalid, N)
    if not words:
        raise DictionaryError(f"word list {path} contains 0 valid {N}-letter words")

    out = frozenset(words)
    log.info("Loaded %d words from %s", len(out), path)
    return out


class WordDictionary:
    def __init__(self, answers_path: Path | str, guesses_path: Optional[Path | str] = None,
                 N: int = 5):
        self.answers_path = answers_path
        self.guesses_path = guesses_path
        self.N = int(N)
        self._answers: Optional[frozenset] = None

    def load(self) -> frozenset:
        """All words usable as the puzzle answer."""
        if self._answers is None:
            self._answers = load_wordlist(self.answers_path, self.N)
        return self._answers

    def load_guess_pool(self) -> frozenset:
        """Permissive guess pool: guesses ∪ answers (just answers if no guess list)."""
        answers = self.load()
        if self.guesses_path is None:
            return answers
        return load_wordlist(self.guesses_path, self.N) | answers
