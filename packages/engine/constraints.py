"""
Candidate filtering given observed feedback.

Given:
  - a set of candidate words
  - a guess and the feedback vector the oracle returned for it

Return:
  - a NEW frozenset holding only the candidates consistent with that feedback.

Each position is checked independently and the first failing position
rejects the candidate:
  - CORRECT : candidate[i] must equal guess[i]
  - PRESENT : candidate[i] must differ from guess[i] AND the candidate must
              contain guess[i] somewhere
  - ABSENT  : the candidate must not contain guess[i] anywhere

These are the same containment-only semantics as `scoring.simulate`, so
prune(S, g, simulate(g, a)) always keeps `a` when `a` is in S.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Sequence, Tuple

from .scoring import Feedback, FeedbackVector

# History is a sequence of (guess, feedback) tuples observed so far.
History = Iterable[Tuple[str, FeedbackVector]]


def is_consistent(candidate: str, guess: str, feedback: Sequence[Feedback]) -> bool:
    """Return True if `candidate` could still be the answer after `feedback`."""
    for i, f in enumerate(feedback):
        g = guess[i]
        if f == Feedback.CORRECT:
            if candidate[i] != g:
                return False
        elif f == Feedback.PRESENT:
            if candidate[i] == g or g not in candidate:
                return False
        elif g in candidate:
            return False
    return True


def prune(candidates: AbstractSet[str], guess: str, feedback: Sequence[Feedback]) -> frozenset:
    """
    Keep only candidates consistent with (guess, feedback).

    The input is never mutated; callers get a fresh frozenset whose size is
    at most len(candidates).
    """
    return frozenset(w for w in candidates if is_consistent(w, guess, feedback))


def filter_candidates(words: Iterable[str], history: History) -> frozenset:
    """
    Apply every (guess, feedback) pair in `history` in order.

    Handy for replaying a finished game, e.g. in the benchmark harness.
    """
    out = frozenset(words)
    for g, fb in history:
        out = prune(out, g, fb)
    return out
