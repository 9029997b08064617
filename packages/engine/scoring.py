"""
Feedback (pattern) simulation for a single (guess, answer) pair.

Conventions:
  - CORRECT : letter in the correct position            ('G' / '2')
  - PRESENT : letter occurs somewhere else in the answer ('Y' / '1')
  - ABSENT  : letter does not occur in the answer        ('-' / '0')

This implementation is containment-only: a guessed letter is PRESENT when
the answer contains it ANYWHERE, however many times the guess repeats it.
There is no duplicate-letter accounting. The candidate filter in
`constraints.py` uses exactly the same semantics, and the guess scorer
relies on the two agreeing, so keep them in lock-step.

Examples:
  simulate("belle", "level") -> "-GYYY"   (as a pattern string)
  simulate("lemon", "level") -> "GG---"
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Tuple


class Feedback(IntEnum):
    """Per-position signal. Integer values match the console protocol."""
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


# A FeedbackVector is an immutable tuple, one Feedback per position.
FeedbackVector = Tuple[Feedback, ...]

# Pattern characters written by to_pattern.
_TO_CHAR = {Feedback.CORRECT: "G", Feedback.PRESENT: "Y", Feedback.ABSENT: "-"}

# Characters accepted by parse_pattern (case-insensitive).
PATTERN_TOKENS = {
    "g": Feedback.CORRECT, "2": Feedback.CORRECT,
    "y": Feedback.PRESENT, "1": Feedback.PRESENT,
    "-": Feedback.ABSENT, "0": Feedback.ABSENT,
    "b": Feedback.ABSENT, "k": Feedback.ABSENT, "x": Feedback.ABSENT,
}


def simulate(guess: str, answer: str) -> FeedbackVector:
    """
    Compute the feedback the oracle would give for `guess` if the secret
    were `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Raises:
      ValueError on a length mismatch.
    """
    if len(guess) != len(answer):
        raise ValueError(f"guess {guess!r} and answer {answer!r} differ in length")

    out = []
    for g, a in zip(guess, answer):
        if g == a:
            out.append(Feedback.CORRECT)
        elif g in answer:
            out.append(Feedback.PRESENT)
        else:
            out.append(Feedback.ABSENT)
    return tuple(out)


def all_correct(n: int) -> FeedbackVector:
    """Feedback vector of length n with every position CORRECT."""
    return (Feedback.CORRECT,) * n


def is_solved(feedback: Iterable[Feedback]) -> bool:
    return all(f == Feedback.CORRECT for f in feedback)


def to_pattern(feedback: Iterable[Feedback]) -> str:
    """(CORRECT, PRESENT, ABSENT) -> "GY-". Used for logs and CSV output."""
    return "".join(_TO_CHAR[Feedback(f)] for f in feedback)


def parse_pattern(text: str, N: int | None = None) -> FeedbackVector:
    """
    Parse a feedback string such as "GY--G", "21002" or "gybbg".

    Args:
      text : one token per position (see PATTERN_TOKENS)
      N    : optional required length

    Raises:
      ValueError if a character is not a feedback token or the length is off.
    """
    s = text.strip().lower()
    if N is not None and len(s) != N:
        raise ValueError(f"feedback {text!r} must have length {N}")
    try:
        return tuple(PATTERN_TOKENS[ch] for ch in s)
    except KeyError as e:
        raise ValueError(f"feedback {text!r} contains an unknown token {e.args[0]!r}") from e
