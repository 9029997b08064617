"""
Oracles answer the solver's two questions:

  - confirm_guess_acceptable(word) -> bool
  - report_feedback(word, position) -> Feedback

ConsoleOracle asks a human over text prompts and re-prompts forever on
malformed input; SimulatedOracle knows the secret and answers directly.
Both calls are blocking; there is no timeout.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from packages.engine import Feedback, simulate, validate_guess
from packages.engine.scoring import PATTERN_TOKENS

FEEDBACK_INSTRUCTIONS = (
    "(0: wrong letter, 1: right letter wrong spot, 2: right letter right spot)"
)

_YES = {"y", "yes"}
_NO = {"n", "no"}


class MalformedOracleInput(ValueError):
    """An answer that is not in the expected token set."""


def parse_feedback_token(text: str) -> Feedback:
    """'2'/'g' -> CORRECT, '1'/'y' -> PRESENT, '0'/'b'/'-' -> ABSENT."""
    s = text.strip().lower()
    if len(s) != 1 or s not in PATTERN_TOKENS:
        raise MalformedOracleInput(f"not a feedback token: {text!r}")
    return PATTERN_TOKENS[s]


def parse_yes_no(text: str) -> bool:
    s = text.strip().lower()
    if s in _YES:
        return True
    if s in _NO:
        return False
    raise MalformedOracleInput(f"not a yes/no answer: {text!r}")


class Oracle:
    """Interface the session loop talks to."""

    def confirm_guess_acceptable(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def report_feedback(self, word: str, position: int) -> Feedback:
        raise NotImplementedError("Override in subclass")


class ConsoleOracle(Oracle):
    """
    Human-in-the-loop oracle.

    `input_fn` / `output_fn` default to the builtins; tests inject fakes.
    EOF on input (EOFError) propagates: the session cannot continue without
    an answer.
    """

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None,
                 output_fn: Optional[Callable[[str], None]] = None):
        self._input = input_fn or input
        self._output = output_fn or print

    def _ask(self, prompt: str, parse, retry_msg: str):
        answer = self._input(prompt)
        while True:
            try:
                return parse(answer)
            except MalformedOracleInput:
                answer = self._input(retry_msg)

    def ask_yes_no(self, question: str) -> bool:
        return self._ask(f"{question} (y/n) ", parse_yes_no,
                         "Invalid answer, please type 'y' or 'n' ")

    def confirm_guess_acceptable(self, word: str) -> bool:
        ok = self.ask_yes_no(f"I'm guessing {word}; is this a valid word?")
        if not ok:
            self._output("Got it, I'll choose something else.")
        return ok

    def report_feedback(self, word: str, position: int) -> Feedback:
        return self._ask(
            f"My guess is {word}; is {word[position]} in position {position} correct? "
            f"{FEEDBACK_INSTRUCTIONS} ",
            parse_feedback_token,
            f"Invalid response, please provide valid input. {FEEDBACK_INSTRUCTIONS} ",
        )


class SimulatedOracle(Oracle):
    """
    Oracle that knows the secret word.

    If `allowed` is given, only words in it are acceptable guesses;
    otherwise every proposed word is accepted.
    """

    def __init__(self, secret: str, allowed: Optional[Iterable[str]] = None):
        self.secret = secret.strip().lower()
        self.allowed = frozenset(allowed) if allowed is not None else None
        self.questions = 0  # feedback questions answered, handy for tests

    def confirm_guess_acceptable(self, word: str) -> bool:
        if self.allowed is None:
            return True
        return validate_guess(word, self.allowed, len(self.secret))

    def report_feedback(self, word: str, position: int) -> Feedback:
        self.questions += 1
        return simulate(word, self.secret)[position]
