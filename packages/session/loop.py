"""
Session loop: one puzzle from first guess to a terminal state.

    AWAITING_GUESS_SELECTION -> AWAITING_ORACLE_FEEDBACK -> (prune | SOLVED | EXHAUSTED)
          ^                                                   |
          +---------------------------------------------------+

The session owns all mutable state (candidate set, guess pool, known
letters, guess counter). Candidate sets and the pool are frozensets that are
replaced each round, never mutated in place. Words already played leave the
guess pool; rejected words leave both the pool and the candidate set.

Nothing here raises for "no candidates left" or "out of guesses": both end
the session in EXHAUSTED with an ExhaustReason.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import AbstractSet, List, Optional, Set, Tuple

from packages.engine import Feedback, FeedbackVector, prune, to_pattern
from packages.solvers import best_guess
from .config import GuessPoolPolicy, SessionConfig
from .oracle import Oracle

log = logging.getLogger(__name__)


class SessionState(Enum):
    AWAITING_GUESS_SELECTION = "awaiting_guess_selection"
    AWAITING_ORACLE_FEEDBACK = "awaiting_oracle_feedback"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class ExhaustReason(Enum):
    NO_CANDIDATES = "no_candidates"
    BUDGET_EXCEEDED = "budget_exceeded"


TERMINAL_STATES = (SessionState.SOLVED, SessionState.EXHAUSTED)


@dataclass
class SessionOutcome:
    state: SessionState
    guesses: int
    word: Optional[str] = None                  # set when SOLVED
    reason: Optional[ExhaustReason] = None      # set when EXHAUSTED
    history: List[Tuple[str, FeedbackVector]] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.state is SessionState.SOLVED


class Session:
    """
    Drive rounds of (select guess -> oracle feedback -> prune).

    Args:
        config:     SessionConfig (pool policy, budget, word length, opener)
        answers:    all words that may be the secret (initial CandidateSet)
        guess_pool: words the solver may propose in permissive mode; the
                    answers are always included
        oracle:     object implementing Oracle
    """

    def __init__(self, config: SessionConfig, answers: AbstractSet[str],
                 guess_pool: AbstractSet[str], oracle: Oracle):
        N = config.word_length
        self.config = config
        self.oracle = oracle
        self.candidates: frozenset = frozenset(w for w in answers if len(w) == N)
        self.guess_pool: frozenset = frozenset(w for w in guess_pool if len(w) == N) | self.candidates
        self.known_letters: List[Optional[str]] = [None] * N
        self.guesses = 0
        self.history: List[Tuple[str, FeedbackVector]] = []
        self.rejected: Set[str] = set()
        self.state = SessionState.AWAITING_GUESS_SELECTION
        self.current_guess: Optional[str] = None
        self.reason: Optional[ExhaustReason] = None
        self.word: Optional[str] = None

    # ---- state transitions ----

    def step(self) -> SessionState:
        """Advance one transition and return the new state."""
        if self.state is SessionState.AWAITING_GUESS_SELECTION:
            self._select_guess()
        elif self.state is SessionState.AWAITING_ORACLE_FEEDBACK:
            self._collect_feedback()
        return self.state

    def run(self) -> SessionOutcome:
        while self.state not in TERMINAL_STATES:
            self.step()
        return self.outcome()

    def outcome(self) -> SessionOutcome:
        return SessionOutcome(
            state=self.state, guesses=self.guesses, word=self.word,
            reason=self.reason, history=list(self.history),
        )

    # ---- selection ----

    def _pool_for_policy(self) -> frozenset:
        if self.config.pool_policy is GuessPoolPolicy.RESTRICTIVE:
            return self.candidates
        return self.guess_pool

    def _choose(self) -> Optional[str]:
        opener = self.config.opening_guess
        if self.guesses == 0 and opener is not None and opener not in self.rejected:
            return opener
        return best_guess(self._pool_for_policy(), self.candidates, workers=self.config.workers)

    def _exhaust(self, reason: ExhaustReason) -> None:
        log.info("Session exhausted after %d guesses (%s)", self.guesses, reason.value)
        self.state = SessionState.EXHAUSTED
        self.reason = reason

    def _select_guess(self) -> None:
        if not self.candidates:
            self._exhaust(ExhaustReason.NO_CANDIDATES)
            return

        guess = self._choose()
        if guess is None:
            self._exhaust(ExhaustReason.NO_CANDIDATES)
            return

        if not self.oracle.confirm_guess_acceptable(guess):
            # Rejected words vanish from both sets; the counter is untouched.
            log.debug("Guess %r rejected by oracle", guess)
            self.rejected.add(guess)
            self.guess_pool = self.guess_pool - {guess}
            self.candidates = self.candidates - {guess}
            return

        self.current_guess = guess
        self.state = SessionState.AWAITING_ORACLE_FEEDBACK

    # ---- feedback + pruning ----

    def _collect_feedback(self) -> None:
        guess = self.current_guess
        self.guesses += 1

        feedback: List[Feedback] = []
        for i, ch in enumerate(guess):
            if self.known_letters[i] == ch:
                feedback.append(Feedback.CORRECT)
            else:
                feedback.append(Feedback(self.oracle.report_feedback(guess, i)))
        fb: FeedbackVector = tuple(feedback)
        self.history.append((guess, fb))
        # Replaying a word can only repeat this feedback.
        self.guess_pool = self.guess_pool - {guess}

        if all(f == Feedback.CORRECT for f in fb):
            log.info("Solved %r in %d guesses", guess, self.guesses)
            self.state = SessionState.SOLVED
            self.word = guess
            return

        for i, f in enumerate(fb):
            if f == Feedback.CORRECT:
                self.known_letters[i] = guess[i]

        before = len(self.candidates)
        self.candidates = prune(self.candidates, guess, fb)
        log.debug("Guess %d: %s %s -> %d of %d candidates left",
                  self.guesses, guess, to_pattern(fb), len(self.candidates), before)

        if self.guesses >= self.config.max_guesses:
            self._exhaust(ExhaustReason.BUDGET_EXCEEDED)
        else:
            self.state = SessionState.AWAITING_GUESS_SELECTION
