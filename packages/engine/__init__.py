from .scoring import (
    Feedback, FeedbackVector, simulate, all_correct, is_solved, to_pattern, parse_pattern,
)
from .constraints import is_consistent, prune, filter_candidates
from .validation import validate_word, validate_guess

__all__ = [
    "Feedback", "FeedbackVector", "simulate", "all_correct", "is_solved", "to_pattern",
    "parse_pattern", "is_consistent", "prune", "filter_candidates", "validate_word",
    "validate_guess",
]
