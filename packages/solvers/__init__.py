from .ambiguity import best_guess, score_guess

__all__ = ["best_guess", "score_guess"]
