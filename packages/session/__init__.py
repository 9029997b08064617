from .config import SessionConfig, GuessPoolPolicy, DEFAULT_MAX_GUESSES, DEFAULT_WORD_LENGTH
from .loop import Session, SessionOutcome, SessionState, ExhaustReason
from .oracle import Oracle, ConsoleOracle, SimulatedOracle, MalformedOracleInput

__all__ = [
    "SessionConfig", "GuessPoolPolicy", "DEFAULT_MAX_GUESSES", "DEFAULT_WORD_LENGTH",
    "Session", "SessionOutcome", "SessionState", "ExhaustReason",
    "Oracle", "ConsoleOracle", "SimulatedOracle", "MalformedOracleInput",
]
