"""Challenge system for gamified coding quizzes."""

from .engine import (
    ChallengeSession,
    Feedback,
    InvalidStateError,
    SessionError,
    SessionOverError,
    SessionState,
    SessionSummary,
)
from .seed import derive_seed, generate_room_code, normalize_room_code, seed_for_room
from .source import ChallengeSource, GenerationError, start_session
from .types import GAP_MARKER, Challenge, ChallengeMode
from .validator import validate

__all__ = [
    "GAP_MARKER",
    "Challenge",
    "ChallengeMode",
    "ChallengeSession",
    "ChallengeSource",
    "Feedback",
    "GenerationError",
    "InvalidStateError",
    "SessionError",
    "SessionOverError",
    "SessionState",
    "SessionSummary",
    "derive_seed",
    "generate_room_code",
    "normalize_room_code",
    "seed_for_room",
    "start_session",
    "validate",
]
