"""Challenge session engine."""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .types import Challenge, ChallengeMode
from .validator import Submission, validate

logger = logging.getLogger(__name__)

DEFAULT_HEARTS = 5
BASE_XP = 10
STREAK_BONUS_XP = 5
# Bonus applies when the streak before the award exceeds this
STREAK_BONUS_THRESHOLD = 2


class SessionState(str, Enum):
    """Lifecycle states of a session."""

    ACTIVE = "active"
    FINISHED = "finished"
    FAILED = "failed"


class Feedback(str, Enum):
    """Verdict shown for the current challenge."""

    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class SessionError(RuntimeError):
    """Base class for session misuse."""


class InvalidStateError(SessionError):
    """Raised when an operation is not allowed in the current state."""


class SessionOverError(SessionError, IndexError):
    """Raised when asking a terminal session for its current challenge."""


class SessionSummary(BaseModel):
    """Final numbers of a terminated session."""

    outcome: SessionState
    xp: int
    correct: int
    answered: int
    total: int
    best_streak: int
    hearts_left: int


class ChallengeSession:
    """State machine for one play-through of a challenge list.

    The session is ACTIVE while challenges remain, FINISHED once every
    challenge has been passed through, and FAILED once hearts run out.
    Each challenge goes ``submit`` (PENDING -> CORRECT/INCORRECT) then
    ``advance``.
    """

    def __init__(
        self,
        challenges: Sequence[Challenge],
        mode: ChallengeMode,
        initial_hearts: int = DEFAULT_HEARTS,
    ):
        """Initialize the session.

        Args:
            challenges: Ordered challenges, fixed for the session
            mode: Answer mode, fixed for the session
            initial_hearts: Starting health; non-positive fails immediately
        """
        self._challenges = tuple(challenges)
        self._mode = ChallengeMode(mode)
        self._initial_hearts = max(0, initial_hearts)
        self._hearts = self._initial_hearts
        self._xp = 0
        self._streak = 0
        self._best_streak = 0
        self._correct = 0
        self._answered = 0
        self._index = 0
        self._feedback = Feedback.PENDING
        self._state = SessionState.ACTIVE
        self._gap_inputs: list[str] = []
        self._full_input = ""

        if not self._challenges:
            self._terminate(SessionState.FINISHED)
        elif self._initial_hearts == 0:
            self._terminate(SessionState.FAILED)
        else:
            self._reset_inputs()

    # Observers

    @property
    def challenges(self) -> tuple[Challenge, ...]:
        return self._challenges

    @property
    def mode(self) -> ChallengeMode:
        return self._mode

    @property
    def initial_hearts(self) -> int:
        return self._initial_hearts

    @property
    def hearts(self) -> int:
        return self._hearts

    @property
    def xp(self) -> int:
        return self._xp

    @property
    def streak(self) -> int:
        return self._streak

    @property
    def best_streak(self) -> int:
        return self._best_streak

    @property
    def correct_count(self) -> int:
        return self._correct

    @property
    def answered_count(self) -> int:
        return self._answered

    @property
    def feedback(self) -> Feedback:
        return self._feedback

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def is_terminal(self) -> bool:
        return self._state is not SessionState.ACTIVE

    @property
    def progress(self) -> float:
        """Fraction of challenges already passed through."""
        if not self._challenges:
            return 1.0
        return self._index / len(self._challenges)

    @property
    def is_last_challenge(self) -> bool:
        return not self.is_terminal and self._index == len(self._challenges) - 1

    @property
    def out_of_hearts(self) -> bool:
        """True when the next advance will fail the session."""
        return self._state is SessionState.ACTIVE and self._hearts == 0

    # Answer buffer

    @property
    def user_inputs(self) -> tuple[str, ...]:
        return tuple(self._gap_inputs)

    @property
    def full_input(self) -> str:
        return self._full_input

    def set_gap_input(self, index: int, text: str) -> None:
        """Store the player's text for one gap of the current challenge."""
        self._require_pending()
        if not 0 <= index < len(self._gap_inputs):
            raise IndexError(f"Gap {index} out of range (0..{len(self._gap_inputs) - 1})")
        self._gap_inputs[index] = text

    def set_full_input(self, text: str) -> None:
        """Store the player's full-code answer for the current challenge."""
        self._require_pending()
        self._full_input = text

    def current_submission(self) -> Submission:
        """Return the buffered answer in the shape the current mode expects."""
        if self._mode is ChallengeMode.FILL_GAPS:
            return list(self._gap_inputs)
        return self._full_input

    # Transitions

    def current_challenge(self) -> Challenge:
        """Return the challenge being played.

        Raises:
            SessionOverError: If the session is terminal
        """
        if self.is_terminal:
            raise SessionOverError(f"Session is {self._state.value}; no current challenge")
        return self._challenges[self._index]

    def submit(self, submission: Optional[Submission] = None) -> bool:
        """Check an answer for the current challenge and score it.

        Args:
            submission: Answer to check; defaults to the buffered input

        Returns:
            True if the answer was correct

        Raises:
            InvalidStateError: If feedback is already shown or the session is over
        """
        self._require_pending()
        if submission is None:
            submission = self.current_submission()

        challenge = self._challenges[self._index]
        correct = validate(challenge, self._mode, submission)
        self._answered += 1

        if correct:
            bonus = STREAK_BONUS_XP if self._streak > STREAK_BONUS_THRESHOLD else 0
            self._xp += BASE_XP + bonus
            self._streak += 1
            self._correct += 1
            self._best_streak = max(self._best_streak, self._streak)
            self._feedback = Feedback.CORRECT
        else:
            self._hearts = max(0, self._hearts - 1)
            self._streak = 0
            self._feedback = Feedback.INCORRECT

        logger.debug(
            "Challenge %s (%d/%d) %s: xp=%d hearts=%d streak=%d",
            challenge.id,
            self._index + 1,
            len(self._challenges),
            self._feedback.value,
            self._xp,
            self._hearts,
            self._streak,
        )
        return correct

    def advance(self) -> SessionState:
        """Move past the answered challenge.

        Running out of hearts fails the session before any progression.

        Returns:
            The state after advancing

        Raises:
            InvalidStateError: If the session is over or no answer was submitted
        """
        if self.is_terminal:
            raise InvalidStateError(f"Cannot advance a {self._state.value} session")
        if self._feedback is Feedback.PENDING:
            raise InvalidStateError("Cannot advance before submitting an answer")

        if self._hearts == 0:
            self._terminate(SessionState.FAILED)
            return self._state

        self._index += 1
        self._feedback = Feedback.PENDING
        if self._index == len(self._challenges):
            self._gap_inputs = []
            self._full_input = ""
            self._terminate(SessionState.FINISHED)
        else:
            self._reset_inputs()
        return self._state

    def result(self) -> int:
        """Return the final XP.

        Raises:
            InvalidStateError: If the session has not terminated
        """
        if not self.is_terminal:
            raise InvalidStateError("Session still active; no result yet")
        return self._xp

    def summary(self) -> SessionSummary:
        """Return the final numbers of a terminated session."""
        xp = self.result()
        return SessionSummary(
            outcome=self._state,
            xp=xp,
            correct=self._correct,
            answered=self._answered,
            total=len(self._challenges),
            best_streak=self._best_streak,
            hearts_left=self._hearts,
        )

    def _require_pending(self) -> None:
        if self.is_terminal:
            raise InvalidStateError(f"Session is {self._state.value}")
        if self._feedback is not Feedback.PENDING:
            raise InvalidStateError(
                f"Challenge already answered ({self._feedback.value}); call advance()"
            )

    def _reset_inputs(self) -> None:
        challenge = self._challenges[self._index]
        self._gap_inputs = [""] * challenge.gap_count
        self._full_input = ""

    def _terminate(self, state: SessionState) -> None:
        self._state = state
        logger.info(
            "Session %s at challenge %d/%d with %d xp",
            state.value,
            self._index,
            len(self._challenges),
            self._xp,
        )
