"""Boundary to whatever produces challenges."""

import logging
from typing import Protocol

from .engine import DEFAULT_HEARTS, ChallengeSession
from .seed import normalize_room_code, seed_for_room
from .types import Challenge, ChallengeMode

logger = logging.getLogger(__name__)

DEFAULT_CHALLENGE_COUNT = 5


class GenerationError(Exception):
    """Raised when no usable challenge list could be produced."""


class ChallengeSource(Protocol):
    """Anything that can produce an ordered challenge list."""

    async def generate(self, topic: str, count: int, seed: int) -> list[Challenge]:
        """Produce up to ``count`` challenges about ``topic``.

        Raises:
            GenerationError: If the provider fails or nothing usable comes back
        """
        ...


async def start_session(
    source: ChallengeSource,
    topic: str,
    room_code: str,
    mode: ChallengeMode,
    count: int = DEFAULT_CHALLENGE_COUNT,
    initial_hearts: int = DEFAULT_HEARTS,
) -> ChallengeSession:
    """Fetch challenges for a room and open a session over them.

    The source is awaited exactly once; the session only exists after a
    complete list has arrived. A shorter list than requested is accepted.

    Args:
        source: Challenge producer
        topic: What to practice
        room_code: Code shared by everyone in the room
        mode: Answer mode
        count: Number of challenges to request
        initial_hearts: Starting health

    Raises:
        ValueError: If topic or room code is blank
        GenerationError: Propagated from the source
    """
    if not topic.strip():
        raise ValueError("Topic must not be blank")
    seed = seed_for_room(room_code)

    logger.info(
        "Requesting %d challenges on %r for room %s (seed %d)",
        count,
        topic,
        normalize_room_code(room_code),
        seed,
    )
    challenges = await source.generate(topic, count, seed)
    if len(challenges) < count:
        logger.warning("Source returned %d of %d requested challenges", len(challenges), count)

    return ChallengeSession(challenges, mode, initial_hearts)
